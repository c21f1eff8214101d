"""CSV export of poker sessions."""

import csv
import io
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from poker_tracker.domain.models import AuthContext
from poker_tracker.domain.profit import quantize_money, to_decimal
from poker_tracker.domain.sessions import PokerSession
from poker_tracker.services.sessions import SessionRepository
from poker_tracker.services.time_ranges import (
    filter_sessions_for_export,
    normalize_export_range,
)

CSV_HEADER = (
    "Date",
    "Duration (hours)",
    "Buy-in",
    "Rebuy",
    "Cash Out",
    "Profit/Loss",
    "Notes",
)
_TENTH = Decimal("0.1")


@dataclass(frozen=True)
class CsvExport:
    """Rendered CSV with its download filename."""

    filename: str
    content: str


@dataclass
class ExportService:
    """Service for exporting a user's sessions as CSV."""

    repository: SessionRepository

    def export(
        self, context: AuthContext, time_range: str | None, now: datetime | date
    ) -> CsvExport:
        """Export sessions inside the export range, oldest first."""
        applied_range = normalize_export_range(time_range)
        sessions = self.repository.list_sessions(context.user_id, descending=False)
        selected = filter_sessions_for_export(sessions, applied_range, now)
        return CsvExport(
            filename=f"poker-sessions-{applied_range}.csv",
            content=to_csv(selected),
        )


def to_csv(sessions: Iterable[PokerSession]) -> str:
    """Render sessions as CSV text in the order given."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    # A bare carriage return is only quoted when it is part of the terminator.
    quoting_writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_ALL)
    writer.writerow(CSV_HEADER)
    for session in sessions:
        row = session_row(session)
        if "\r" in row[-1]:
            quoting_writer.writerow(row)
        else:
            writer.writerow(row)
    return buffer.getvalue()


def session_row(session: PokerSession) -> list[str]:
    """Return the CSV cells for one session."""
    return [
        session.session_date.isoformat(),
        format_hours(session.duration_minutes),
        format_money(session.buy_in_amount),
        format_money(session.rebuy_amount),
        format_money(session.cash_out_amount),
        format_money(session.profit),
        session.notes or "",
    ]


def format_hours(duration_minutes: int) -> str:
    """Format minutes as hours with one decimal place."""
    hours = Decimal(duration_minutes) / Decimal(60)
    return str(hours.quantize(_TENTH, rounding=ROUND_HALF_UP))


def format_money(value: object) -> str:
    """Format a money value with exactly two decimal places."""
    return str(quantize_money(to_decimal(value)))
