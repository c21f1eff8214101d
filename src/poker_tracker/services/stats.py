"""Statistics service for poker sessions."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from poker_tracker.domain.models import AuthContext
from poker_tracker.domain.sessions import PokerSession
from poker_tracker.domain.stats import BankrollPoint, SessionStats
from poker_tracker.services.sessions import SessionRepository
from poker_tracker.services.time_ranges import filter_sessions, normalize_chart_range

MINUTES_PER_HOUR = Decimal(60)


@dataclass
class DashboardSummary:
    """Stats and chart series for one time range."""

    time_range: str
    stats: SessionStats
    series: list[BankrollPoint]


@dataclass
class StatsService:
    """Service for computing a user's stats over a time range."""

    repository: SessionRepository

    def get_stats(
        self, context: AuthContext, time_range: str | None, now: datetime | date
    ) -> SessionStats:
        """Return aggregate stats for sessions inside the chart range."""
        return aggregate(self._sessions_in_range(context, time_range, now))

    def get_bankroll_series(
        self, context: AuthContext, time_range: str | None, now: datetime | date
    ) -> list[BankrollPoint]:
        """Return the cumulative bankroll series inside the chart range."""
        return cumulative_series(self._sessions_in_range(context, time_range, now))

    def get_dashboard(
        self, context: AuthContext, time_range: str | None, now: datetime | date
    ) -> DashboardSummary:
        """Return stats and series computed from a single fetch."""
        sessions = self._sessions_in_range(context, time_range, now)
        return DashboardSummary(
            time_range=normalize_chart_range(time_range),
            stats=aggregate(sessions),
            series=cumulative_series(sessions),
        )

    def _sessions_in_range(
        self, context: AuthContext, time_range: str | None, now: datetime | date
    ) -> list[PokerSession]:
        sessions = self.repository.list_sessions(context.user_id, descending=True)
        return filter_sessions(sessions, time_range, now)


def aggregate(sessions: Iterable[PokerSession]) -> SessionStats:
    """Aggregate profit, count, hours and hourly rate over sessions.

    The hourly rate is zero whenever no time was played, so empty or
    zero-duration collections never divide by zero.
    """
    total_profit = Decimal(0)
    total_minutes = 0
    total_sessions = 0
    for session in sessions:
        total_profit += session.profit
        total_minutes += session.duration_minutes
        total_sessions += 1

    total_hours = Decimal(total_minutes) / MINUTES_PER_HOUR
    hourly_rate = total_profit / total_hours if total_hours > 0 else Decimal(0)
    return SessionStats(
        total_profit=total_profit,
        total_sessions=total_sessions,
        total_hours=total_hours,
        hourly_rate=hourly_rate,
    )


def cumulative_series(sessions: Iterable[PokerSession]) -> list[BankrollPoint]:
    """Return one running-profit point per session, oldest first.

    Sessions on the same date keep their input order.
    """
    ordered = sorted(sessions, key=lambda session: session.session_date)
    running_total = Decimal(0)
    points = []
    for session in ordered:
        running_total += session.profit
        points.append(
            BankrollPoint(
                label=format_date_label(session.session_date),
                session_date=session.session_date,
                running_total=running_total,
            )
        )
    return points


def format_date_label(day: date) -> str:
    """Format a chart label like ``Jan 15, 2024``."""
    return f"{day.strftime('%b')} {day.day}, {day.year}"
