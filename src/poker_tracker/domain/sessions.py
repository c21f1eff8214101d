"""Domain models for poker sessions."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from poker_tracker.domain.profit import calculate_profit


@dataclass(frozen=True)
class PokerSession:
    """Represents a persisted poker session."""

    id: UUID
    user_id: UUID
    session_date: date
    duration_minutes: int
    buy_in_amount: Decimal
    rebuy_amount: Decimal
    cash_out_amount: Decimal
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def profit(self) -> Decimal:
        """Signed profit for this session."""
        return calculate_profit(
            self.buy_in_amount, self.rebuy_amount, self.cash_out_amount
        )


@dataclass(frozen=True)
class SessionDraft:
    """Values for a session that has not been stored yet."""

    session_date: date
    duration_minutes: int
    buy_in_amount: Decimal
    cash_out_amount: Decimal
    rebuy_amount: Decimal = Decimal(0)
    notes: str | None = None


@dataclass(frozen=True)
class SessionUpdate:
    """Partial changes to a stored session; None keeps the stored value."""

    session_date: date | None = None
    duration_minutes: int | None = None
    buy_in_amount: Decimal | None = None
    rebuy_amount: Decimal | None = None
    cash_out_amount: Decimal | None = None
    notes: str | None = None

    def as_changes(self) -> dict[str, object]:
        """Return only the fields that were provided."""
        return {
            name: value
            for name, value in (
                ("session_date", self.session_date),
                ("duration_minutes", self.duration_minutes),
                ("buy_in_amount", self.buy_in_amount),
                ("rebuy_amount", self.rebuy_amount),
                ("cash_out_amount", self.cash_out_amount),
                ("notes", self.notes),
            )
            if value is not None
        }
