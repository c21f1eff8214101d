"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class SessionStats:
    """Aggregate results over a collection of sessions."""

    total_profit: Decimal
    total_sessions: int
    total_hours: Decimal
    hourly_rate: Decimal


@dataclass(frozen=True)
class BankrollPoint:
    """One point of the cumulative bankroll chart."""

    label: str
    session_date: date
    running_total: Decimal
