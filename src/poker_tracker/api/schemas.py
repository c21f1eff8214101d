"""Pydantic request and response models for the HTTP API."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from poker_tracker.domain.profit import quantize_money
from poker_tracker.domain.sessions import PokerSession, SessionDraft, SessionUpdate
from poker_tracker.domain.stats import BankrollPoint, SessionStats
from poker_tracker.services.stats import DashboardSummary


class SessionCreateRequest(BaseModel):
    """Payload for recording a new session."""

    session_date: date
    duration_minutes: int
    buy_in_amount: Decimal
    rebuy_amount: Decimal = Decimal(0)
    cash_out_amount: Decimal
    notes: str | None = None

    def to_draft(self) -> SessionDraft:
        """Convert the payload into a domain draft."""
        return SessionDraft(
            session_date=self.session_date,
            duration_minutes=self.duration_minutes,
            buy_in_amount=self.buy_in_amount,
            rebuy_amount=self.rebuy_amount,
            cash_out_amount=self.cash_out_amount,
            notes=self.notes,
        )


class SessionUpdateRequest(BaseModel):
    """Payload for editing a session; omitted fields keep their value."""

    session_date: date | None = None
    duration_minutes: int | None = None
    buy_in_amount: Decimal | None = None
    rebuy_amount: Decimal | None = None
    cash_out_amount: Decimal | None = None
    notes: str | None = None

    def to_update(self) -> SessionUpdate:
        """Convert the payload into a domain update."""
        return SessionUpdate(**self.model_dump())


class SessionResponse(BaseModel):
    """A stored session together with its profit."""

    id: UUID
    user_id: UUID
    session_date: date
    duration_minutes: int
    buy_in_amount: Decimal
    rebuy_amount: Decimal
    cash_out_amount: Decimal
    notes: str | None
    created_at: datetime | None
    updated_at: datetime | None
    profit: Decimal

    @classmethod
    def from_session(cls, session: PokerSession) -> "SessionResponse":
        """Build a response from a domain session."""
        return cls(
            id=session.id,
            user_id=session.user_id,
            session_date=session.session_date,
            duration_minutes=session.duration_minutes,
            buy_in_amount=quantize_money(session.buy_in_amount),
            rebuy_amount=quantize_money(session.rebuy_amount),
            cash_out_amount=quantize_money(session.cash_out_amount),
            notes=session.notes,
            created_at=session.created_at,
            updated_at=session.updated_at,
            profit=quantize_money(session.profit),
        )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class UserResponse(BaseModel):
    """Identity of the authenticated caller."""

    id: UUID


class StatsResponse(BaseModel):
    """Aggregate stats rounded for display."""

    time_range: str
    total_profit: Decimal
    total_sessions: int
    total_hours: Decimal
    hourly_rate: Decimal

    @classmethod
    def from_stats(cls, time_range: str, stats: SessionStats) -> "StatsResponse":
        """Round raw stats to cents at the HTTP boundary."""
        return cls(
            time_range=time_range,
            total_profit=quantize_money(stats.total_profit),
            total_sessions=stats.total_sessions,
            total_hours=quantize_money(stats.total_hours),
            hourly_rate=quantize_money(stats.hourly_rate),
        )


class BankrollPointResponse(BaseModel):
    """One chart point."""

    label: str
    session_date: date
    running_total: Decimal

    @classmethod
    def from_point(cls, point: BankrollPoint) -> "BankrollPointResponse":
        """Build a response from a domain chart point."""
        return cls(
            label=point.label,
            session_date=point.session_date,
            running_total=quantize_money(point.running_total),
        )


class BankrollResponse(BaseModel):
    """Cumulative bankroll series for a time range."""

    time_range: str
    points: list[BankrollPointResponse]


class DashboardResponse(BaseModel):
    """Stats and chart series for a time range."""

    stats: StatsResponse
    series: list[BankrollPointResponse]

    @classmethod
    def from_summary(cls, summary: DashboardSummary) -> "DashboardResponse":
        """Build a response from a dashboard summary."""
        return cls(
            stats=StatsResponse.from_stats(summary.time_range, summary.stats),
            series=[BankrollPointResponse.from_point(p) for p in summary.series],
        )
