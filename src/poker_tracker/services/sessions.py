"""Poker session CRUD business logic."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from poker_tracker.domain.models import AuthContext
from poker_tracker.domain.sessions import PokerSession, SessionDraft, SessionUpdate

logger = logging.getLogger(__name__)

MIN_DURATION_MINUTES = 1
_AMOUNT_FIELDS = ("buy_in_amount", "rebuy_amount", "cash_out_amount")


class InvalidSessionError(ValueError):
    """Raised when session values fail validation."""


class SessionRepository(Protocol):
    """Persistence interface for poker sessions, always scoped by owner."""

    def create_session(self, user_id: UUID, draft: SessionDraft) -> PokerSession:
        """Create a session and return it."""

    def list_sessions(
        self, user_id: UUID, descending: bool = True
    ) -> list[PokerSession]:
        """Return all sessions for a user ordered by session date."""

    def get_session(self, user_id: UUID, session_id: UUID) -> PokerSession | None:
        """Return a session owned by the user, if present."""

    def update_session(
        self, user_id: UUID, session_id: UUID, changes: dict[str, object]
    ) -> PokerSession | None:
        """Apply changes to a session owned by the user and return it."""

    def delete_session(self, user_id: UUID, session_id: UUID) -> bool:
        """Delete a session owned by the user; return whether it existed."""


@dataclass
class SessionService:
    """Application service for recording and editing sessions."""

    repository: SessionRepository

    def create(self, context: AuthContext, draft: SessionDraft) -> PokerSession:
        """Validate and store a new session."""
        _validate_values(
            {
                "duration_minutes": draft.duration_minutes,
                "buy_in_amount": draft.buy_in_amount,
                "rebuy_amount": draft.rebuy_amount,
                "cash_out_amount": draft.cash_out_amount,
            }
        )
        session = self.repository.create_session(context.user_id, draft)
        logger.info(
            "Created poker session",
            extra={"user_id": str(context.user_id), "session_id": str(session.id)},
        )
        return session

    def list_sessions(self, context: AuthContext) -> list[PokerSession]:
        """Return the user's sessions, newest first."""
        return self.repository.list_sessions(context.user_id, descending=True)

    def get(self, context: AuthContext, session_id: UUID) -> PokerSession | None:
        """Return a single session owned by the user."""
        return self.repository.get_session(context.user_id, session_id)

    def update(
        self, context: AuthContext, session_id: UUID, update: SessionUpdate
    ) -> PokerSession | None:
        """Apply a partial update to a session owned by the user."""
        changes = update.as_changes()
        _validate_values(changes)
        if not changes:
            return self.repository.get_session(context.user_id, session_id)
        session = self.repository.update_session(context.user_id, session_id, changes)
        if session:
            logger.info(
                "Updated poker session",
                extra={"user_id": str(context.user_id), "session_id": str(session_id)},
            )
        return session

    def delete(self, context: AuthContext, session_id: UUID) -> bool:
        """Delete a session owned by the user."""
        deleted = self.repository.delete_session(context.user_id, session_id)
        if deleted:
            logger.info(
                "Deleted poker session",
                extra={"user_id": str(context.user_id), "session_id": str(session_id)},
            )
        return deleted


def _validate_values(values: dict[str, object]) -> None:
    duration = values.get("duration_minutes")
    if duration is not None and int(duration) < MIN_DURATION_MINUTES:
        raise InvalidSessionError("Duration must be at least 1 minute")
    for name in _AMOUNT_FIELDS:
        amount = values.get(name)
        if amount is not None and Decimal(str(amount)) < 0:
            label = name.removesuffix("_amount").replace("_", "-")
            raise InvalidSessionError(f"{label} amount must not be negative")
