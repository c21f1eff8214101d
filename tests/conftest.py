"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from poker_tracker.config import Settings
from poker_tracker.containers import AppContainer
from poker_tracker.domain.sessions import PokerSession, SessionDraft
from poker_tracker.services.auth import AuthService, TokenVerifier
from poker_tracker.services.export import ExportService
from poker_tracker.services.sessions import SessionRepository, SessionService
from poker_tracker.services.stats import StatsService

FIXED_NOW = datetime(2024, 3, 31, 18, 30, tzinfo=UTC)
USER_TOKEN = "user-token"
OTHER_TOKEN = "other-token"


def make_session(  # noqa: PLR0913
    session_date: date = date(2024, 1, 15),
    duration_minutes: int = 120,
    buy_in: str = "100.00",
    rebuy: str = "0.00",
    cash_out: str = "150.00",
    notes: str | None = None,
    user_id: UUID | None = None,
) -> PokerSession:
    """Build a session with string money so no float sneaks in."""
    return PokerSession(
        id=uuid4(),
        user_id=user_id or uuid4(),
        session_date=session_date,
        duration_minutes=duration_minutes,
        buy_in_amount=Decimal(buy_in),
        rebuy_amount=Decimal(rebuy),
        cash_out_amount=Decimal(cash_out),
        notes=notes,
    )


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests."""

    sessions: dict[UUID, PokerSession] = field(default_factory=dict)

    def add(self, session: PokerSession) -> PokerSession:
        self.sessions[session.id] = session
        return session

    def create_session(self, user_id: UUID, draft: SessionDraft) -> PokerSession:
        now = datetime.now(tz=UTC)
        session = PokerSession(
            id=uuid4(),
            user_id=user_id,
            session_date=draft.session_date,
            duration_minutes=draft.duration_minutes,
            buy_in_amount=draft.buy_in_amount,
            rebuy_amount=draft.rebuy_amount,
            cash_out_amount=draft.cash_out_amount,
            notes=draft.notes,
            created_at=now,
            updated_at=now,
        )
        return self.add(session)

    def list_sessions(
        self, user_id: UUID, descending: bool = True
    ) -> list[PokerSession]:
        owned = [s for s in self.sessions.values() if s.user_id == user_id]
        return sorted(owned, key=lambda s: s.session_date, reverse=descending)

    def get_session(self, user_id: UUID, session_id: UUID) -> PokerSession | None:
        session = self.sessions.get(session_id)
        if session is None or session.user_id != user_id:
            return None
        return session

    def update_session(
        self, user_id: UUID, session_id: UUID, changes: dict[str, object]
    ) -> PokerSession | None:
        session = self.get_session(user_id, session_id)
        if session is None:
            return None
        updated = replace(session, **changes, updated_at=datetime.now(tz=UTC))
        self.sessions[session_id] = updated
        return updated

    def delete_session(self, user_id: UUID, session_id: UUID) -> bool:
        if self.get_session(user_id, session_id) is None:
            return False
        del self.sessions[session_id]
        return True


@dataclass
class FakeTokenVerifier(TokenVerifier):
    """Token verifier backed by a fixed token table."""

    tokens: dict[str, UUID] = field(default_factory=dict)

    def verify(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def other_user_id() -> UUID:
    return uuid4()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def container(
    settings: Settings,
    session_repository: InMemorySessionRepository,
    user_id: UUID,
    other_user_id: UUID,
) -> AppContainer:
    verifier = FakeTokenVerifier(
        tokens={USER_TOKEN: user_id, OTHER_TOKEN: other_user_id}
    )
    return AppContainer(
        settings=settings,
        auth_service=AuthService(verifier),
        session_service=SessionService(session_repository),
        stats_service=StatsService(session_repository),
        export_service=ExportService(session_repository),
        clock=lambda: FIXED_NOW,
    )
