"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from poker_tracker.adapters.supabase_auth_client import SupabaseTokenVerifier
from poker_tracker.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from poker_tracker.domain.sessions import SessionDraft


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "delete": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    auth: object | None = None

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _row(user_id: str, **overrides) -> dict[str, object]:  # type: ignore[no-untyped-def]
    row: dict[str, object] = {
        "id": str(uuid4()),
        "user_id": user_id,
        "session_date": "2024-01-15",
        "duration_minutes": 120,
        "buy_in_amount": "100.10",
        "rebuy_amount": "0.00",
        "cash_out_amount": "150.20",
        "notes": None,
        "created_at": "2024-01-15T10:00:00+00:00",
        "updated_at": "2024-01-15T10:00:00+00:00",
    }
    row.update(overrides)
    return row


def test_create_session_sends_money_as_text() -> None:
    client = FakeSupabaseClient()
    table = client.table("poker_sessions")
    user_id = uuid4()
    table.queue("insert", [_row(str(user_id))])
    repository = SupabaseSessionRepository(client)

    session = repository.create_session(
        user_id,
        SessionDraft(
            session_date=date(2024, 1, 15),
            duration_minutes=120,
            buy_in_amount=Decimal("100.10"),
            cash_out_amount=Decimal("150.20"),
        ),
    )

    assert table.last_payload["buy_in_amount"] == "100.10"
    assert table.last_payload["rebuy_amount"] == "0"
    assert table.last_payload["session_date"] == "2024-01-15"
    assert session.profit == Decimal("50.10")
    assert session.created_at is not None


def test_create_session_raises_when_insert_returns_nothing() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseSessionRepository(client)

    with pytest.raises(RuntimeError, match="Failed"):
        repository.create_session(
            uuid4(),
            SessionDraft(
                session_date=date(2024, 1, 15),
                duration_minutes=60,
                buy_in_amount=Decimal(1),
                cash_out_amount=Decimal(1),
            ),
        )


def test_list_sessions_parses_numeric_columns() -> None:
    client = FakeSupabaseClient()
    table = client.table("poker_sessions")
    user_id = uuid4()
    table.queue(
        "select",
        [
            _row(str(user_id), buy_in_amount=200, rebuy_amount=50.5, cash_out_amount="180"),
        ],
    )
    repository = SupabaseSessionRepository(client)

    sessions = repository.list_sessions(user_id, descending=False)

    assert table.last_filters == [("user_id", str(user_id))]
    assert table.last_order == ("session_date", False)
    assert sessions[0].rebuy_amount == Decimal("50.5")
    assert sessions[0].profit == Decimal("-70.5")


def test_get_session_scopes_by_owner() -> None:
    client = FakeSupabaseClient()
    table = client.table("poker_sessions")
    user_id = uuid4()
    session_id = uuid4()
    repository = SupabaseSessionRepository(client)

    assert repository.get_session(user_id, session_id) is None
    assert ("user_id", str(user_id)) in table.last_filters
    assert ("id", str(session_id)) in table.last_filters


def test_update_session_serializes_changes() -> None:
    client = FakeSupabaseClient()
    table = client.table("poker_sessions")
    user_id = uuid4()
    table.queue("update", [_row(str(user_id), cash_out_amount="80.00")])
    repository = SupabaseSessionRepository(client)

    session = repository.update_session(
        user_id,
        uuid4(),
        {"cash_out_amount": Decimal("80.00"), "session_date": date(2024, 2, 1)},
    )

    assert table.last_payload["cash_out_amount"] == "80.00"
    assert table.last_payload["session_date"] == "2024-02-01"
    assert "updated_at" in table.last_payload
    assert session is not None
    assert session.cash_out_amount == Decimal("80.00")


def test_delete_session_reports_missing_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("poker_sessions")
    user_id = uuid4()
    table.queue("delete", [_row(str(user_id))])
    repository = SupabaseSessionRepository(client)

    assert repository.delete_session(user_id, uuid4()) is True
    assert repository.delete_session(user_id, uuid4()) is False


@dataclass
class FakeAuth:
    users: dict[str, str] = field(default_factory=dict)

    def get_user(self, jwt: str):  # type: ignore[no-untyped-def]
        user_id = self.users.get(jwt)
        if user_id is None:
            return None
        return SimpleNamespace(user=SimpleNamespace(id=user_id))


def test_token_verifier_resolves_user() -> None:
    user_id = uuid4()
    client = FakeSupabaseClient(auth=FakeAuth(users={"token": str(user_id)}))
    verifier = SupabaseTokenVerifier(client)

    assert verifier.verify("token") == user_id
    assert verifier.verify("unknown") is None
