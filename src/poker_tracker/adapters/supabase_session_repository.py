"""Supabase-backed poker session repository."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from decimal import Decimal
from uuid import UUID

from supabase import Client

from poker_tracker.domain.profit import to_decimal
from poker_tracker.domain.sessions import PokerSession, SessionDraft
from poker_tracker.services.sessions import SessionRepository

_TABLE = "poker_sessions"
_COLUMNS = (
    "id, user_id, session_date, duration_minutes, buy_in_amount, rebuy_amount, "
    "cash_out_amount, notes, created_at, updated_at"
)


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for poker sessions."""

    client: Client

    def create_session(self, user_id: UUID, draft: SessionDraft) -> PokerSession:
        """Insert a session row and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "user_id": str(user_id),
                    "session_date": draft.session_date.isoformat(),
                    "duration_minutes": draft.duration_minutes,
                    "buy_in_amount": str(draft.buy_in_amount),
                    "rebuy_amount": str(draft.rebuy_amount),
                    "cash_out_amount": str(draft.cash_out_amount),
                    "notes": draft.notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create poker session")
        return _parse_row(response.data[0])

    def list_sessions(
        self, user_id: UUID, descending: bool = True
    ) -> list[PokerSession]:
        """Return the user's sessions ordered by date."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("session_date", desc=descending)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_session(self, user_id: UUID, session_id: UUID) -> PokerSession | None:
        """Return a session by id if the user owns it."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("id", str(session_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_session(
        self, user_id: UUID, session_id: UUID, changes: dict[str, object]
    ) -> PokerSession | None:
        """Update a session the user owns and return the stored row."""
        payload = {name: _serialize(value) for name, value in changes.items()}
        payload["updated_at"] = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table(_TABLE)
            .update(payload)
            .eq("id", str(session_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_session(self, user_id: UUID, session_id: UUID) -> bool:
        """Delete a session the user owns."""
        response = (
            self.client.table(_TABLE)
            .delete()
            .eq("id", str(session_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _serialize(value: object) -> object:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


def _parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def _parse_row(row: dict[str, object]) -> PokerSession:
    return PokerSession(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        session_date=date.fromisoformat(str(row["session_date"])),
        duration_minutes=int(row["duration_minutes"]),
        buy_in_amount=to_decimal(row.get("buy_in_amount")),
        rebuy_amount=to_decimal(row.get("rebuy_amount")),
        cash_out_amount=to_decimal(row.get("cash_out_amount")),
        notes=row.get("notes"),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )
