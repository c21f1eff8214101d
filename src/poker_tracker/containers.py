"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from supabase import create_client

from poker_tracker.adapters.supabase_auth_client import SupabaseTokenVerifier
from poker_tracker.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from poker_tracker.config import Settings
from poker_tracker.services.auth import AuthService
from poker_tracker.services.export import ExportService
from poker_tracker.services.sessions import SessionService
from poker_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    session_service: SessionService
    stats_service: StatsService
    export_service: ExportService
    clock: Callable[[], datetime]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    session_repository = SupabaseSessionRepository(supabase_client)
    auth_service = AuthService(SupabaseTokenVerifier(supabase_client))
    timezone = ZoneInfo(resolved_settings.reference_timezone)

    def clock() -> datetime:
        return datetime.now(tz=timezone)

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        session_service=SessionService(session_repository),
        stats_service=StatsService(session_repository),
        export_service=ExportService(session_repository),
        clock=clock,
    )
