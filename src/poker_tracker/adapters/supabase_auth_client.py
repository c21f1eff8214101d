"""Supabase Auth token verifier."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from poker_tracker.services.auth import TokenVerifier

logger = logging.getLogger(__name__)


@dataclass
class SupabaseTokenVerifier(TokenVerifier):
    """Resolves access tokens through Supabase Auth."""

    client: Client

    def verify(self, access_token: str) -> UUID | None:
        """Return the user id for a valid access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError:
            logger.info("Supabase rejected access token")
            return None
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))
