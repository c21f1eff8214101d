"""Bearer token authentication."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from poker_tracker.domain.models import AuthContext

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "bearer "


class AuthenticationError(Exception):
    """Raised when a request carries no valid bearer token."""


class TokenVerifier(Protocol):
    """Resolves access tokens to user ids."""

    def verify(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, else None."""


@dataclass
class AuthService:
    """Turns Authorization headers into request contexts."""

    verifier: TokenVerifier

    def authenticate(self, authorization: str | None) -> AuthContext:
        """Return the caller's context or raise AuthenticationError."""
        token = parse_bearer_token(authorization)
        if token is None:
            raise AuthenticationError("Missing bearer token")
        user_id = self.verifier.verify(token)
        if user_id is None:
            logger.warning("Rejected access token")
            raise AuthenticationError("Invalid or expired token")
        return AuthContext(user_id=user_id, access_token=token)


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    if not authorization.lower().startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return token or None
