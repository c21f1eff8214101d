"""Domain models for the poker tracker."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller for a single request."""

    user_id: UUID
    access_token: str
