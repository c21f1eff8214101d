"""Bearer token dependency and identity endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from poker_tracker.api.schemas import UserResponse
from poker_tracker.domain.models import AuthContext
from poker_tracker.services.auth import AuthenticationError

if TYPE_CHECKING:
    from poker_tracker.containers import AppContainer

router = APIRouter(prefix="/api/auth", tags=["auth"])


async def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> AuthContext:
    """Resolve the caller from the Authorization header."""
    container: AppContainer = request.app.state.container
    try:
        return container.auth_service.authenticate(authorization)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


@router.get("/me", response_model=UserResponse)
async def get_me(context: AuthContext = Depends(require_user)) -> UserResponse:
    """Return the authenticated user's id."""
    return UserResponse(id=context.user_id)
