"""Session CRUD and CSV export endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from poker_tracker.api.auth import require_user
from poker_tracker.api.schemas import (
    MessageResponse,
    SessionCreateRequest,
    SessionResponse,
    SessionUpdateRequest,
)
from poker_tracker.domain.models import AuthContext

if TYPE_CHECKING:
    from poker_tracker.containers import AppContainer

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SessionResponse)
async def create_session(
    payload: SessionCreateRequest,
    request: Request,
    context: AuthContext = Depends(require_user),
) -> SessionResponse:
    """Record a new session."""
    container: AppContainer = request.app.state.container
    session = container.session_service.create(context, payload.to_draft())
    return SessionResponse.from_session(session)


@router.get("", response_model=list[SessionResponse])
async def list_sessions(
    request: Request, context: AuthContext = Depends(require_user)
) -> list[SessionResponse]:
    """Return the caller's sessions, newest first."""
    container: AppContainer = request.app.state.container
    sessions = container.session_service.list_sessions(context)
    return [SessionResponse.from_session(session) for session in sessions]


@router.get("/export")
async def export_sessions(
    request: Request,
    time_range: str | None = None,
    context: AuthContext = Depends(require_user),
) -> Response:
    """Download the caller's sessions as CSV."""
    container: AppContainer = request.app.state.container
    export = container.export_service.export(context, time_range, container.clock())
    return Response(
        content=export.content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: UUID, request: Request, context: AuthContext = Depends(require_user)
) -> SessionResponse:
    """Return one of the caller's sessions."""
    container: AppContainer = request.app.state.container
    session = container.session_service.get(context, session_id)
    if session is None:
        raise _not_found()
    return SessionResponse.from_session(session)


@router.put("/{session_id}", response_model=SessionResponse)
async def update_session(
    session_id: UUID,
    payload: SessionUpdateRequest,
    request: Request,
    context: AuthContext = Depends(require_user),
) -> SessionResponse:
    """Apply a partial update to one of the caller's sessions."""
    container: AppContainer = request.app.state.container
    session = container.session_service.update(
        context, session_id, payload.to_update()
    )
    if session is None:
        raise _not_found()
    return SessionResponse.from_session(session)


@router.delete("/{session_id}", response_model=MessageResponse)
async def delete_session(
    session_id: UUID, request: Request, context: AuthContext = Depends(require_user)
) -> MessageResponse:
    """Delete one of the caller's sessions."""
    container: AppContainer = request.app.state.container
    if not container.session_service.delete(context, session_id):
        raise _not_found()
    return MessageResponse(message="Session deleted successfully")
