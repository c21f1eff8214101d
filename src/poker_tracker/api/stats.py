"""Stats, bankroll chart and dashboard endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from poker_tracker.api.auth import require_user
from poker_tracker.api.schemas import (
    BankrollPointResponse,
    BankrollResponse,
    DashboardResponse,
    StatsResponse,
)
from poker_tracker.domain.models import AuthContext
from poker_tracker.services.time_ranges import normalize_chart_range

if TYPE_CHECKING:
    from poker_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    request: Request,
    time_range: str | None = None,
    context: AuthContext = Depends(require_user),
) -> StatsResponse:
    """Return aggregate stats for the chart time range."""
    container: AppContainer = request.app.state.container
    stats = container.stats_service.get_stats(context, time_range, container.clock())
    return StatsResponse.from_stats(normalize_chart_range(time_range), stats)


@router.get("/stats/bankroll", response_model=BankrollResponse)
async def get_bankroll(
    request: Request,
    time_range: str | None = None,
    context: AuthContext = Depends(require_user),
) -> BankrollResponse:
    """Return the cumulative bankroll series for the chart time range."""
    container: AppContainer = request.app.state.container
    points = container.stats_service.get_bankroll_series(
        context, time_range, container.clock()
    )
    return BankrollResponse(
        time_range=normalize_chart_range(time_range),
        points=[BankrollPointResponse.from_point(point) for point in points],
    )


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    request: Request,
    time_range: str | None = None,
    context: AuthContext = Depends(require_user),
) -> DashboardResponse:
    """Return stats and chart series computed from one fetch."""
    container: AppContainer = request.app.state.container
    summary = container.stats_service.get_dashboard(
        context, time_range, container.clock()
    )
    return DashboardResponse.from_summary(summary)
