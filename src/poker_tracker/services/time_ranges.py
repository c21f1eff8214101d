"""Time-range windows over session dates.

The chart and the CSV export use two different vocabularies. Chart ranges are
calendar relative ("month" means the same day last month) while export ranges
count a fixed number of days back. Both anchor on the calendar day of an
injected ``now`` and include every session dated on or after the window start.
Unknown selectors behave like ``all``.
"""

import calendar
from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta

from poker_tracker.domain.sessions import PokerSession

ALL = "all"
DECEMBER = 12

CHART_RANGES = ("week", "month", "quarter", "year", ALL)
EXPORT_RANGES = ("7days", "30days", "90days", "1year", ALL)


def months_before(day: date, months: int) -> date:
    """Return the same day ``months`` calendar months earlier, clamped to month end."""
    month_index = day.year * DECEMBER + (day.month - 1) - months
    year, month = divmod(month_index, DECEMBER)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


_CHART_WINDOWS: dict[str, Callable[[date], date]] = {
    "week": lambda today: today - timedelta(days=7),
    "month": lambda today: months_before(today, 1),
    "quarter": lambda today: months_before(today, 3),
    "year": lambda today: months_before(today, 12),
}

_EXPORT_WINDOWS: dict[str, Callable[[date], date]] = {
    "7days": lambda today: today - timedelta(days=7),
    "30days": lambda today: today - timedelta(days=30),
    "90days": lambda today: today - timedelta(days=90),
    "1year": lambda today: today - timedelta(days=365),
}


def chart_window_start(selector: str | None, now: datetime | date) -> date | None:
    """Return the first included date for a chart range, or None for no bound."""
    return _window_start(_CHART_WINDOWS, selector, now)


def export_window_start(selector: str | None, now: datetime | date) -> date | None:
    """Return the first included date for an export range, or None for no bound."""
    return _window_start(_EXPORT_WINDOWS, selector, now)


def filter_sessions(
    sessions: Iterable[PokerSession], selector: str | None, now: datetime | date
) -> list[PokerSession]:
    """Keep sessions inside a chart range, preserving their order."""
    return _filter_since(sessions, chart_window_start(selector, now))


def filter_sessions_for_export(
    sessions: Iterable[PokerSession], selector: str | None, now: datetime | date
) -> list[PokerSession]:
    """Keep sessions inside an export range, preserving their order."""
    return _filter_since(sessions, export_window_start(selector, now))


def normalize_chart_range(selector: str | None) -> str:
    """Return the chart selector that will actually be applied."""
    return selector if selector in _CHART_WINDOWS else ALL


def normalize_export_range(selector: str | None) -> str:
    """Return the export selector that will actually be applied."""
    return selector if selector in _EXPORT_WINDOWS else ALL


def _window_start(
    windows: dict[str, Callable[[date], date]],
    selector: str | None,
    now: datetime | date,
) -> date | None:
    window = windows.get(selector) if selector else None
    if window is None:
        return None
    return window(_as_day(now))


def _as_day(now: datetime | date) -> date:
    if isinstance(now, datetime):
        return now.date()
    return now


def _filter_since(
    sessions: Iterable[PokerSession], start: date | None
) -> list[PokerSession]:
    if start is None:
        return list(sessions)
    return [session for session in sessions if session.session_date >= start]
