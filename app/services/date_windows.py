"""
Calendar windows for leaderboards and community feed periods

Windows are computed in the configured local timezone and returned as
half-open [start, end) intervals in UTC.
"""
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Optional, Tuple
from zoneinfo import ZoneInfo

from app.core.config import settings
from app.core.exceptions import InvalidParamsError

Window = Tuple[datetime, datetime]


def local_zone() -> ZoneInfo:
    return ZoneInfo(settings.TIMEZONE)


def local_now(now: Optional[datetime] = None) -> datetime:
    zone = local_zone()
    if now is None:
        return datetime.now(zone)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(zone)


def _midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=local_zone())


def _window(first_day: date, following: Callable[[date], date], now: Optional[datetime]) -> Window:
    """
    [first_day, following(first_day)) in UTC

    The end is only built once the start is known not to lie in the future.
    """
    try:
        start = _midnight(first_day).astimezone(timezone.utc)
    except OverflowError:
        # 0001-01-01 local has no UTC counterpart east of Greenwich
        raise InvalidParamsError("Invalid date", error_code="invalid_date")
    if start > local_now(now):
        raise InvalidParamsError("Future date", error_code="future_date")
    end = _midnight(following(first_day)).astimezone(timezone.utc)
    return start, end


def _build_date(year: int, month: int = 1, day: int = 1) -> date:
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        raise InvalidParamsError("Invalid date", error_code="invalid_date")


def _next_month(day: date) -> date:
    if day.month == 12:
        return _build_date(day.year + 1, 1)
    return _build_date(day.year, day.month + 1)


def daily_window(year: int, month: int, day: int, now: Optional[datetime] = None) -> Window:
    first = _build_date(year, month, day)
    return _window(first, lambda d: d + timedelta(days=1), now)


def weekly_window(year: int, week: int, now: Optional[datetime] = None) -> Window:
    """ISO week: Monday to Monday"""
    try:
        first = date.fromisocalendar(year, week, 1)
    except (ValueError, OverflowError):
        raise InvalidParamsError("Invalid date", error_code="invalid_date")
    return _window(first, lambda d: d + timedelta(weeks=1), now)


def monthly_window(year: int, month: int, now: Optional[datetime] = None) -> Window:
    return _window(_build_date(year, month), _next_month, now)


def yearly_window(year: int, now: Optional[datetime] = None) -> Window:
    return _window(_build_date(year), lambda d: _build_date(d.year + 1), now)


def period_start(period: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """
    UTC start of the current day/week/month/year, or None for "all-time"
    """
    today = local_now(now).date()
    if period == "all-time":
        return None
    if period == "today":
        first = today
    elif period == "week":
        first = today - timedelta(days=today.weekday())
    elif period == "month":
        first = today.replace(day=1)
    elif period == "year":
        first = today.replace(month=1, day=1)
    else:
        raise InvalidParamsError(
            f"Unknown period {period!r}",
            errors={"period": "must be one of all-time, today, week, month, year"},
            error_code="invalid_period",
        )
    return _midnight(first).astimezone(timezone.utc)
