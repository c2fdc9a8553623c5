"""Date helpers and analytics window filtering."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date, datetime, time, timedelta, timezone
from typing import TypeVar

from app.core.enums import TimeRange

T = TypeVar("T")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_LOOKBACK_DAYS = {
    TimeRange.LAST_7_DAYS: 7,
    TimeRange.LAST_30_DAYS: 30,
    TimeRange.LAST_90_DAYS: 90,
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are read as UTC so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _start_of_day(d: date) -> datetime:
    return datetime.combine(d, time.min, tzinfo=timezone.utc)


def range_bounds(
    time_range: TimeRange,
    start: date | None = None,
    end: date | None = None,
    now: datetime | None = None,
) -> tuple[datetime, datetime | None]:
    """Return (lower, upper) bounds, both inclusive. upper None means unbounded."""
    now = as_utc(now) if now else utcnow()
    if time_range in _LOOKBACK_DAYS:
        return now - timedelta(days=_LOOKBACK_DAYS[time_range]), now
    if time_range == TimeRange.MONTH:
        return _start_of_day(now.date().replace(day=1)), now
    if time_range == TimeRange.YEAR:
        return _start_of_day(date(now.year, 1, 1)), now
    if time_range == TimeRange.CUSTOM:
        lower = _start_of_day(start) if start else EPOCH
        # End date covers the whole day
        upper = _start_of_day(end) + timedelta(days=1) if end else now
        return lower, upper
    return EPOCH, None


def filter_by_range(
    items: Iterable[T],
    get_date: Callable[[T], datetime],
    time_range: TimeRange = TimeRange.ALL,
    start: date | None = None,
    end: date | None = None,
    now: datetime | None = None,
) -> list[T]:
    """Keep items whose date falls inside the window, preserving input order."""
    if time_range == TimeRange.ALL:
        return list(items)
    lower, upper = range_bounds(time_range, start, end, now)
    out: list[T] = []
    for item in items:
        at = as_utc(get_date(item))
        if at >= lower and (upper is None or at <= upper):
            out.append(item)
    return out
