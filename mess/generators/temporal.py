"""
Temporal Value Primitives

Dates, times and datetimes drawn uniformly from a configured window at
one-second resolution.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional

from .base import RandomSource

DEFAULT_START = datetime(1970, 1, 1)
DEFAULT_END = datetime(2037, 12, 31, 23, 59, 59)

SECONDS_PER_DAY = 24 * 60 * 60


def datetime_value(
    source: RandomSource,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> datetime:
    """
    Uniform datetime in the inclusive window [start, end]

    Args:
        source: Random source
        start: Window start (defaults to 1970-01-01)
        end: Window end (defaults to 2037-12-31 23:59:59)

    Returns:
        Naive datetime with whole seconds
    """
    start = (start or DEFAULT_START).replace(microsecond=0)
    end = end or DEFAULT_END

    span = int((end - start).total_seconds())
    if span < 0:
        raise ValueError(f"empty datetime window: {start} is after {end}")

    return start + timedelta(seconds=source.below(span + 1))


def date_value(
    source: RandomSource,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> date:
    """Uniform calendar date between the dates of start and end"""
    first = (start or DEFAULT_START).date()
    last = (end or DEFAULT_END).date()

    span = (last - first).days
    if span < 0:
        raise ValueError(f"empty date window: {first} is after {last}")

    return first + timedelta(days=source.below(span + 1))


def time_value(source: RandomSource) -> time:
    """Uniform time of day"""
    seconds = source.below(SECONDS_PER_DAY)
    return time(seconds // 3600, (seconds // 60) % 60, seconds % 60)
