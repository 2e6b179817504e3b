"""
Calendar arithmetic for a Monday-Friday work week.
"""

import math
from datetime import date as date_type, timedelta
from typing import Iterator

WORKING_WEEKDAYS = frozenset(range(5))  # 0=Monday .. 4=Friday


def is_working_day(day: date_type) -> bool:
    return day.weekday() in WORKING_WEEKDAYS


def iter_days(start: date_type, end: date_type) -> Iterator[date_type]:
    """Yield every calendar day from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def working_days(start: date_type, end: date_type) -> int:
    """
    Count Mon-Fri days in [start, end].
    Returns 0 when start is after end.
    """
    return sum(1 for day in iter_days(start, end) if is_working_day(day))


def days_between(start: date_type, end: date_type) -> int:
    """Calendar days from start to end (end exclusive). Negative if reversed."""
    return (end - start).days


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def proportional_split(period_days: int, total_days: int, pool: int) -> int:
    """
    Share of `pool` owed to a period of `period_days` out of `total_days`,
    rounded half-up and clamped to [0, pool].
    """
    if total_days <= 0 or pool <= 0:
        return 0
    share = round_half_up((period_days / total_days) * pool)
    return max(0, min(share, pool))
