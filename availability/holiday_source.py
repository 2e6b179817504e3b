"""
Holiday sources for the Release Capacity Planner.

A holiday source answers one question: which dates are holidays in a given
year and region? The engine only depends on the HolidaySource protocol;
this module ships two implementations:
1. LibraryHolidaySource - computed from the `holidays` package (fixed and floating dates).
2. StaticHolidaySource - an in-memory table, for offline runs and tests.
"""

import logging
from typing import Any, Dict, Iterable, List, Protocol, Tuple, runtime_checkable

import holidays

from models import HolidayKind, HolidayOccurrence

logger = logging.getLogger(__name__)


@runtime_checkable
class HolidaySource(Protocol):
    """Idempotent, side-effect-free lookup of holidays for (year, region)."""

    async def list_holidays(self, year: int, region: str) -> List[Any]:
        ...


class LibraryHolidaySource:
    """
    Holiday source backed by the `holidays` package.
    Region codes are ISO country codes, optionally with a subdivision ("US-CA").
    """

    def __init__(self, observed: bool = True):
        self.observed = observed

    async def list_holidays(self, year: int, region: str) -> List[HolidayOccurrence]:
        this_year = self._calendar(region, year)
        next_year = self._calendar(region, year + 1)

        # A holiday is fixed if it lands on the same month/day the following year
        next_year_days = {}
        for day in next_year:
            for name in next_year.get_list(day):
                next_year_days[name] = (day.month, day.day)

        occurrences = []
        for day in sorted(this_year):
            for name in this_year.get_list(day):
                kind = HolidayKind.FIXED if next_year_days.get(name) == (day.month, day.day) else HolidayKind.FLOATING
                occurrences.append(HolidayOccurrence(name=name, date=day, kind=kind))

        logger.debug(f"Computed {len(occurrences)} holidays for {region} {year}")
        return occurrences

    def _calendar(self, region: str, year: int) -> holidays.HolidayBase:
        country, _, subdiv = region.upper().partition("-")
        return holidays.country_holidays(country, subdiv=subdiv or None, years=year, observed=self.observed)


class StaticHolidaySource:
    """
    Holiday source serving a fixed table keyed by (year, region).
    Unknown keys yield an empty list. Every lookup is recorded in `calls`.
    """

    def __init__(self, table: Dict[Tuple[int, str], Iterable[Any]] = None):
        self.table = {key: list(rows) for key, rows in (table or {}).items()}
        self.calls: List[Tuple[int, str]] = []

    async def list_holidays(self, year: int, region: str) -> List[Any]:
        self.calls.append((year, region))
        return list(self.table.get((year, region), []))

    def add(self, region: str, occurrence: HolidayOccurrence) -> None:
        self.table.setdefault((occurrence.date.year, region), []).append(occurrence)
