"""
Holiday Resolver.

Wraps a HolidaySource for date-range queries: fetches each calendar year a
range touches (once, via a per-resolver cache), adds the company's own
non-working blocks, then filters, de-duplicates and sorts.
"""

import asyncio
import logging
from datetime import date as date_type, timedelta
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError as ModelValidationError

from models import CompanyBlock, HolidayKind, HolidayOccurrence
from .errors import HolidaySourceError
from .holiday_source import HolidaySource

logger = logging.getLogger(__name__)


class HolidayResolver:
    """
    Resolves holiday occurrences for date ranges.
    Create one per analysis so the year cache never outlives a single invocation.
    """

    def __init__(
        self,
        source: HolidaySource,
        region: str = "US",
        company_blocks: Optional[Iterable[CompanyBlock]] = None
    ):
        self.source = source
        self.region = region
        self.company_blocks = list(company_blocks or [])
        self._year_cache: Dict[int, List[HolidayOccurrence]] = {}

    async def holidays_in_range(self, start: date_type, end: date_type) -> List[HolidayOccurrence]:
        """All holiday occurrences in [start, end], sorted by date then name."""
        if start > end:
            return []

        seen = set()
        occurrences = []
        # Years are fetched one at a time, never concurrently
        for year in range(start.year, end.year + 1):
            for occ in await self.holidays_for_year(year):
                if not start <= occ.date <= end:
                    continue
                key = (occ.date, occ.name)
                if key in seen:
                    continue
                seen.add(key)
                occurrences.append(occ)

        occurrences.sort(key=lambda o: (o.date, o.name))
        return occurrences

    async def count_in_range(self, start: date_type, end: date_type) -> int:
        return len(await self.holidays_in_range(start, end))

    async def holidays_for_year(self, year: int) -> List[HolidayOccurrence]:
        """Source holidays plus company blocks for one calendar year (cached)."""
        if year in self._year_cache:
            logger.debug(f"Holiday cache hit for {self.region} {year}")
            return self._year_cache[year]

        raw = await self._fetch(year)
        occurrences = [self._coerce(row, year) for row in raw]
        occurrences.extend(self._company_days(year))

        self._year_cache[year] = occurrences
        return occurrences

    async def _fetch(self, year: int) -> list:
        try:
            return list(await self.source.list_holidays(year, self.region))
        except asyncio.CancelledError:
            raise
        except asyncio.TimeoutError as e:
            logger.error(f"Holiday lookup timed out for {self.region} {year}")
            raise HolidaySourceError(year, self.region, "lookup timed out") from e
        except Exception as e:
            logger.error(f"Holiday lookup failed for {self.region} {year}: {e}")
            raise HolidaySourceError(year, self.region, str(e) or type(e).__name__) from e

    def _coerce(self, row, year: int) -> HolidayOccurrence:
        if isinstance(row, HolidayOccurrence):
            return row
        try:
            return HolidayOccurrence.model_validate(row)
        except ModelValidationError as e:
            raise HolidaySourceError(year, self.region, f"malformed holiday record {row!r}") from e

    def _company_days(self, year: int) -> List[HolidayOccurrence]:
        days = []
        for block in self.company_blocks:
            start = _safe_date(year, block.start_month, block.start_day)
            end = _safe_date(year, block.end_month, block.end_day)
            if start is None or end is None:
                # Feb 29 outside a leap year
                continue
            current = start
            while current <= end:
                days.append(HolidayOccurrence(name=block.name, date=current, kind=HolidayKind.COMPANY))
                current += timedelta(days=1)
        return days


def _safe_date(year: int, month: int, day: int) -> Optional[date_type]:
    try:
        return date_type(year, month, day)
    except ValueError:
        return None
