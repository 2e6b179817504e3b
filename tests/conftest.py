"""Shared fixtures: deterministic holiday sources and an engine wired to them."""

import asyncio
from datetime import date

import pytest

from availability import AvailabilityEngine, BaselineStore, InMemoryKeyValueStore, StaticHolidaySource
from models import HolidayKind, HolidayOccurrence, PlannerConfig

F, V = HolidayKind.FIXED, HolidayKind.FLOATING

US_FEDERAL = {
    2024: [
        ("New Year's Day", date(2024, 1, 1), F),
        ("Martin Luther King Jr. Day", date(2024, 1, 15), V),
        ("Presidents' Day", date(2024, 2, 19), V),
        ("Memorial Day", date(2024, 5, 27), V),
        ("Juneteenth", date(2024, 6, 19), F),
        ("Independence Day", date(2024, 7, 4), F),
        ("Labor Day", date(2024, 9, 2), V),
        ("Columbus Day", date(2024, 10, 14), V),
        ("Veterans Day", date(2024, 11, 11), F),
        ("Thanksgiving Day", date(2024, 11, 28), V),
        ("Christmas Day", date(2024, 12, 25), F),
    ],
    2025: [
        ("New Year's Day", date(2025, 1, 1), F),
        ("Martin Luther King Jr. Day", date(2025, 1, 20), V),
        ("Presidents' Day", date(2025, 2, 17), V),
        ("Memorial Day", date(2025, 5, 26), V),
        ("Juneteenth", date(2025, 6, 19), F),
        ("Independence Day", date(2025, 7, 4), F),
        ("Labor Day", date(2025, 9, 1), V),
        ("Columbus Day", date(2025, 10, 13), V),
        ("Veterans Day", date(2025, 11, 11), F),
        ("Thanksgiving Day", date(2025, 11, 27), V),
        ("Christmas Day", date(2025, 12, 25), F),
    ],
}


def us_federal_source() -> StaticHolidaySource:
    table = {
        (year, "US"): [HolidayOccurrence(name=n, date=d, kind=k) for n, d, k in rows]
        for year, rows in US_FEDERAL.items()
    }
    return StaticHolidaySource(table)


class FailingHolidaySource:
    """Holiday source whose lookups always raise `error`."""

    def __init__(self, error: BaseException):
        self.error = error
        self.calls = []

    async def list_holidays(self, year, region):
        self.calls.append((year, region))
        raise self.error


class SlowHolidaySource:
    """Holiday source that never answers within a reasonable timeout."""

    async def list_holidays(self, year, region):
        await asyncio.sleep(10)
        return []


@pytest.fixture
def holiday_source():
    return us_federal_source()


@pytest.fixture
def config():
    return PlannerConfig()


@pytest.fixture
def engine(holiday_source, config):
    return AvailabilityEngine(holiday_source, config)


@pytest.fixture
def baseline_store():
    return BaselineStore(InMemoryKeyValueStore())
