"""
Capacity/availability calculation engine for the Release Capacity Planner.
"""

from .errors import (
    CapacityPlannerError,
    ValidationError,
    HolidaySourceError,
    FreezeStoreError
)
from .workdays import working_days, proportional_split, days_between
from .hackathon import hackathon_dates_for_year, hackathon_in_range, is_hackathon_day
from .vacation import vacation_for_period
from .holiday_source import HolidaySource, LibraryHolidaySource, StaticHolidaySource
from .holiday_resolver import HolidayResolver
from .constraints import ConstraintViolation, MilestoneChecker, validate_milestone_order
from .milestone_planner import MILESTONE_CHAIN, plan_milestones
from .engine import AvailabilityEngine
from .baseline import (
    BaselineStore,
    KeyValueStore,
    InMemoryKeyValueStore,
    FileKeyValueStore,
    availability_for_plan
)

__all__ = [
    # --- Errors ---
    "CapacityPlannerError",
    "ValidationError",
    "HolidaySourceError",
    "FreezeStoreError",

    # --- Calculators ---
    "working_days",
    "proportional_split",
    "days_between",
    "hackathon_dates_for_year",
    "hackathon_in_range",
    "is_hackathon_day",
    "vacation_for_period",

    # --- Holidays ---
    "HolidaySource",
    "LibraryHolidaySource",
    "StaticHolidaySource",
    "HolidayResolver",

    # --- Milestones ---
    "ConstraintViolation",
    "MilestoneChecker",
    "validate_milestone_order",
    "MILESTONE_CHAIN",
    "plan_milestones",

    # --- Engine & Baselines ---
    "AvailabilityEngine",
    "BaselineStore",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "FileKeyValueStore",
    "availability_for_plan",
]
