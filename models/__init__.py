"""
Data models package for the Release Capacity Planner.

This package exports the four pillars of the data architecture:
1. Input (MilestoneDates, DateGaps, MilestonePlan)
2. Calendar (HolidayOccurrence, HackathonOccurrence, CompanyBlock)
3. Output (Deduction buckets, AvailabilitySummary, AvailabilityResult)
4. Persistence & Settings (FrozenBaseline, PlannerConfig)
"""

from .milestones import (
    MilestoneDates,
    DateGaps,
    MilestonePlan
)

from .holiday import (
    HolidayKind,
    HolidayOccurrence,
    HackathonOccurrence,
    CompanyBlock
)

from .availability import (
    DeductionBucket,
    HolidayDeduction,
    HackathonDeduction,
    VacationDeduction,
    Deductions,
    AvailabilitySummary,
    AvailabilityResult
)

from .baseline import FrozenBaseline

from .config import (
    PlannerConfig,
    DEFAULT_COMPANY_BLOCKS
)

__all__ = [
    # --- Input Models ---
    "MilestoneDates",
    "DateGaps",
    "MilestonePlan",

    # --- Calendar Models ---
    "HolidayKind",
    "HolidayOccurrence",
    "HackathonOccurrence",
    "CompanyBlock",

    # --- Output Models ---
    "DeductionBucket",
    "HolidayDeduction",
    "HackathonDeduction",
    "VacationDeduction",
    "Deductions",
    "AvailabilitySummary",
    "AvailabilityResult",

    # --- Persistence & Settings ---
    "FrozenBaseline",
    "PlannerConfig",
    "DEFAULT_COMPANY_BLOCKS",
]
