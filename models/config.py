"""
Planner configuration.

Defaults mirror the company leave policy: 18 paid leave days a year split
across two release cycles, 3 wellness days (informational only) and a
4-week gap between consecutive milestones.
"""

import os
from typing import List
from pydantic import BaseModel, Field, ConfigDict

from .holiday import CompanyBlock
from .milestones import DateGaps


DEFAULT_COMPANY_BLOCKS = [
    CompanyBlock.single_day("Christmas Eve", 12, 24),
    CompanyBlock.single_day("Boxing Day", 12, 26),
    CompanyBlock.single_day("New Year's Eve", 12, 31),
]

ENV_PREFIX = "PLANNER_"


class PlannerConfig(BaseModel):
    """Caller-supplied settings for the availability engine and milestone planner."""

    # --- Leave Policy ---
    paid_leave_days: int = Field(default=18, ge=0, description="Annual paid-leave allowance")
    wellness_days: int = Field(default=3, ge=0, description="Informational only, not deducted")
    release_cycles_per_year: int = Field(default=2, ge=1)

    # --- Calendar ---
    region: str = Field(default="US", min_length=2, description="Holiday region code")
    company_blocks: List[CompanyBlock] = Field(default_factory=lambda: list(DEFAULT_COMPANY_BLOCKS))

    # --- Milestones ---
    date_gaps: DateGaps = Field(default_factory=DateGaps)

    model_config = ConfigDict(frozen=True)

    @property
    def days_per_release_cycle(self) -> int:
        return self.paid_leave_days // self.release_cycles_per_year

    @classmethod
    def from_env(cls, environ=None) -> "PlannerConfig":
        """
        Build a config from PLANNER_* environment variables.
        Unset variables keep their defaults; bad values fail validation.
        """
        environ = os.environ if environ is None else environ
        values = {}

        for key in ("paid_leave_days", "wellness_days", "release_cycles_per_year", "region"):
            raw = environ.get(ENV_PREFIX + key.upper())
            if raw is not None:
                values[key] = raw.strip()

        gaps = {}
        for gap_key in DateGaps.model_fields:
            raw = environ.get(f"{ENV_PREFIX}GAP_{gap_key.upper()}")
            if raw is not None:
                gaps[gap_key] = raw.strip()
        if gaps:
            values["date_gaps"] = gaps

        return cls.model_validate(values)
