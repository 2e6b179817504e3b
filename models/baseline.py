"""
Frozen baseline model: a locked availability result kept per release plan.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, Field, ConfigDict

from .milestones import MilestoneDates
from .availability import AvailabilityResult


class FrozenBaseline(BaseModel):
    release_plan_id: str = Field(min_length=1)
    input_dates: MilestoneDates
    availability_result: AvailabilityResult
    frozen_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(frozen=True)
