"""
Milestone date models for the Release Capacity Planner.

This module defines the 'Input' side of the planner:
1. The milestone triple the availability engine consumes.
2. The gap table used to derive milestones backward from GA.
3. The full backward-derived milestone plan.
"""

from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator, ConfigDict


def _strip_time(value):
    """Dates are compared at day granularity; drop any time-of-day."""
    if isinstance(value, datetime):
        return value.date()
    return value


class MilestoneDates(BaseModel):
    """
    The three ordered dates that bound a release cycle.
    Ordering is checked by the engine so the offending pair can be reported.
    """
    execute_commit_date: date = Field(description="Committed scope for the release")
    soft_code_complete_date: date = Field(description="Feature-complete code, pre-stabilization")
    ga_date: date = Field(description="General availability release date")

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "execute_commit_date": "2024-07-01",
            "soft_code_complete_date": "2024-09-01",
            "ga_date": "2024-11-01"
        }
    })

    @field_validator('execute_commit_date', 'soft_code_complete_date', 'ga_date', mode='before')
    @classmethod
    def drop_time_component(cls, v):
        return _strip_time(v)


class DateGaps(BaseModel):
    """Gap in weeks between consecutive milestones, walking backward from GA."""
    ga_to_promotion_gate: int = Field(default=4, ge=1, le=52)
    promotion_gate_to_commit_gate: int = Field(default=4, ge=1, le=52)
    commit_gate_to_soft_code_complete: int = Field(default=4, ge=1, le=52)
    soft_code_complete_to_execute_commit: int = Field(default=4, ge=1, le=52)
    execute_commit_to_concept_commit: int = Field(default=4, ge=1, le=52)
    concept_commit_to_pre_cc: int = Field(default=4, ge=1, le=52)

    model_config = ConfigDict(frozen=True)


class MilestonePlan(BaseModel):
    """
    Recommended milestone dates derived from a single GA date.
    Fields are listed in chain order, latest first.
    """
    ga_date: date
    promotion_gate_met_date: date
    commit_gate_met_date: date
    soft_code_complete_date: date
    execute_commit_date: date
    concept_commit_date: date
    pre_cc_complete_date: date

    model_config = ConfigDict(frozen=True)

    @property
    def feature_qa_need_by_date(self) -> date:
        """Feature QA must be in hand by Soft Code Complete."""
        return self.soft_code_complete_date

    def as_milestone_dates(self) -> MilestoneDates:
        """The triple the availability engine works from."""
        return MilestoneDates(
            execute_commit_date=self.execute_commit_date,
            soft_code_complete_date=self.soft_code_complete_date,
            ga_date=self.ga_date,
        )
