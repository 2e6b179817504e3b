"""
Availability result models for the Release Capacity Planner.

This module defines the 'Output' of the availability engine:
1. Deduction buckets (holidays, hackathon, vacation), split at Soft Code Complete.
2. The availability summary (days left to work, efficiency).
3. The full result, which is what a frozen baseline stores.
"""

from datetime import date
from typing import List
from pydantic import BaseModel, Field, ConfigDict, model_validator

from .holiday import HolidayOccurrence, HackathonOccurrence


class DeductionBucket(BaseModel):
    """Days removed from the working-day budget, per sub-period."""
    total: int = Field(ge=0)
    code_complete_period: int = Field(ge=0, description="Execute Commit -> Soft Code Complete")
    after_code_complete_period: int = Field(ge=0, description="Soft Code Complete -> GA")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_total(self):
        if self.total != self.code_complete_period + self.after_code_complete_period:
            raise ValueError("Deduction total must equal the sum of both periods")
        return self

    @classmethod
    def from_periods(cls, code_complete_period: int, after_code_complete_period: int, **extra):
        return cls(
            total=code_complete_period + after_code_complete_period,
            code_complete_period=code_complete_period,
            after_code_complete_period=after_code_complete_period,
            **extra,
        )


class HolidayDeduction(DeductionBucket):
    breakdown: List[HolidayOccurrence] = Field(default_factory=list)


class HackathonDeduction(DeductionBucket):
    breakdown: List[HackathonOccurrence] = Field(default_factory=list)


class VacationDeduction(DeductionBucket):
    policy: str = Field(default="", description="Human-readable leave policy the split was based on")


class Deductions(BaseModel):
    holidays: HolidayDeduction
    hackathon: HackathonDeduction
    vacation: VacationDeduction

    model_config = ConfigDict(frozen=True)

    @property
    def total(self) -> int:
        return self.holidays.total + self.hackathon.total + self.vacation.total

    @property
    def code_complete_period(self) -> int:
        return (
            self.holidays.code_complete_period
            + self.hackathon.code_complete_period
            + self.vacation.code_complete_period
        )

    @property
    def after_code_complete_period(self) -> int:
        return (
            self.holidays.after_code_complete_period
            + self.hackathon.after_code_complete_period
            + self.vacation.after_code_complete_period
        )


class AvailabilitySummary(BaseModel):
    """Working days left once every deduction has been applied."""
    days_available_to_code_complete: int
    days_available_after_code_complete: int
    total_available_days: int
    efficiency: float = Field(description="Percentage of working days still available")

    model_config = ConfigDict(frozen=True)


class AvailabilityResult(BaseModel):
    """
    Full output of one availability analysis.
    Constructed once per invocation and never mutated afterwards.
    """

    # --- Inputs ---
    execute_commit_date: date
    soft_code_complete_date: date
    ga_date: date

    # --- Working Days (Mon-Fri, both ends inclusive) ---
    total_working_days: int = Field(ge=0)
    code_complete_working_days: int = Field(ge=0)
    after_code_complete_working_days: int = Field(ge=0)

    # --- Deductions & Availability ---
    deductions: Deductions
    availability: AvailabilitySummary

    # --- Threshold Text ---
    insights: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "execute_commit_date": "2024-07-01",
            "soft_code_complete_date": "2024-09-01",
            "ga_date": "2024-11-01",
            "total_working_days": 90,
            "code_complete_working_days": 45,
            "after_code_complete_working_days": 45,
            "availability": {
                "days_available_to_code_complete": 35,
                "days_available_after_code_complete": 34,
                "total_available_days": 69,
                "efficiency": 76.67
            }
        }
    })
