"""
Non-working day models: public holidays, company blocks and hackathon days.
"""

from enum import Enum
from datetime import date as date_type
from pydantic import BaseModel, Field, ConfigDict, model_validator


class HolidayKind(str, Enum):
    """How a holiday's date is determined."""
    FIXED = "fixed"         # Same calendar date every year
    FLOATING = "floating"   # Weekday rules or lunar calculation
    COMPANY = "company"     # Company-specific block, not from the holiday source


class HolidayOccurrence(BaseModel):
    """A single holiday on a single calendar date."""
    name: str = Field(min_length=1)
    date: date_type
    kind: HolidayKind

    model_config = ConfigDict(frozen=True)


class HackathonOccurrence(BaseModel):
    """One of the three company-wide hackathon days."""
    date: date_type
    reason: str

    model_config = ConfigDict(frozen=True)


class CompanyBlock(BaseModel):
    """
    A company-wide non-working window repeated every calendar year
    (e.g. the year-end slowdown). Month/day bounds are inclusive.
    """
    name: str = Field(min_length=1)
    start_month: int = Field(ge=1, le=12)
    start_day: int = Field(ge=1, le=31)
    end_month: int = Field(ge=1, le=12)
    end_day: int = Field(ge=1, le=31)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_window(self):
        if (self.end_month, self.end_day) < (self.start_month, self.start_day):
            raise ValueError("Company block cannot wrap past the end of the year")
        # Rejects impossible days such as Feb 30 (2024 is a leap year)
        date_type(2024, self.start_month, self.start_day)
        date_type(2024, self.end_month, self.end_day)
        return self

    @classmethod
    def single_day(cls, name: str, month: int, day: int) -> "CompanyBlock":
        return cls(name=name, start_month=month, start_day=day, end_month=month, end_day=day)
