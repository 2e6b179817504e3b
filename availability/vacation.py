"""
Vacation Allocator.

Splits the annual paid-leave allowance across the two halves of a release
cycle in proportion to each half's share of calendar days. Each half is
computed independently, so the two results may drift from the allowance by
one day through rounding.
"""

from datetime import date as date_type

from models import PlannerConfig
from .workdays import days_between, proportional_split


def vacation_for_period(
    period_start: date_type,
    period_end: date_type,
    cycle_start: date_type,
    cycle_end: date_type,
    annual_allowance: int
) -> int:
    total_cycle_days = days_between(cycle_start, cycle_end)
    if total_cycle_days <= 0:
        return 0
    period_days = max(0, days_between(period_start, period_end))
    return proportional_split(period_days, total_cycle_days, annual_allowance)


def vacation_policy_text(config: PlannerConfig) -> str:
    return (
        f"{config.paid_leave_days} paid leave days/year "
        f"({config.days_per_release_cycle} per release cycle) "
        f"+ {config.wellness_days} wellness days + holidays"
    )
