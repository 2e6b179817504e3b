"""
The Availability Engine.

This module implements the core capacity calculation. Given the three
milestone dates of a release it:
1. Counts Mon-Fri working days for the whole cycle and for each half
   (Execute Commit -> Soft Code Complete, Soft Code Complete -> GA).
2. Deducts holidays, hackathon days and a proportional share of paid leave
   from each half.
3. Summarizes what is left and attaches threshold-based insights.

The engine holds no state between calls; construct one wherever it is needed.
"""

import logging
from dataclasses import dataclass, field
from datetime import date as date_type
from typing import List, Optional

from models import (
    AvailabilityResult,
    AvailabilitySummary,
    Deductions,
    HackathonDeduction,
    HackathonOccurrence,
    HolidayDeduction,
    HolidayOccurrence,
    MilestoneDates,
    PlannerConfig,
    VacationDeduction,
)
from .constraints import validate_milestone_order
from .hackathon import hackathon_in_range
from .holiday_resolver import HolidayResolver
from .holiday_source import HolidaySource
from .insights import generate_insights, generate_recommendations
from .vacation import vacation_for_period, vacation_policy_text
from .workdays import is_working_day, working_days

logger = logging.getLogger(__name__)


@dataclass
class PeriodDeductions:
    """Deductions for one half of the release cycle."""
    holidays: List[HolidayOccurrence] = field(default_factory=list)
    hackathon: List[HackathonOccurrence] = field(default_factory=list)
    vacation: int = 0

    @property
    def holiday_days(self) -> int:
        # Two holidays on the same date only cost one working day
        return len({h.date for h in self.holidays})


class AvailabilityEngine:
    """
    Orchestrates the working-day, holiday, hackathon and vacation calculators.
    """

    def __init__(self, holiday_source: HolidaySource, config: Optional[PlannerConfig] = None):
        self.holiday_source = holiday_source
        self.config = config or PlannerConfig()

    async def analyze(
        self,
        execute_commit_date: date_type,
        soft_code_complete_date: date_type,
        ga_date: date_type
    ) -> AvailabilityResult:
        dates = MilestoneDates(
            execute_commit_date=execute_commit_date,
            soft_code_complete_date=soft_code_complete_date,
            ga_date=ga_date,
        )
        return await self.analyze_dates(dates)

    async def analyze_dates(self, dates: MilestoneDates) -> AvailabilityResult:
        """
        Execute the availability pipeline for one milestone triple.
        Raises ValidationError before any lookup if the dates are out of order,
        and HolidaySourceError if holiday data cannot be fetched.
        """
        validate_milestone_order(dates)

        ec = dates.execute_commit_date
        scc = dates.soft_code_complete_date
        ga = dates.ga_date
        logger.info(f"Starting availability analysis: EC={ec}, SCC={scc}, GA={ga}")

        # 1. Working days (Soft Code Complete belongs to both halves)
        total_working = working_days(ec, ga)
        pre_working = working_days(ec, scc)
        post_working = working_days(scc, ga)

        # 2. Deductions. One resolver per invocation so both halves share a year cache;
        # the second half only starts once the first half's lookups have resolved.
        resolver = HolidayResolver(self.holiday_source, self.config.region, self.config.company_blocks)
        pre = await self._period_deductions(resolver, ec, scc, ec, ga)
        post = await self._period_deductions(resolver, scc, ga, ec, ga)
        deductions = self._aggregate(pre, post)

        # 3. Availability
        availability = self._summarize(pre_working, post_working, pre, post)

        # 4. Insights
        insights = generate_insights(ec, ga, deductions, availability)
        recommendations = generate_recommendations(ec, scc, deductions, availability)

        result = AvailabilityResult(
            execute_commit_date=ec,
            soft_code_complete_date=scc,
            ga_date=ga,
            total_working_days=total_working,
            code_complete_working_days=pre_working,
            after_code_complete_working_days=post_working,
            deductions=deductions,
            availability=availability,
            insights=insights,
            recommendations=recommendations,
        )

        logger.info(
            f"Availability analysis complete: {total_working} working days, "
            f"{deductions.total} deducted, {availability.total_available_days} available "
            f"({availability.efficiency:.1f}%)"
        )
        return result

    async def _period_deductions(
        self,
        resolver: HolidayResolver,
        start: date_type,
        end: date_type,
        cycle_start: date_type,
        cycle_end: date_type
    ) -> PeriodDeductions:
        holidays = [h for h in await resolver.holidays_in_range(start, end) if is_working_day(h.date)]
        hackathon = [d for d in hackathon_in_range(start, end) if is_working_day(d.date)]
        vacation = vacation_for_period(start, end, cycle_start, cycle_end, self.config.paid_leave_days)

        period = PeriodDeductions(holidays=holidays, hackathon=hackathon, vacation=vacation)
        logger.debug(
            f"Deductions {start} -> {end}: {period.holiday_days} holidays, "
            f"{len(hackathon)} hackathon, {vacation} vacation"
        )
        return period

    def _aggregate(self, pre: PeriodDeductions, post: PeriodDeductions) -> Deductions:
        return Deductions(
            holidays=HolidayDeduction.from_periods(
                pre.holiday_days, post.holiday_days,
                breakdown=pre.holidays + post.holidays
            ),
            hackathon=HackathonDeduction.from_periods(
                len(pre.hackathon), len(post.hackathon),
                breakdown=pre.hackathon + post.hackathon
            ),
            vacation=VacationDeduction.from_periods(
                pre.vacation, post.vacation,
                policy=vacation_policy_text(self.config)
            ),
        )

    def _summarize(
        self,
        pre_working: int,
        post_working: int,
        pre: PeriodDeductions,
        post: PeriodDeductions
    ) -> AvailabilitySummary:
        available_pre = pre_working - pre.holiday_days - len(pre.hackathon) - pre.vacation
        available_post = post_working - post.holiday_days - len(post.hackathon) - post.vacation
        total_available = available_pre + available_post

        denominator = pre_working + post_working
        efficiency = (total_available / denominator) * 100 if denominator else 0.0

        return AvailabilitySummary(
            days_available_to_code_complete=available_pre,
            days_available_after_code_complete=available_post,
            total_available_days=total_available,
            efficiency=efficiency,
        )
