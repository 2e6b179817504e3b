"""
Threshold-based insight and recommendation text for availability results.

Both generators are pure: the same dates, deductions and summary always
produce the same strings in the same order.
"""

from datetime import date as date_type
from typing import List

from models import AvailabilitySummary, Deductions
from .workdays import days_between

DAYS_PER_MONTH = 30

# Insight thresholds
LONG_PROJECT_MONTHS = 6
SHORT_PROJECT_MONTHS = 3
HIGH_EFFICIENCY = 80.0
LOW_EFFICIENCY = 60.0
HIGH_HOLIDAY_COUNT = 10
HIGH_VACATION_COUNT = 5

# Recommendation thresholds
EXTEND_TIMELINE_EFFICIENCY = 70.0
PLAN_AROUND_HOLIDAY_COUNT = 8
COORDINATE_VACATION_COUNT = 4
MIN_CODE_COMPLETE_DAYS = 30


def generate_insights(
    execute_commit_date: date_type,
    ga_date: date_type,
    deductions: Deductions,
    availability: AvailabilitySummary
) -> List[str]:
    insights = []

    # 1. Project span
    months = days_between(execute_commit_date, ga_date) / DAYS_PER_MONTH
    if months > LONG_PROJECT_MONTHS:
        insights.append(f"Long project duration: {months:.1f} months from Execute Commit to GA")
    elif months < SHORT_PROJECT_MONTHS:
        insights.append(f"Short project duration: {months:.1f} months from Execute Commit to GA")

    # 2. Efficiency
    if availability.efficiency > HIGH_EFFICIENCY:
        insights.append(f"High efficiency: {availability.efficiency:.1f}% of working days available")
    elif availability.efficiency < LOW_EFFICIENCY:
        insights.append(f"Low efficiency: Only {availability.efficiency:.1f}% of working days available")

    # 3. Deduction impact
    if deductions.holidays.total > HIGH_HOLIDAY_COUNT:
        insights.append(f"High holiday impact: {deductions.holidays.total} holidays during project period")
    if deductions.hackathon.total > 0:
        insights.append(f"Hackathon impact: {deductions.hackathon.total} hackathon days during project period")
    if deductions.vacation.total > HIGH_VACATION_COUNT:
        insights.append(f"Vacation impact: {deductions.vacation.total} vacation days during project period")

    return insights


def generate_recommendations(
    execute_commit_date: date_type,
    soft_code_complete_date: date_type,
    deductions: Deductions,
    availability: AvailabilitySummary
) -> List[str]:
    recommendations = []

    if availability.efficiency < EXTEND_TIMELINE_EFFICIENCY:
        recommendations.append("Consider extending project timeline to account for high deduction impact")
        recommendations.append("Review holiday and vacation schedules to optimize working days")

    if deductions.holidays.total > PLAN_AROUND_HOLIDAY_COUNT:
        recommendations.append("Plan around major holidays to minimize impact on critical milestones")

    if deductions.hackathon.total > 0:
        recommendations.append("Account for hackathon days in sprint planning and milestone scheduling")

    if deductions.vacation.total > COORDINATE_VACATION_COUNT:
        recommendations.append("Coordinate team vacation schedules to maintain consistent coverage")

    if days_between(execute_commit_date, soft_code_complete_date) < MIN_CODE_COMPLETE_DAYS:
        recommendations.append("Consider extending Code Complete timeline for better quality assurance")

    return recommendations
