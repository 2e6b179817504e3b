"""Tests for threshold-based insight and recommendation text."""

from datetime import date

from availability.insights import generate_insights, generate_recommendations
from models import AvailabilitySummary, Deductions, HackathonDeduction, HolidayDeduction, VacationDeduction


def make_deductions(holidays=0, hackathon=0, vacation=0):
    return Deductions(
        holidays=HolidayDeduction.from_periods(holidays, 0),
        hackathon=HackathonDeduction.from_periods(0, hackathon),
        vacation=VacationDeduction.from_periods(vacation, 0),
    )


def make_summary(efficiency):
    return AvailabilitySummary(
        days_available_to_code_complete=0,
        days_available_after_code_complete=0,
        total_available_days=0,
        efficiency=efficiency,
    )


class TestInsights:

    def test_every_threshold_in_order(self):
        insights = generate_insights(
            date(2024, 1, 1), date(2024, 8, 1),
            make_deductions(holidays=11, hackathon=3, vacation=18),
            make_summary(50.0),
        )

        assert insights == [
            "Long project duration: 7.1 months from Execute Commit to GA",
            "Low efficiency: Only 50.0% of working days available",
            "High holiday impact: 11 holidays during project period",
            "Hackathon impact: 3 hackathon days during project period",
            "Vacation impact: 18 vacation days during project period",
        ]

    def test_short_project_high_efficiency(self):
        insights = generate_insights(date(2024, 7, 1), date(2024, 8, 1), make_deductions(), make_summary(85.0))

        assert insights == [
            "Short project duration: 1.0 months from Execute Commit to GA",
            "High efficiency: 85.0% of working days available",
        ]

    def test_middle_of_the_road_is_quiet(self):
        assert generate_insights(date(2024, 7, 1), date(2024, 11, 1), make_deductions(10, 0, 5), make_summary(70.0)) == []

    def test_pure(self):
        args = (date(2024, 1, 1), date(2024, 8, 1), make_deductions(11, 3, 18), make_summary(50.0))
        assert generate_insights(*args) == generate_insights(*args)


class TestRecommendations:

    def test_every_threshold_in_order(self):
        recommendations = generate_recommendations(
            date(2024, 1, 1), date(2024, 1, 15),
            make_deductions(holidays=9, hackathon=1, vacation=5),
            make_summary(65.0),
        )

        assert recommendations == [
            "Consider extending project timeline to account for high deduction impact",
            "Review holiday and vacation schedules to optimize working days",
            "Plan around major holidays to minimize impact on critical milestones",
            "Account for hackathon days in sprint planning and milestone scheduling",
            "Coordinate team vacation schedules to maintain consistent coverage",
            "Consider extending Code Complete timeline for better quality assurance",
        ]

    def test_thresholds_are_strict(self):
        recommendations = generate_recommendations(
            date(2024, 1, 1), date(2024, 1, 31),
            make_deductions(holidays=8, hackathon=0, vacation=4),
            make_summary(70.0),
        )

        assert recommendations == []
