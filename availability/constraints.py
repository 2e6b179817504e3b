"""
Milestone Constraint Validation Logic.

This module answers two questions about a set of milestone dates:
1. Are they in the required order? (hard constraint, fails the analysis)
2. Do the gaps between them match the configured gap table? (soft, warnings only)
"""

from dataclasses import dataclass
from datetime import date as date_type
from typing import Dict, List, Optional

from models import DateGaps, MilestoneDates
from .errors import ValidationError
from .milestone_planner import MILESTONE_LABELS, chain_edges
from .workdays import round_half_up


@dataclass
class ConstraintViolation:
    """Detailed reason for rejection."""
    constraint_type: str  # "Order" or "DateGap"
    reason: str
    earlier_field: str
    later_field: str
    earlier_date: date_type
    later_date: date_type


# Pairs that must be strictly increasing, checked in this order.
ORDER_RULES = (
    ("execute_commit_date", "soft_code_complete_date"),
    ("soft_code_complete_date", "ga_date"),
    ("execute_commit_date", "ga_date"),
)


class MilestoneChecker:
    """
    Validates milestone dates against ordering rules and the gap table.
    """

    def __init__(self, gaps: Optional[DateGaps] = None):
        self.gaps = gaps or DateGaps()

    def check_order(self, dates: MilestoneDates) -> List[ConstraintViolation]:
        """Returns an empty list if valid, one violation per broken rule otherwise."""
        violations = []
        for earlier, later in ORDER_RULES:
            violation = self._check_pair(earlier, getattr(dates, earlier), later, getattr(dates, later))
            if violation:
                violations.append(violation)
        return violations

    def check_gaps(self, dates: Dict[str, Optional[date_type]]) -> List[ConstraintViolation]:
        """
        Compare actual gaps (rounded to whole weeks) against the gap table.
        Milestones missing from `dates` are skipped.
        """
        warnings = []
        for later, earlier, gap_key in chain_edges():
            later_date = dates.get(later)
            earlier_date = dates.get(earlier)
            if later_date is None or earlier_date is None:
                continue

            expected = getattr(self.gaps, gap_key)
            actual = round_half_up(abs((later_date - earlier_date).days) / 7)
            if actual != expected:
                warnings.append(ConstraintViolation(
                    "DateGap",
                    f"{_short(later)} to {_short(earlier)}: Expected {expected} weeks, got {actual} weeks",
                    earlier, later, earlier_date, later_date
                ))
        return warnings

    def _check_pair(self, earlier: str, earlier_date: date_type, later: str, later_date: date_type) -> Optional[ConstraintViolation]:
        if earlier_date < later_date:
            return None
        return ConstraintViolation(
            "Order",
            f"{MILESTONE_LABELS[earlier]} must be before {MILESTONE_LABELS[later]}",
            earlier, later, earlier_date, later_date
        )


def validate_milestone_order(dates: MilestoneDates) -> None:
    """Raise ValidationError naming every out-of-order pair."""
    violations = MilestoneChecker().check_order(dates)
    if violations:
        raise ValidationError(violations)


def _short(field: str) -> str:
    return MILESTONE_LABELS[field].removesuffix(" Date").removesuffix(" Met")
