"""
Backward Milestone Planner.

Derives a full milestone plan from a single GA date by walking a fixed chain
of milestones backward, subtracting the configured gap (in weeks) at each step.
The chain order is part of the contract.
"""

from datetime import date as date_type, datetime, timedelta
from typing import Optional

from models import DateGaps, MilestonePlan

# (milestone field, gap key from its successor), latest milestone first.
MILESTONE_CHAIN = (
    ("promotion_gate_met_date", "ga_to_promotion_gate"),
    ("commit_gate_met_date", "promotion_gate_to_commit_gate"),
    ("soft_code_complete_date", "commit_gate_to_soft_code_complete"),
    ("execute_commit_date", "soft_code_complete_to_execute_commit"),
    ("concept_commit_date", "execute_commit_to_concept_commit"),
    ("pre_cc_complete_date", "concept_commit_to_pre_cc"),
)

MILESTONE_LABELS = {
    "ga_date": "GA Date",
    "promotion_gate_met_date": "Promotion Gate Met Date",
    "commit_gate_met_date": "Commit Gate Met Date",
    "soft_code_complete_date": "Soft Code Complete Date",
    "execute_commit_date": "Execute Commit Date",
    "concept_commit_date": "Concept Commit Date",
    "pre_cc_complete_date": "Pre-CC Complete Date",
}


def chain_edges():
    """Yield (later_field, earlier_field, gap_key) for each step of the chain."""
    later = "ga_date"
    for field, gap_key in MILESTONE_CHAIN:
        yield later, field, gap_key
        later = field


def plan_milestones(ga_date: date_type, gaps: Optional[DateGaps] = None) -> MilestonePlan:
    """Compute every milestone date backward from GA."""
    if isinstance(ga_date, datetime):
        ga_date = ga_date.date()
    gaps = gaps or DateGaps()

    dates = {"ga_date": ga_date}
    for later, field, gap_key in chain_edges():
        weeks = getattr(gaps, gap_key)
        dates[field] = dates[later] - timedelta(weeks=weeks)

    return MilestonePlan(**dates)
