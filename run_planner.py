"""
Main Execution Script for the Release Capacity Planner.

Derives milestones from a GA date (or takes explicit milestone dates), runs
the availability analysis and prints a report. A release plan can be frozen
so later runs show the locked baseline instead of recomputing.
"""

import argparse
import asyncio
import logging
import sys
from datetime import date

from availability import (
    AvailabilityEngine,
    BaselineStore,
    CapacityPlannerError,
    FileKeyValueStore,
    LibraryHolidaySource,
    MilestoneChecker,
    availability_for_plan,
    plan_milestones,
)
from availability.milestone_planner import MILESTONE_LABELS
from models import AvailabilityResult, MilestoneDates, PlannerConfig

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("Main")

# --- CONFIGURATION ---
BASELINE_DIR = ".baselines"
HOLIDAY_TIMEOUT_SECONDS = 10.0
# ---------------------


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Release capacity planner')
    parser.add_argument('--ga', type=date.fromisoformat, help='GA date; other milestones are derived backward from it')
    parser.add_argument('--execute-commit', type=date.fromisoformat, help='Execute Commit date (overrides the derived one)')
    parser.add_argument('--soft-code-complete', type=date.fromisoformat, help='Soft Code Complete date (overrides the derived one)')
    parser.add_argument('--plan-id', help='Release plan identifier for freeze/unfreeze')
    parser.add_argument('--freeze', action='store_true', help='Freeze the computed result as the plan baseline')
    parser.add_argument('--unfreeze', action='store_true', help='Drop the plan baseline before running')
    parser.add_argument('--baseline-dir', default=BASELINE_DIR, help='Directory holding frozen baselines')
    parser.add_argument('--timeout', type=float, default=HOLIDAY_TIMEOUT_SECONDS, help='Seconds to wait for the analysis')
    args = parser.parse_args(argv)

    if not args.ga:
        parser.error('--ga is required')
    if (args.freeze or args.unfreeze) and not args.plan_id:
        parser.error('--freeze/--unfreeze need --plan-id')
    return args


def format_report(result: AvailabilityResult, frozen: bool = False) -> str:
    """Render an availability result as a plain-text report."""
    d = result.deductions
    a = result.availability
    lines = [
        "=" * 50,
        "AVAILABILITY ANALYSIS" + (" (FROZEN BASELINE)" if frozen else ""),
        "=" * 50,
        f"Execute Commit Date:      {result.execute_commit_date}",
        f"Soft Code Complete Date:  {result.soft_code_complete_date}",
        f"GA Date:                  {result.ga_date}",
        "",
        f"Total Working Days:       {result.total_working_days}",
        f"  Code Complete Period:   {result.code_complete_working_days}",
        f"  After Code Complete:    {result.after_code_complete_working_days}",
        "",
    ]
    for label, bucket in (("Holidays", d.holidays), ("Hackathon Days", d.hackathon), ("Vacations", d.vacation)):
        lines.append(f"{label}: {bucket.total} ({bucket.code_complete_period} + {bucket.after_code_complete_period})")
    for holiday in d.holidays.breakdown:
        lines.append(f"  - {holiday.name} ({holiday.date}) - {holiday.kind.value}")
    for day in d.hackathon.breakdown:
        lines.append(f"  - {day.reason}")
    lines.append(f"  Policy: {d.vacation.policy}")
    lines += [
        "",
        f"Days Available to Code Complete:    {a.days_available_to_code_complete}",
        f"Days Available After Code Complete: {a.days_available_after_code_complete}",
        f"Total Available Days:               {a.total_available_days}",
        f"Efficiency:                         {a.efficiency:.1f}%",
    ]
    if result.insights:
        lines += ["", "Insights:"] + [f"  - {i}" for i in result.insights]
    if result.recommendations:
        lines += ["", "Recommendations:"] + [f"  - {r}" for r in result.recommendations]
    return "\n".join(lines)


async def run(args) -> int:
    config = PlannerConfig.from_env()
    plan = plan_milestones(args.ga, config.date_gaps)

    logger.info("📅 Suggested milestones:")
    for field, value in plan.model_dump().items():
        logger.info(f"   {MILESTONE_LABELS[field]:<26} {value}")

    dates = MilestoneDates(
        execute_commit_date=args.execute_commit or plan.execute_commit_date,
        soft_code_complete_date=args.soft_code_complete or plan.soft_code_complete_date,
        ga_date=plan.ga_date,
    )
    for warning in MilestoneChecker(config.date_gaps).check_gaps(dates.model_dump()):
        logger.warning(f"⚠️ {warning.reason}")

    engine = AvailabilityEngine(LibraryHolidaySource(), config)
    store = BaselineStore(FileKeyValueStore(args.baseline_dir))

    if args.unfreeze:
        store.unfreeze(args.plan_id)

    try:
        if args.plan_id:
            frozen = store.is_frozen(args.plan_id)
            result = await asyncio.wait_for(
                availability_for_plan(args.plan_id, dates, engine, store), args.timeout
            )
        else:
            frozen = False
            result = await asyncio.wait_for(engine.analyze_dates(dates), args.timeout)
    except asyncio.TimeoutError:
        logger.error(f"❌ Analysis did not finish within {args.timeout}s")
        return 1
    except CapacityPlannerError as e:
        logger.error(f"❌ {e}")
        return 1

    if args.freeze and not frozen:
        store.freeze(args.plan_id, dates, result)
        frozen = True

    print(format_report(result, frozen=frozen))
    return 0


def main(argv=None) -> int:
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
