"""Tests for the command-line demo script."""

import asyncio
from datetime import date

import pytest

import run_planner
from tests.conftest import us_federal_source


def test_format_report(engine):
    result = asyncio.run(engine.analyze(date(2024, 7, 1), date(2024, 9, 1), date(2024, 11, 1)))

    report = run_planner.format_report(result, frozen=True)

    assert "AVAILABILITY ANALYSIS (FROZEN BASELINE)" in report
    assert "Total Working Days:       90" in report
    assert "  - Labor Day (2024-09-02) - floating" in report
    assert "Efficiency:                         76.7%" in report


def test_requires_ga():
    with pytest.raises(SystemExit):
        run_planner.parse_args([])


def test_freeze_needs_plan_id():
    with pytest.raises(SystemExit):
        run_planner.parse_args(["--ga", "2025-11-11", "--freeze"])


def test_freeze_then_show_baseline(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(run_planner, "LibraryHolidaySource", us_federal_source)
    args = ["--ga", "2025-11-11", "--plan-id", "nx-7.0", "--baseline-dir", str(tmp_path)]

    assert run_planner.main(args + ["--freeze"]) == 0
    assert len(list(tmp_path.iterdir())) == 1
    capsys.readouterr()

    assert run_planner.main(args) == 0
    out = capsys.readouterr().out
    assert "FROZEN BASELINE" in out
    assert "Execute Commit Date:      2025-07-22" in out


def test_validation_error_exit_code(tmp_path):
    args = ["--ga", "2025-11-11", "--soft-code-complete", "2025-12-01", "--baseline-dir", str(tmp_path)]

    assert run_planner.main(args) == 1
