"""Tests for freezing, reading and unfreezing availability baselines."""

import asyncio
from datetime import date

import pytest

from availability import (
    AvailabilityEngine,
    BaselineStore,
    FileKeyValueStore,
    FreezeStoreError,
    InMemoryKeyValueStore,
    availability_for_plan,
)
from models import MilestoneDates
from tests.conftest import us_federal_source

DATES = MilestoneDates(execute_commit_date=date(2024, 7, 1), soft_code_complete_date=date(2024, 9, 1), ga_date=date(2024, 11, 1))
LATER_DATES = MilestoneDates(execute_commit_date=date(2024, 7, 1), soft_code_complete_date=date(2024, 9, 15), ga_date=date(2024, 11, 12))


@pytest.fixture
def result(engine):
    return asyncio.run(engine.analyze_dates(DATES))


@pytest.fixture
def later_result(engine):
    return asyncio.run(engine.analyze_dates(LATER_DATES))


class BrokenBackend:
    def get(self, key):
        raise OSError("disk unavailable")

    def set(self, key, value):
        raise OSError("disk unavailable")

    def delete(self, key):
        raise OSError("disk unavailable")


class TestFreezeLifecycle:

    def test_unfrozen_by_default(self, baseline_store):
        assert not baseline_store.is_frozen("nx-7.0")
        assert baseline_store.read("nx-7.0") is None

    def test_freeze_then_read_returns_exact_payload(self, baseline_store, result):
        frozen = baseline_store.freeze("nx-7.0", DATES, result)

        assert baseline_store.is_frozen("nx-7.0")
        stored = baseline_store.read("nx-7.0")
        assert stored == frozen
        assert stored.input_dates == DATES
        assert stored.availability_result == result

    def test_unfreeze(self, baseline_store, result):
        baseline_store.freeze("nx-7.0", DATES, result)
        baseline_store.unfreeze("nx-7.0")

        assert not baseline_store.is_frozen("nx-7.0")
        assert baseline_store.read("nx-7.0") is None

    def test_unfreeze_when_unfrozen_is_a_noop(self, baseline_store):
        baseline_store.unfreeze("never-frozen")

        assert baseline_store.read("never-frozen") is None

    def test_second_freeze_overwrites(self, baseline_store, result, later_result):
        baseline_store.freeze("nx-7.0", DATES, result)
        baseline_store.freeze("nx-7.0", LATER_DATES, later_result)

        stored = baseline_store.read("nx-7.0")
        assert stored.input_dates == LATER_DATES
        assert stored.availability_result == later_result

    def test_plans_are_independent(self, baseline_store, result):
        baseline_store.freeze("nx-7.0", DATES, result)

        assert not baseline_store.is_frozen("nx-7.1")


class TestBackends:

    def test_file_store_survives_restart(self, tmp_path, result):
        BaselineStore(FileKeyValueStore(tmp_path)).freeze("release/2024.11", DATES, result)

        reopened = BaselineStore(FileKeyValueStore(tmp_path))

        assert reopened.read("release/2024.11").availability_result == result
        reopened.unfreeze("release/2024.11")
        assert list(tmp_path.iterdir()) == []

    def test_namespaces_do_not_collide(self, result):
        backend = InMemoryKeyValueStore()
        BaselineStore(backend, namespace="team-a").freeze("nx-7.0", DATES, result)

        assert not BaselineStore(backend, namespace="team-b").is_frozen("nx-7.0")
        assert len(backend) == 1

    def test_backend_failure_is_wrapped(self, result):
        store = BaselineStore(BrokenBackend())

        with pytest.raises(FreezeStoreError) as exc_info:
            store.freeze("nx-7.0", DATES, result)

        assert exc_info.value.key == "baseline:nx-7.0"
        assert isinstance(exc_info.value.original_error, OSError)

    def test_corrupt_payload_is_reported(self):
        backend = InMemoryKeyValueStore()
        backend.set("baseline:nx-7.0", b"{not json")

        with pytest.raises(FreezeStoreError):
            BaselineStore(backend).read("nx-7.0")


class TestAvailabilityForPlan:

    @pytest.mark.asyncio
    async def test_frozen_plan_is_not_recomputed(self, baseline_store, result):
        baseline_store.freeze("nx-7.0", DATES, result)
        source = us_federal_source()

        shown = await availability_for_plan("nx-7.0", LATER_DATES, AvailabilityEngine(source), baseline_store)

        assert shown == result
        assert source.calls == []

    @pytest.mark.asyncio
    async def test_unfrozen_plan_is_computed_fresh(self, baseline_store):
        source = us_federal_source()

        shown = await availability_for_plan("nx-7.0", LATER_DATES, AvailabilityEngine(source), baseline_store)

        assert shown.ga_date == date(2024, 11, 12)
        assert source.calls == [(2024, "US")]
