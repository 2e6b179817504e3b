"""
Baseline Freeze Store.

This module is the 'Memory' of the planner. It keeps one frozen availability
result per release plan so that a planned baseline is shown as it was locked,
not recomputed on every view.

State per release plan: Unfrozen (no record) or Frozen (record present).
The store only needs get/set/delete on bytes, so any key-value substrate works.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union
from urllib.parse import quote

from pydantic import ValidationError as ModelValidationError

from models import AvailabilityResult, FrozenBaseline, MilestoneDates
from .errors import FreezeStoreError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[bytes]:
        ...

    def set(self, key: str, value: bytes) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Process-local backend."""

    def __init__(self):
        self._data: Dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)


class FileKeyValueStore:
    """
    One JSON file per key under `directory`; survives process restarts.
    Writes go through a temp file and an atomic rename.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(value)
            os.replace(tmp_name, self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{quote(key, safe='')}.json"


class BaselineStore:
    """
    Freeze/unfreeze availability baselines, keyed by release plan.
    """

    def __init__(self, backend: KeyValueStore, namespace: str = "baseline"):
        self.backend = backend
        self.namespace = namespace

    def freeze(
        self,
        release_plan_id: str,
        input_dates: MilestoneDates,
        result: AvailabilityResult
    ) -> FrozenBaseline:
        """
        Lock `result` as the baseline for a release plan.
        Replaces any earlier baseline for the same plan (last write wins).
        """
        baseline = FrozenBaseline(
            release_plan_id=release_plan_id,
            input_dates=input_dates,
            availability_result=result,
        )
        # Serialize fully before touching the backend so a failure leaves nothing behind
        payload = baseline.model_dump_json().encode("utf-8")

        key = self._key(release_plan_id)
        if self._call("get", key) is not None:
            logger.warning(f"Overwriting frozen baseline for release plan {release_plan_id}")
        self._call("set", key, payload)

        logger.info(f"Froze baseline for release plan {release_plan_id}")
        return baseline

    def unfreeze(self, release_plan_id: str) -> None:
        """Drop the baseline. Unfreezing an unfrozen plan is a no-op."""
        self._call("delete", self._key(release_plan_id))
        logger.info(f"Unfroze baseline for release plan {release_plan_id}")

    def is_frozen(self, release_plan_id: str) -> bool:
        return self._call("get", self._key(release_plan_id)) is not None

    def read(self, release_plan_id: str) -> Optional[FrozenBaseline]:
        key = self._key(release_plan_id)
        payload = self._call("get", key)
        if payload is None:
            return None
        try:
            return FrozenBaseline.model_validate_json(payload)
        except ModelValidationError as e:
            raise FreezeStoreError(key, "read", e) from e

    def _key(self, release_plan_id: str) -> str:
        return f"{self.namespace}:{release_plan_id}"

    def _call(self, operation: str, key: str, *args):
        try:
            return getattr(self.backend, operation)(key, *args)
        except Exception as e:
            logger.error(f"Baseline store {operation} failed for {key}: {e}")
            raise FreezeStoreError(key, operation, e) from e


async def availability_for_plan(release_plan_id: str, dates: MilestoneDates, engine, store: BaselineStore) -> AvailabilityResult:
    """
    The result to display for a release plan: the frozen baseline verbatim
    when one exists, otherwise a fresh analysis of `dates`.
    """
    baseline = store.read(release_plan_id)
    if baseline is not None:
        logger.debug(f"Release plan {release_plan_id} is frozen; skipping recompute")
        return baseline.availability_result
    return await engine.analyze_dates(dates)
