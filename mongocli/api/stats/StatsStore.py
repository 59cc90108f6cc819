"""Statistics store backed by a JSON file."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Literal

from pydantic import ValidationError

from ...utils.get_logger import get_logger
from ...utils.now_iso import now_iso
from .StatsRecord import StatsRecord

logger = get_logger("stats")

Operation = Literal["add", "update", "delete"]
OPERATIONS: tuple[str, ...] = ("add", "update", "delete")


class StatsStore:
    """Load, mutate and persist the statistics record.

    Every mutation is written to disk before the call returns.
    """

    def __init__(self, path: Path):
        self.path = path
        self.record = self._load()

    @classmethod
    def default_path(cls) -> Path:
        from ..config.CliConfig import CliConfig

        return CliConfig.get_home_dir() / "stats.json"

    @classmethod
    def open_default(cls) -> "StatsStore":
        return cls(cls.default_path())

    def _load(self) -> StatsRecord:
        if not self.path.exists():
            record = StatsRecord()
            self._write(record)
            return record
        try:
            with self.path.open() as fh:
                return StatsRecord.model_validate(json.load(fh))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Could not load stats file %s, using defaults: %s", self.path, e)
            return StatsRecord()

    def _write(self, record: StatsRecord) -> None:
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w") as fh:
                json.dump(record.to_dict(), fh, indent=2)
            temp_path.replace(self.path)
        except OSError as e:
            with suppress(OSError):
                temp_path.unlink()
            logger.error("Failed to save stats file %s: %s", self.path, e)

    def save(self) -> None:
        self._write(self.record)

    def record_success(self, operation: Operation, collection: str) -> None:
        """Count a successful add/update/delete and remember its collection."""
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation {operation!r} (expected one of {list(OPERATIONS)})")
        counters = self.record.operations
        setattr(counters, operation, getattr(counters, operation) + 1)
        self.record.last_used_collection = collection
        self.save()
        logger.debug("Recorded %s on %s", operation, collection)

    def record_connection(self, when: str | None = None) -> None:
        self.record.last_connection = when or now_iso()
        self.save()

    def get_stats(self) -> StatsRecord:
        """Copy of the current record."""
        return self.record.model_copy(deep=True)
