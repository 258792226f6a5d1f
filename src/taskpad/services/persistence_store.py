"""Persistence store - saves and restores the whole task list as one blob.

There is exactly one write primitive: serialize the full ordered sequence and
replace whatever sits under the storage key. No partial updates, no schema
versioning.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from taskpad.models import Task
from taskpad.models.config_models import STORAGE_KEY
from taskpad.repositories import KeyValueStorage
from taskpad.utils.logger import get_logger

_TASK_LIST = TypeAdapter(list[Task])


class PersistenceStore:
    """Reads and writes the task collection under a single storage key."""

    def __init__(self, storage: KeyValueStorage, key: str = STORAGE_KEY):
        """Initialize the persistence store.

        Args:
            storage: KeyValueStorage implementation holding the blob
            key: Key the serialized collection is written under
        """
        self.storage = storage
        self.key = key

    def save(self, tasks: Iterable[Task]) -> None:
        """Serialize *tasks* and replace the stored value."""
        tasks = list(tasks)
        blob = _TASK_LIST.dump_json(tasks, by_alias=True).decode("utf-8")
        self.storage.set_item(self.key, blob)
        get_logger().debug(
            "saved %d task(s) to %s storage under %r",
            len(tasks),
            self.storage.storage_type,
            self.key,
        )

    def load(self) -> list[Task]:
        """Restore the stored collection.

        Returns:
            The tasks in stored order. An absent key gives an empty list, and
            so does a value that fails to decode or validate or that repeats
            a task id; the bad value stays in storage until the next save
            overwrites it.
        """
        blob = self.storage.get_item(self.key)
        if blob is None:
            return []

        try:
            tasks = _TASK_LIST.validate_json(blob)
        except ValidationError as e:
            return self._malformed(e)

        ids = [t.id for t in tasks]
        if len(set(ids)) != len(ids):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            return self._malformed(f"duplicate task ids {duplicates}")
        return tasks

    def _malformed(self, reason: object) -> list[Task]:
        get_logger().warning(
            "stored tasks under %r are malformed, starting empty: %s",
            self.key,
            reason,
        )
        return []

    def clear(self) -> None:
        """Drop the stored collection."""
        self.storage.remove_item(self.key)
