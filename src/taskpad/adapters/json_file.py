"""JSON file implementation of KeyValueStorage.

The file holds a single JSON object whose values are strings, so the task
blob ends up double-encoded on disk::

    {"tasks": "[{\"id\": 1700000000000, \"text\": \"Buy milk\", ...}]"}

That keeps the adapter agnostic of what callers store under each key.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_data_dir

from taskpad.repositories import KeyValueStorage
from taskpad.utils.logger import get_logger

DEFAULT_FILE_NAME = "storage.json"


def default_storage_path() -> Path:
    """Default storage file under the user data directory."""
    return Path(user_data_dir("taskpad")) / DEFAULT_FILE_NAME


class JsonFileStorage(KeyValueStorage):
    """Key-value storage persisted as one JSON object in a file."""

    def __init__(self, path: str | Path | None = None):
        """Initialize the file storage.

        Args:
            path: Storage file path. If None, uses default location.
        """
        self.path = Path(path) if path is not None else default_storage_path()

    def _read(self) -> dict[str, str]:
        """Load the whole object from disk.

        Returns:
            Dict mapping key to stored string; empty if the file is missing
            or unreadable
        """
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            get_logger().warning("storage file %s unreadable: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            get_logger().warning(
                "storage file %s does not hold a JSON object, ignoring it", self.path
            )
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    @property
    def storage_type(self) -> str:
        return "file"
