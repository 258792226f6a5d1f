"""In-memory implementation of KeyValueStorage."""

from __future__ import annotations

from taskpad.repositories import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage; contents live only as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    @property
    def storage_type(self) -> str:
        return "memory"
