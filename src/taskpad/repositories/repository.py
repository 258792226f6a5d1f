"""Storage abstraction layer for taskpad.

The engine persists through a minimal string-keyed store, modelled on the
browser ``localStorage`` API: values are opaque strings, a key is either
present or absent, and a write replaces the whole value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """Abstract base class for string-keyed storage backends."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored under *key*.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "KeyValueStorage.get_item() must be implemented by adapter"
        )

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value.

        Args:
            key: Storage key
            value: String payload

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "KeyValueStorage.set_item() must be implemented by adapter"
        )

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove *key*. Removing an absent key is not an error.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "KeyValueStorage.remove_item() must be implemented by adapter"
        )

    @property
    @abstractmethod
    def storage_type(self) -> str:
        """Get storage type identifier (for logging/debugging)."""
