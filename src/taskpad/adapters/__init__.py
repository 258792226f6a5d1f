"""Adapters module - KeyValueStorage implementations.

This package contains concrete implementations (adapters) for the storage port:
- json_file: Local JSON file storage
- memory: Process-local dict storage
"""

from __future__ import annotations

from taskpad.models.config_models import StorageConfig
from taskpad.repositories import KeyValueStorage

from .json_file import JsonFileStorage
from .memory import InMemoryStorage


def build_storage(config: StorageConfig) -> KeyValueStorage:
    """Create the storage adapter selected by *config*."""
    if config.backend == "memory":
        return InMemoryStorage()
    return JsonFileStorage(config.path)


__all__ = [
    "JsonFileStorage",
    "InMemoryStorage",
    "build_storage",
]
