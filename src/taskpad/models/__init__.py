"""taskpad domain models.

This package contains the Pydantic models and enumerations that describe a
task and the knobs used to derive views over a task collection.
"""

from .config_models import AppConfig, OutputConfig, StorageConfig, ViewConfig
from .task import (
    DEFAULT_CATEGORIES,
    FilterKind,
    Priority,
    SortOrder,
    Task,
    TaskStats,
)

__all__ = [
    # Task models
    "Task",
    "TaskStats",
    "Priority",
    "FilterKind",
    "SortOrder",
    "DEFAULT_CATEGORIES",
    # Config models
    "AppConfig",
    "StorageConfig",
    "ViewConfig",
    "OutputConfig",
]
