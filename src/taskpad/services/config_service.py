"""Configuration service for managing taskpad configuration.

This module provides the ConfigService class, the single source of truth for
configuration in taskpad. It handles:

- Loading and saving config.json
- Dot-separated get/set of individual settings
- Building the TaskCollection for the configured storage backend
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel

from taskpad.adapters import build_storage
from taskpad.adapters.json_file import DEFAULT_FILE_NAME
from taskpad.models.config_models import AppConfig, StorageConfig
from taskpad.services.persistence_store import PersistenceStore
from taskpad.services.task_collection import TaskCollection


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("taskpad"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("taskpad"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run - write the defaults out so users can find and edit them
            self._config = self.create_default_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def create_default_config(self) -> AppConfig:
        """Create and save a default configuration with file storage."""
        self._config = AppConfig(
            storage=StorageConfig(path=str(self.data_dir / DEFAULT_FILE_NAME))
        )
        self.save_config()
        return self._config

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = None
        if self.config_path.exists():
            self.config_path.unlink()
        return self.create_default_config()

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Returns:
            The value, or None if the key does not exist
        """
        value: Any = self.config
        for k in key.split("."):
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        The whole config is revalidated, so a bad value raises
        pydantic.ValidationError and leaves the current config untouched.

        Raises:
            ValueError: If *key* does not name a setting
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise ValueError(f"Unknown config key '{key}'")
            current = current[k]
        if keys[-1] not in current:
            raise ValueError(f"Unknown config key '{key}'")

        current[keys[-1]] = value
        self._config = AppConfig.model_validate(config_dict)
        self.save_config()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service


def get_task_collection() -> TaskCollection:
    """Build a TaskCollection backed by the configured storage."""
    storage_config = get_config_service().config.storage
    store = PersistenceStore(build_storage(storage_config), key=storage_config.key)
    return TaskCollection(store)
