"""Configuration models for taskpad."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .task import FilterKind, SortOrder

STORAGE_KEY = "tasks"


class StorageConfig(BaseModel):
    """Where the task blob lives.

    ``path`` is left unset by default; the config service fills it in with a
    file under the user data directory.
    """

    backend: Literal["file", "memory"] = Field(default="file")
    path: str | None = Field(default=None, description="JSON storage file")
    key: str = Field(default=STORAGE_KEY, description="Key holding the task blob")

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("key cannot be empty")
        return v.strip()


class ViewConfig(BaseModel):
    """Defaults for the list command."""

    default_filter: FilterKind = Field(default=FilterKind.ALL)
    default_sort: SortOrder = Field(default=SortOrder.DATE_ADDED)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml", "quiet"] = Field(default="pretty")


class AppConfig(BaseModel):
    """Main taskpad configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
