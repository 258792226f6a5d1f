"""Task data models."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_CATEGORIES = ("personal", "work", "shopping", "health", "other")
FALLBACK_CATEGORY = "other"


class Priority(str, Enum):
    """Task priority levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank, 0 is the most urgent."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class FilterKind(str, Enum):
    """Which subset of the collection a view shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"
    HIGH_PRIORITY = "high-priority"
    OVERDUE = "overdue"


class SortOrder(str, Enum):
    """How a view is ordered."""

    DATE_ADDED = "date-added"
    DUE_DATE = "due-date"
    PRIORITY = "priority"


def normalize_category(value: str | None) -> str:
    """Lower-case and trim a category tag; blank means 'other'."""
    if value is None:
        return FALLBACK_CATEGORY
    value = str(value).strip().lower()
    return value or FALLBACK_CATEGORY


class Task(BaseModel):
    """A single to-do item.

    Attributes:
        id: Unique, strictly increasing identifier (milliseconds since epoch,
            bumped on collisions). Doubles as the newest-first sort key.
        text: Task description, never blank.
        completed: Completion flag
        priority: Priority level
        due_date: Optional calendar deadline
        category: Free-form tag, see DEFAULT_CATEGORIES for the usual ones
        created_at: Creation timestamp, never changes

    Persisted with camelCase keys (``dueDate``, ``createdAt``); either the
    alias or the field name is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    id: int = Field(frozen=True)
    text: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    due_date: date | None = None
    category: str = FALLBACK_CATEGORY
    created_at: datetime = Field(frozen=True)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank text."""
        v = v.strip()
        if not v:
            raise ValueError("text cannot be empty")
        return v

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, v):
        # An empty date input is stored as "" by some writers
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v) -> str:
        return normalize_category(v)

    def is_overdue(self, today: date) -> bool:
        """True when the task is open and its due date is strictly before *today*."""
        return (
            not self.completed
            and self.due_date is not None
            and self.due_date < today
        )


class TaskStats(BaseModel):
    """Counters computed over the whole collection."""

    total: int = 0
    active: int = 0
    completed: int = 0
    overdue: int = 0
