"""Task helper utilities for the command layer."""

from __future__ import annotations

from datetime import date


def parse_due_date(value: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` due date typed by the user.

    Args:
        value: Raw option value; None or blank means no due date

    Returns:
        The parsed date, or None

    Raises:
        ValueError: If the value is not a valid calendar date
    """
    if value is None or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ValueError(f"Invalid due date '{value}', expected YYYY-MM-DD") from e


def pluralize_tasks(count: int) -> str:
    """'1 task' / '3 tasks'."""
    return f"{count} task" if count == 1 else f"{count} tasks"
