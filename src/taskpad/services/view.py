"""View derivation - filter, search and sort a task sequence.

Everything here is pure: the input sequence and its tasks are never
modified, and each stage hands a new list to the next.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date

from taskpad.models import FilterKind, Priority, SortOrder, Task


def _matches_filter(filter_kind: FilterKind, today: date) -> Callable[[Task], bool]:
    if filter_kind == FilterKind.ACTIVE:
        return lambda t: not t.completed
    if filter_kind == FilterKind.COMPLETED:
        return lambda t: t.completed
    if filter_kind == FilterKind.HIGH_PRIORITY:
        return lambda t: t.priority == Priority.HIGH and not t.completed
    if filter_kind == FilterKind.OVERDUE:
        return lambda t: t.is_overdue(today)
    return lambda t: True


def filter_tasks(tasks: Sequence[Task], filter_kind: FilterKind, today: date) -> list[Task]:
    """Keep the tasks selected by *filter_kind*."""
    predicate = _matches_filter(FilterKind(filter_kind), today)
    return [t for t in tasks if predicate(t)]


def search_tasks(tasks: Sequence[Task], query: str | None) -> list[Task]:
    """Case-insensitive substring match on task text; blank query keeps all."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(tasks)
    return [t for t in tasks if needle in t.text.lower()]


def sort_tasks(tasks: Sequence[Task], sort_order: SortOrder) -> list[Task]:
    """Order *tasks*; every ordering is stable."""
    sort_order = SortOrder(sort_order)
    if sort_order == SortOrder.DUE_DATE:
        # Undated tasks go last, keeping their relative order
        return sorted(tasks, key=lambda t: (t.due_date is None, t.due_date or date.min))
    if sort_order == SortOrder.PRIORITY:
        return sorted(tasks, key=lambda t: t.priority.rank)
    return sorted(tasks, key=lambda t: t.id, reverse=True)


def derive_view(
    tasks: Sequence[Task],
    filter_kind: FilterKind = FilterKind.ALL,
    query: str | None = "",
    sort_order: SortOrder = SortOrder.DATE_ADDED,
    *,
    today: date,
) -> list[Task]:
    """Compose filter, then search, then sort.

    Args:
        tasks: Source sequence in storage order
        filter_kind: Subset to keep
        query: Free-text search, matched against task text
        sort_order: Display ordering
        today: Reference date for the overdue filter

    Returns:
        A new list holding the selected tasks in display order
    """
    filtered = filter_tasks(tasks, filter_kind, today)
    found = search_tasks(filtered, query)
    return sort_tasks(found, sort_order)
