"""Services module for taskpad - the task collection engine."""

from .persistence_store import PersistenceStore
from .task_collection import TaskCollection
from .view import derive_view, filter_tasks, search_tasks, sort_tasks

__all__ = [
    "TaskCollection",
    "PersistenceStore",
    "derive_view",
    "filter_tasks",
    "search_tasks",
    "sort_tasks",
]
