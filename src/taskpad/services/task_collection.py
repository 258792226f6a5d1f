"""Task collection - the authoritative, ordered list of tasks.

The collection owns every Task instance. Callers only ever receive copies,
so nothing outside can change a task without going through a mutator, and
every successful mutator persists the full list before returning.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime

from pydantic import ValidationError

from taskpad.models import FilterKind, Priority, SortOrder, Task, TaskStats
from taskpad.models.task import FALLBACK_CATEGORY
from taskpad.services.persistence_store import PersistenceStore
from taskpad.services.view import derive_view
from taskpad.utils.id_generator import MonotonicIdGenerator, utc_now
from taskpad.utils.logger import get_logger


class TaskCollection:
    """In-memory task list with validated mutation and view derivation.

    Mutators never raise for business-rule violations: blank text and
    unknown ids are no-ops reported through the return value (None or False)
    and nothing is written to storage.
    """

    def __init__(
        self,
        store: PersistenceStore,
        *,
        clock: Callable[[], datetime] | None = None,
        id_generator: MonotonicIdGenerator | None = None,
    ):
        """Load the collection from *store*.

        Args:
            store: PersistenceStore the collection is read from and saved to
            clock: Returns the current timezone-aware datetime. Defaults to UTC now
            id_generator: Id source; seeded with the highest loaded id
        """
        if store is None:
            raise ValueError("TaskCollection requires a PersistenceStore")

        self.store = store
        self._clock = clock or utc_now
        self._ids = id_generator or MonotonicIdGenerator(self._clock)
        self._tasks: list[Task] = store.load()
        if self._tasks:
            self._ids.seed(max(t.id for t in self._tasks))

        get_logger().debug("task collection loaded with %d task(s)", len(self._tasks))

    # -------------------- queries --------------------

    @property
    def tasks(self) -> list[Task]:
        """Copies of all tasks in storage (insertion) order."""
        return [t.model_copy() for t in self._tasks]

    def get_task(self, task_id: int) -> Task | None:
        """Return a copy of the task with *task_id*, or None."""
        index = self._index_of(task_id)
        if index is None:
            return None
        return self._tasks[index].model_copy()

    def today(self) -> date:
        """Current local calendar date according to the collection clock."""
        return self._clock().astimezone().date()

    def active_count(self) -> int:
        """Number of incomplete tasks in the whole collection."""
        return sum(1 for t in self._tasks if not t.completed)

    def stats(self, *, today: date | None = None) -> TaskStats:
        """Counters over the whole collection, ignoring any view."""
        today = today or self.today()
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(
            total=len(self._tasks),
            active=len(self._tasks) - completed,
            completed=completed,
            overdue=sum(1 for t in self._tasks if t.is_overdue(today)),
        )

    def derive_view(
        self,
        filter_kind: FilterKind = FilterKind.ALL,
        query: str | None = "",
        sort_order: SortOrder = SortOrder.DATE_ADDED,
        *,
        today: date | None = None,
    ) -> list[Task]:
        """Filter, search and sort the collection for display.

        Does not touch the stored order and never persists.

        Args:
            filter_kind: Subset to show
            query: Case-insensitive text search
            sort_order: Display ordering
            today: Reference date for the overdue filter; defaults to today()

        Returns:
            Copies of the selected tasks in display order
        """
        view = derive_view(
            self._tasks,
            FilterKind(filter_kind),
            query,
            SortOrder(sort_order),
            today=today or self.today(),
        )
        return [t.model_copy() for t in view]

    # -------------------- mutators --------------------

    def add_task(
        self,
        text: str,
        priority: Priority | str = Priority.MEDIUM,
        due_date: date | str | None = None,
        category: str | None = FALLBACK_CATEGORY,
    ) -> Task | None:
        """Create a task and append it to the collection.

        Args:
            text: Task description; trimmed before use
            priority: Priority level
            due_date: Optional deadline (date or "YYYY-MM-DD")
            category: Category tag

        Returns:
            A copy of the new task, or None when the trimmed text is empty
            or the due date is not a valid calendar date
        """
        text = (text or "").strip()
        if not text:
            get_logger().debug("add_task ignored: empty text")
            return None

        priority = Priority(priority)
        try:
            task = Task(
                id=self._ids.next_id(),
                text=text,
                priority=priority,
                due_date=due_date,
                category=category,
                created_at=self._clock(),
            )
        except ValidationError as e:
            get_logger().debug("add_task ignored: %s", e)
            return None
        self._tasks.append(task)
        self._persist()
        get_logger().info("task %d added", task.id)
        return task.model_copy()

    def toggle_task(self, task_id: int) -> bool:
        """Flip the completion flag of *task_id*; False if unknown."""
        index = self._index_of(task_id)
        if index is None:
            get_logger().debug("toggle_task ignored: no task %s", task_id)
            return False

        task = self._tasks[index]
        task.completed = not task.completed
        self._persist()
        get_logger().info(
            "task %d marked %s", task_id, "completed" if task.completed else "active"
        )
        return True

    def edit_task(
        self,
        task_id: int,
        text: str,
        priority: Priority | str,
        due_date: date | str | None,
        category: str | None,
    ) -> bool:
        """Replace the editable fields of *task_id*.

        ``id``, ``created_at`` and ``completed`` are kept. Returns False and
        changes nothing when the trimmed text is empty, the id is unknown or
        the due date is not a valid calendar date.
        """
        text = (text or "").strip()
        if not text:
            get_logger().debug("edit_task ignored: empty text for task %s", task_id)
            return False

        index = self._index_of(task_id)
        if index is None:
            get_logger().debug("edit_task ignored: no task %s", task_id)
            return False

        current = self._tasks[index]
        priority = Priority(priority)
        # Validate the whole edit before anything is replaced
        try:
            updated = Task.model_validate(
                {
                    **current.model_dump(),
                    "text": text,
                    "priority": priority,
                    "due_date": due_date,
                    "category": category,
                }
            )
        except ValidationError as e:
            get_logger().debug("edit_task ignored for task %s: %s", task_id, e)
            return False
        self._tasks[index] = updated
        self._persist()
        get_logger().info("task %d edited", task_id)
        return True

    def delete_task(self, task_id: int) -> bool:
        """Remove *task_id* permanently; False if unknown."""
        index = self._index_of(task_id)
        if index is None:
            get_logger().debug("delete_task ignored: no task %s", task_id)
            return False

        del self._tasks[index]
        self._persist()
        get_logger().info("task %d deleted", task_id)
        return True

    def clear_completed(self) -> int:
        """Remove every completed task.

        Returns:
            Number of tasks removed; storage is only written when non-zero
        """
        remaining = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(remaining)
        if removed:
            self._tasks = remaining
            self._persist()
            get_logger().info("cleared %d completed task(s)", removed)
        return removed

    def clear_all(self) -> int:
        """Remove every task and drop the stored value.

        Returns:
            Number of tasks removed
        """
        removed = len(self._tasks)
        self._tasks = []
        self.store.clear()
        get_logger().info("cleared all %d task(s)", removed)
        return removed

    # -------------------- internals --------------------

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _persist(self) -> None:
        self.store.save(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)
