"""Task commands - add, list, done, edit, delete, clear-completed, stats.

Each command builds a TaskCollection from the configured storage, calls one
engine operation and renders the result. Engine no-ops (blank text, unknown
id) surface here as AppError with a semantic exit code.
"""

import typer
from rich.markup import escape

from taskpad.models import DEFAULT_CATEGORIES, FilterKind, Priority, SortOrder
from taskpad.services.config_service import get_config_service, get_task_collection
from taskpad.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND, SUCCESS
from taskpad.utils.task_helpers import parse_due_date, pluralize_tasks
from taskpad.utils.ui.console import get_console
from taskpad.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

console = get_console()

CATEGORY_HELP = f"Category tag, e.g. {', '.join(DEFAULT_CATEGORIES)}"


def _due_or_error(value: str | None):
    try:
        return parse_due_date(value)
    except ValueError as e:
        raise AppError(str(e), ERROR_INVALID_ARGS) from e


@command_wrapper
def add(
    text: list[str] = typer.Argument(..., help="Task text"),
    priority: Priority = typer.Option(
        Priority.MEDIUM, "--priority", "-p", case_sensitive=False, help="Priority"
    ),
    due: str | None = typer.Option(None, "--due", "-d", help="Due date (YYYY-MM-DD)"),
    category: str = typer.Option("other", "--category", "-c", help=CATEGORY_HELP),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Add a task."""
    due_date = _due_or_error(due)
    collection = get_task_collection()

    task = collection.add_task(" ".join(text), priority, due_date, category)
    if task is None:
        raise AppError("Task text cannot be empty", ERROR_INVALID_ARGS)

    if output == "pretty":
        format_success(f"Added task {task.id}: {escape(task.text)}")
    else:
        format_output(task.model_dump(mode="json"), output)


@command_wrapper
def list_tasks(
    filter_kind: FilterKind | None = typer.Option(
        None, "--filter", "-f", case_sensitive=False, help="Which tasks to show"
    ),
    search: str = typer.Option("", "--search", "-s", help="Search task text"),
    sort: SortOrder | None = typer.Option(
        None, "--sort", case_sensitive=False, help="Sort order"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List tasks."""
    config = get_config_service().config
    filter_kind = filter_kind or config.view.default_filter
    sort = sort or config.view.default_sort
    output = output or config.output.format

    collection = get_task_collection()
    today = collection.today()
    view = collection.derive_view(filter_kind, search, sort, today=today)

    result = {"tasks": [t.model_dump(mode="json") for t in view]}
    if output in ("json", "yaml"):
        result["active_count"] = collection.active_count()
        format_output(result, output)
        return

    format_output(result, output, today=today)
    if output != "quiet":
        console.print(f"\n[dim]{pluralize_tasks(collection.active_count())} left[/dim]")


@command_wrapper
def done(
    task_id: int = typer.Argument(..., help="Task ID"),
) -> None:
    """Toggle a task between completed and active."""
    collection = get_task_collection()
    if not collection.toggle_task(task_id):
        raise AppError(f"Task {task_id} not found", ERROR_NOT_FOUND)

    task = collection.get_task(task_id)
    state = "completed" if task.completed else "active"
    format_success(f"Task {task_id} marked {state}")


@command_wrapper
def edit(
    task_id: int = typer.Argument(..., help="Task ID"),
    text: str | None = typer.Option(None, "--text", "-t", help="New task text"),
    priority: Priority | None = typer.Option(
        None, "--priority", "-p", case_sensitive=False, help="New priority"
    ),
    due: str | None = typer.Option(None, "--due", "-d", help="New due date (YYYY-MM-DD)"),
    clear_due: bool = typer.Option(False, "--clear-due", help="Remove the due date"),
    category: str | None = typer.Option(None, "--category", "-c", help=CATEGORY_HELP),
) -> None:
    """Edit a task. Fields that are not given keep their current value."""
    if due is not None and clear_due:
        raise AppError("Use either --due or --clear-due, not both", ERROR_INVALID_ARGS)
    new_due = _due_or_error(due)

    collection = get_task_collection()
    current = collection.get_task(task_id)
    if current is None:
        raise AppError(f"Task {task_id} not found", ERROR_NOT_FOUND)

    if clear_due:
        due_date = None
    elif due is not None:
        due_date = new_due
    else:
        due_date = current.due_date

    edited = collection.edit_task(
        task_id,
        current.text if text is None else text,
        priority or current.priority,
        due_date,
        current.category if category is None else category,
    )
    if not edited:
        raise AppError("Task text cannot be empty", ERROR_INVALID_ARGS)
    format_success(f"Task {task_id} updated")


@command_wrapper
def delete(
    task_id: int = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    collection = get_task_collection()
    task = collection.get_task(task_id)
    if task is None:
        raise AppError(f"Task {task_id} not found", ERROR_NOT_FOUND)

    if not yes and not typer.confirm(f"Delete task {task_id} ({task.text})?"):
        format_info("Cancelled")
        raise typer.Exit(SUCCESS)

    collection.delete_task(task_id)
    format_success(f"Task {task_id} deleted")


@command_wrapper
def clear_completed() -> None:
    """Remove all completed tasks."""
    removed = get_task_collection().clear_completed()
    if removed:
        format_success(f"Removed {pluralize_tasks(removed)}")
    else:
        format_info("No completed tasks to clear")


@command_wrapper
def clear_all(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete every task and remove the stored task list."""
    collection = get_task_collection()
    if not yes and not typer.confirm(f"Delete all {pluralize_tasks(len(collection))}?"):
        format_info("Cancelled")
        raise typer.Exit(SUCCESS)

    removed = collection.clear_all()
    format_success(f"Removed {pluralize_tasks(removed)}")


@command_wrapper
def stats(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show task counters."""
    format_output(get_task_collection().stats().model_dump(), output)
