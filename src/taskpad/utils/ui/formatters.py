"""Output formatters for different formats."""

import json
from datetime import date
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from taskpad.utils.ui.console import get_console

console = get_console()

PRIORITY_ICONS = {
    "high": "🔴",
    "medium": "🟡",
    "low": "🟢",
}

PRIORITY_COLORS = {
    "high": "bold red",
    "medium": "bold yellow",
    "low": "green",
}

STATUS_ICONS = {
    "open": "⬜",
    "completed": "☑️",
}

METADATA_ICONS = {
    "due_date": "📅",
    "overdue": "⏱️",
    "category": "🏷️",
}


def format_output(
    data: Any,
    output_format: str = "pretty",
    today: date | None = None,
) -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    elif output_format == "quiet":
        format_quiet(data)
    else:
        format_pretty(data, today=today)


def _items(data: Any) -> list[dict]:
    if isinstance(data, dict) and "tasks" in data:
        return data["tasks"]
    if isinstance(data, list):
        return data
    return [data]


def format_table(data: Any) -> None:
    """Format data as a table."""
    items = _items(data)
    if not items:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    columns = list(items[0].keys())
    for column in columns:
        table.add_column(column.replace("_", " ").title())

    for item in items:
        table.add_row(*["" if item.get(c) is None else str(item.get(c)) for c in columns])

    console.print(table)


def format_quiet(data: Any) -> None:
    """Print bare task ids, one per line."""
    for item in _items(data):
        if isinstance(item, dict) and "id" in item:
            print(item["id"])


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================


def _parse_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        return None


def format_pretty(data: Any, today: date | None = None) -> None:
    """Format data in pretty format with colors and icons."""
    if isinstance(data, dict) and "tasks" not in data:
        format_single_item_pretty(data)
        return
    format_tasks_pretty(_items(data), today=today)


def format_tasks_pretty(tasks: list[dict], today: date | None = None) -> None:
    """Render tasks one per line, in the order given."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    today = today or date.today()
    for task in tasks:
        console.print(format_task_line(task, today))


def format_task_line(task: dict, today: date) -> Text:
    """Build the single-line rendering of a task."""
    completed = bool(task.get("completed"))
    priority = str(task.get("priority", "medium"))

    line = Text()
    line.append(STATUS_ICONS["completed" if completed else "open"] + " ")
    line.append(f"{task.get('id')} ", style="dim")
    line.append(PRIORITY_ICONS.get(priority, "") + " ")
    line.append(
        str(task.get("text", "")),
        style="dim strike" if completed else PRIORITY_COLORS.get(priority, ""),
    )

    due = _parse_date(task.get("due_date"))
    if due is not None:
        if not completed and due < today:
            line.append(
                f"  {METADATA_ICONS['overdue']} {due.isoformat()} (overdue)",
                style="bold red",
            )
        else:
            line.append(f"  {METADATA_ICONS['due_date']} {due.isoformat()}", style="cyan")

    category = task.get("category")
    if category:
        line.append(f"  {METADATA_ICONS['category']} {category}", style="magenta")
    return line


def format_single_item_pretty(item: dict) -> None:
    """Format a single mapping as aligned key/value lines."""
    if not item:
        console.print("[yellow]No data to display[/yellow]")
        return
    width = max(len(str(k)) for k in item)
    for key, value in item.items():
        label = str(key).replace("_", " ").title()
        console.print(f"[bold]{label:<{width}}[/bold]  {value}")
