"""Main entry point for taskpad."""

import typer

from taskpad import __version__
from taskpad.commands import config, tasks
from taskpad.utils.ui.console import get_console

app = typer.Typer(
    name="taskpad",
    help="A small local task list: add, filter, search and sort your to-dos",
    no_args_is_help=True,
)

console = get_console()

app.command("add")(tasks.add)
app.command("list")(tasks.list_tasks)
app.command("done")(tasks.done)
app.command("edit")(tasks.edit)
app.command("delete")(tasks.delete)
app.command("clear-completed")(tasks.clear_completed)
app.command("clear-all")(tasks.clear_all)
app.command("stats")(tasks.stats)

app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]taskpad[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
