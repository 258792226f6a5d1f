"""taskpad - a local task list with filtering, search and sorting."""

__version__ = "0.3.0"
