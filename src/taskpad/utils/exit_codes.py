"""
Exit codes for taskpad.

Semantic exit codes so scripts wrapping the CLI can tell what happened.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error (empty text, bad date)
ERROR_INVALID_ARGS = 2

# Task not found
ERROR_NOT_FOUND = 5

