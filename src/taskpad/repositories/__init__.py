"""Storage interfaces for taskpad.

This package contains the abstract base class that defines the contract for
the string-keyed storage the task blob is written to. It is the "Port" in the
Ports & Adapters layout.

Implementations (Adapters) are in:
- taskpad.adapters.json_file (local JSON file)
- taskpad.adapters.memory (process memory)
"""

from .repository import KeyValueStorage

__all__ = [
    "KeyValueStorage",
]
