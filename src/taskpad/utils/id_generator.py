"""Task id allocation."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class MonotonicIdGenerator:
    """Issue strictly increasing integer ids derived from a millisecond clock.

    An id is the clock reading in milliseconds since the epoch unless that
    would not exceed the previous id, in which case it is the previous id plus
    one. Two tasks created in the same millisecond (or after the wall clock
    steps backwards) therefore still get distinct, ordered ids.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None, last_id: int = 0):
        self._clock = clock or utc_now
        self._last = last_id

    def seed(self, last_id: int) -> None:
        """Raise the floor so future ids are greater than *last_id*."""
        if last_id > self._last:
            self._last = last_id

    def next_id(self) -> int:
        now_ms = int(self._clock().timestamp() * 1000)
        self._last = max(now_ms, self._last + 1)
        return self._last
