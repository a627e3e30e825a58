# zzz/core/clock.py
# Monotonic clock abstraction; core logic depends on the protocol, never on time directly

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from .exceptions import ClockError


# * Monotonic clock interface
@runtime_checkable
class Clock(Protocol):
    """Source of monotonic timestamps in seconds.

    Only the difference between two ``now()`` values is meaningful; the
    epoch is arbitrary and unrelated to wall-clock time.
    """

    def now(self) -> float: ...


# * Production clock backed by time.monotonic()
class MonotonicClock:
    def now(self) -> float:
        try:
            return time.monotonic()
        except OSError as e:
            raise ClockError(f"monotonic clock unavailable: {e}") from e
