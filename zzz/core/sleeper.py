# zzz/core/sleeper.py
# Cancellable sleep that reports how much of the request was left unslept

from __future__ import annotations

import os
import select

from .clock import Clock
from .exceptions import SleepError


class InterruptibleSleeper:
    """Sleep helper that can be woken early by ``interrupt()``.

    ``sleep()`` waits on the read end of a private pipe; ``interrupt()``
    writes one byte to the other end. The write takes no locks, so it is
    safe from a signal handler that lands at any point of a sleep.
    ``sleep()`` returns the unslept remainder rather than raising when it
    is woken, so callers can recompute their own state from the clock.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._wake_r, self._wake_w = os.pipe()
        os.set_blocking(self._wake_r, False)
        os.set_blocking(self._wake_w, False)

    def sleep(self, seconds: float) -> float:
        """Sleep for ``seconds``; return the part not slept (0.0 if complete)."""
        if seconds <= 0:
            return 0.0
        deadline = self._clock.now() + seconds
        try:
            ready, _, _ = select.select([self._wake_r], [], [], seconds)
        except (OSError, OverflowError, ValueError) as e:
            raise SleepError(f"sleep of {seconds:.3f}s failed: {e}") from e
        if not ready:
            return 0.0
        self._drain()
        return max(0.0, deadline - self._clock.now())

    def interrupt(self) -> None:
        try:
            os.write(self._wake_w, b"\0")
        except BlockingIOError:
            # pipe full: a wake-up is already pending
            pass

    def close(self) -> None:
        for fd in (self._wake_r, self._wake_w):
            os.close(fd)

    # consume every pending wake-up so the next sleep blocks normally
    def _drain(self) -> None:
        while True:
            try:
                if not os.read(self._wake_r, 512):
                    return
            except BlockingIOError:
                return
