# zzz/core/countdown.py
# Drift-corrected countdown loop: render, sleep one tick, recompute from the clock

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from .clock import Clock
from .constants import TICK_SECONDS, DisplayMode
from .formatting import format_duration
from .verbose import vlog_stage, vlog_tick


# * Anything that can show a status line & clean it up afterwards
class StatusRenderer(Protocol):
    def update(self, text: str) -> None: ...

    def finish(self) -> None: ...


# * Anything that sleeps & reports the unslept remainder
class Sleeper(Protocol):
    def sleep(self, seconds: float) -> float: ...


# * Summary of a finished countdown
@dataclass(frozen=True)
class CountdownResult:
    ticks: int
    elapsed: float


class Countdown:
    """Waits ``total`` seconds while rendering the time left once per tick.

    Remaining time is always re-derived as ``total - (now - start)`` from
    the monotonic clock, so late wake-ups, interrupted sleeps and slow
    writes never accumulate. Once less than a whole second is left the
    loop stops rendering and sleeps off the fraction.
    """

    def __init__(
        self,
        total: float,
        renderer: StatusRenderer,
        clock: Clock,
        sleeper: Sleeper,
        mode: DisplayMode = DisplayMode.REMAINING,
        tick: float = TICK_SECONDS,
        formatter: Callable[[float], str] = format_duration,
    ) -> None:
        self.total = max(0.0, total)
        self.renderer = renderer
        self.clock = clock
        self.sleeper = sleeper
        self.mode = mode
        self.tick = tick
        self.formatter = formatter

    def _remaining(self, start: float) -> float:
        return max(0.0, self.total - (self.clock.now() - start))

    def _render(self, remaining: float) -> None:
        if self.mode is DisplayMode.ELAPSED:
            self.renderer.update(self.formatter(self.total - remaining))
        else:
            self.renderer.update(self.formatter(remaining))

    def run(self) -> CountdownResult:
        start = self.clock.now()
        remaining = self.total
        ticks = 0
        vlog_stage("Countdown", f"{self.total:g}s ({self.mode.value})")

        # counting: one render per tick while a whole second is left
        while True:
            self._render(remaining)
            if int(remaining) == 0:
                break
            unslept = self.sleeper.sleep(self.tick)
            remaining = self._remaining(start)
            ticks += 1
            vlog_tick(ticks, remaining, unslept)

        # drain the sub-second remainder, re-sleeping after any interruption
        while remaining > 0:
            self.sleeper.sleep(remaining)
            remaining = self._remaining(start)

        self.renderer.finish()
        elapsed = self.clock.now() - start
        vlog_stage("Finished", f"{elapsed:.3f}s elapsed over {ticks} ticks")
        return CountdownResult(ticks=ticks, elapsed=elapsed)
