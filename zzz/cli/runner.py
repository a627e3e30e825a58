# zzz/cli/runner.py
# Wires terminal detection, clock, sleeper & signal handling around one countdown

from __future__ import annotations

import signal
import sys
import threading
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional, Sequence, TextIO

from ..core.clock import MonotonicClock
from ..core.constants import DisplayMode
from ..core.countdown import Countdown, CountdownResult
from ..core.sleeper import InterruptibleSleeper
from ..core.verbose import vlog_config, vlog_stage
from ..zzz_io.terminal import RenderState, TerminalRenderer

# * Exit status after Ctrl-C (128 + SIGINT)
EXIT_INTERRUPTED = 130


# * Signals that wake the sleeper so the status line is redrawn right away
def _default_wake_signals() -> list[signal.Signals]:
    # SIGCONT arrives when a stopped job is resumed (fg after Ctrl-Z)
    return [getattr(signal, name) for name in ("SIGCONT",) if hasattr(signal, name)]


# * Install handlers that interrupt the current sleep; previous handlers restored on exit
@contextmanager
def wake_on_signals(
    sleeper: InterruptibleSleeper, signums: Optional[Sequence[int]] = None
) -> Iterator[None]:
    # handlers can only be installed from the main thread
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _wake(signum: int, frame: object) -> None:
        sleeper.interrupt()

    previous = {}
    for signum in signums if signums is not None else _default_wake_signals():
        previous[signum] = signal.signal(signum, _wake)
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


# * Run one countdown against stream; returns the loop summary
def run_countdown(
    total: float,
    count_up: bool = False,
    bell: bool = False,
    stream: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> CountdownResult:
    out = stream if stream is not None else sys.stdout
    state = RenderState.detect(out, environ)
    vlog_config("interactive", state.interactive)

    renderer = TerminalRenderer(out, state)
    clock = MonotonicClock()
    sleeper = InterruptibleSleeper(clock)
    countdown = Countdown(
        total,
        renderer,
        clock,
        sleeper,
        mode=DisplayMode.ELAPSED if count_up else DisplayMode.REMAINING,
    )

    try:
        with wake_on_signals(sleeper):
            result = countdown.run()
    except KeyboardInterrupt:
        renderer.finish()
        vlog_stage("Interrupted")
        raise SystemExit(EXIT_INTERRUPTED)
    finally:
        sleeper.close()

    if bell:
        renderer.bell()
    return result
