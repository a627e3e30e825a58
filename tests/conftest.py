# tests/conftest.py
# Pytest configuration w/ isolation fixtures & deterministic time doubles

import pytest

from zzz.core.output import reset_sink
from zzz.zzz_io.console import reset_console


# * Clock whose time only moves when a test (or fake sleeper) advances it
class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.time = start

    def now(self) -> float:
        return self.time

    def advance(self, seconds: float) -> None:
        self.time += seconds


# * Sleeper that advances a FakeClock instead of blocking
class FakeSleeper:
    # overshoot: extra seconds added to every completed sleep (scheduler delay)
    # interruptions: {call index: seconds actually slept before being woken}
    def __init__(self, clock, overshoot=0.0, interruptions=None):
        self.clock = clock
        self.overshoot = overshoot
        self.interruptions = dict(interruptions or {})
        self.calls: list[float] = []

    def sleep(self, seconds: float) -> float:
        index = len(self.calls)
        self.calls.append(seconds)
        if index in self.interruptions:
            slept = self.interruptions[index]
            self.clock.advance(slept)
            return seconds - slept
        self.clock.advance(seconds + self.overshoot)
        return 0.0

    def interrupt(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


# * Renderer that records every status line & the final cleanup
class RecordingRenderer:
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.finished = False

    def update(self, text: str) -> None:
        self.lines.append(text)

    def finish(self) -> None:
        self.finished = True


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    # ! strip user ZZZ_* settings & pin TERM so results don't depend on the shell
    import os

    for name in list(os.environ):
        if name.startswith("ZZZ_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")

    # ! drop any registered log sink between tests
    reset_sink()
    reset_console()
    yield
    reset_sink()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_sleeper(fake_clock):
    def _make(overshoot=0.0, interruptions=None):
        return FakeSleeper(fake_clock, overshoot=overshoot, interruptions=interruptions)

    return _make


@pytest.fixture
def recorder():
    return RecordingRenderer()
