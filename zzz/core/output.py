# zzz/core/output.py
# Log levels, log records & the sink registry that core modules report through
# * Pure layer: the CLI registers the concrete sink (zzz/cli/output_manager.py) at startup

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


# * Verbosity, from least to most chatty; a record is shown when its level <= the sink's
class OutputLevel(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


@dataclass(frozen=True)
class LogRecord:
    level: OutputLevel
    category: str
    message: str
    detail: Optional[str] = None


# * What core code needs from a sink: records, warnings & session bracketing
@runtime_checkable
class OutputSink(Protocol):
    def emit(self, record: LogRecord) -> None: ...

    def warn(self, message: str) -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Sink used until the CLI registers one; drops everything
class NullSink:
    def emit(self, record: LogRecord) -> None:
        pass

    def warn(self, message: str) -> None:
        pass

    def start_session(self) -> None:
        pass

    def end_session(self) -> None:
        pass


_sink: OutputSink = NullSink()


def register_sink(sink: OutputSink) -> None:
    global _sink
    _sink = sink


def current_sink() -> OutputSink:
    return _sink


# tests
def reset_sink() -> None:
    global _sink
    _sink = NullSink()
