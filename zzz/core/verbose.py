# zzz/core/verbose.py
# -v / -q / --log-file handling & the structured log lines a run produces
# (STAGE & CONFIG at -v, one TICK per countdown step at -vv, warnings always)

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import LogRecord, OutputLevel, current_sink, register_sink


# * Map the CLI flags to a level; a log file needs at least VERBOSE to be useful
def level_for(
    verbosity: int = 0, quiet: bool = False, log_file: Path | None = None
) -> OutputLevel:
    if quiet:
        return OutputLevel.QUIET
    if verbosity >= 2:
        return OutputLevel.DEBUG
    if verbosity == 1 or log_file is not None:
        return OutputLevel.VERBOSE
    return OutputLevel.NORMAL


def init_verbose(
    verbosity: int = 0,
    quiet: bool = False,
    log_file: Path | None = None,
) -> None:
    from ..cli.output_manager import OutputManager

    register_sink(
        OutputManager(level_for(verbosity, quiet, log_file), log_file=log_file)
    )


def vlog(category: str, message: str, detail: str | None = None) -> None:
    current_sink().emit(LogRecord(OutputLevel.VERBOSE, category, message, detail))


def vlog_stage(stage: str, description: str | None = None) -> None:
    message = f"{stage}: {description}" if description else stage
    vlog("STAGE", message)


def vlog_config(key: str, value: Any) -> None:
    vlog("CONFIG", f"{key} = {value}")


# * One countdown step: what is left & what the sleeper reported unslept
def vlog_tick(tick: int, remaining: float, unslept: float) -> None:
    current_sink().emit(
        LogRecord(
            OutputLevel.DEBUG,
            "TICK",
            f"tick {tick}: remaining={remaining:.3f}s unslept={unslept:.3f}s",
        )
    )


def warn(message: str) -> None:
    current_sink().warn(message)


# * Register a sink for the duration of one command & bracket it w/ session banners
class VerboseSession:
    def __init__(
        self,
        verbosity: int = 0,
        quiet: bool = False,
        log_file: Path | None = None,
    ):
        self.verbosity = verbosity
        self.quiet = quiet
        self.log_file = log_file

    def __enter__(self) -> "VerboseSession":
        init_verbose(self.verbosity, self.quiet, self.log_file)
        current_sink().start_session()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        current_sink().end_session()
