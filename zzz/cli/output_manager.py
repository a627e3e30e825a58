# zzz/cli/output_manager.py
# Concrete log sink: Rich lines on stderr plus an optional plain-text log file
# * Registered via register_sink() by VerboseSession at command start

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from ..core.output import LogRecord, OutputLevel

_BANNER = "=" * 60


class OutputManager:
    # Records above `level` are dropped from both the console & the file
    # Warnings reach the console unless quiet & are always written to the file

    def __init__(
        self, level: OutputLevel = OutputLevel.NORMAL, log_file: Path | None = None
    ) -> None:
        self.level = level
        self.log_file = log_file
        self._started = time.monotonic()
        self._handle: Optional[TextIO] = None
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._handle = open(log_file, "a", encoding="utf-8")

    def emit(self, record: LogRecord) -> None:
        if record.level > self.level:
            return
        from ..zzz_io.console import console

        stamp = self._elapsed()
        if record.level >= OutputLevel.DEBUG:
            console.print(f"[dim]\\[{record.category}] {record.message}[/]")
        else:
            console.print(
                f"[dim]\\[{stamp}][/] [bold cyan]\\[{record.category}][/] {record.message}"
            )
        self._append(f"[{stamp}] [{record.category}] {record.message}")

        for line in (record.detail or "").splitlines():
            console.print(f"  [dim]{line}[/]")
            self._append(f"  {line}")

    def warn(self, message: str) -> None:
        if self.level >= OutputLevel.NORMAL:
            from ..zzz_io.console import console

            console.print(f"[yellow]Warning:[/] {message}")
        self._append(f"[{self._elapsed()}] [WARN] {message}")

    def start_session(self) -> None:
        self._started = time.monotonic()
        self._banner(
            f"Session Started: {datetime.now().isoformat()}", f"Level: {self.level.name}"
        )

    def end_session(self) -> None:
        self._banner(f"Session Ended: {datetime.now().isoformat()}")
        self.close()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _elapsed(self) -> str:
        return f"{time.monotonic() - self._started:.2f}s"

    def _banner(self, *lines: str) -> None:
        if self._handle is None:
            return
        for line in ("", _BANNER, *lines, _BANNER, ""):
            self._append(line)

    def _append(self, line: str) -> None:
        if self._handle is not None:
            self._handle.write(f"{line}\n")
            self._handle.flush()
