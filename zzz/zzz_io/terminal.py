# zzz/zzz_io/terminal.py
# Status line rendering: in-place rewrite on interactive terminals, one line per tick otherwise

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from ..core.constants import BELL, DUMB_TERM, SEQ_CLEAR_LINE
from ..core.exceptions import WriteError


# * True when stream is a tty & TERM names a terminal w/ cursor control
def is_term_interactive(
    stream: TextIO, environ: Optional[Mapping[str, str]] = None
) -> bool:
    env = os.environ if environ is None else environ
    try:
        if not stream.isatty():
            return False
    except (AttributeError, ValueError):
        # closed or tty-less file-likes are never interactive
        return False
    term = env.get("TERM", "")
    return term not in ("", DUMB_TERM)


# * Render mode, decided once per process
@dataclass(frozen=True)
class RenderState:
    interactive: bool

    @classmethod
    def detect(
        cls, stream: TextIO, environ: Optional[Mapping[str, str]] = None
    ) -> "RenderState":
        return cls(interactive=is_term_interactive(stream, environ))


class TerminalRenderer:
    """Writes status lines for the countdown.

    Interactive: each update clears the current line & rewrites it, and
    ``finish()`` clears it one last time before moving to a new line.
    Otherwise every update is a plain newline-terminated line and
    ``finish()`` leaves the last one in place.
    """

    def __init__(self, stream: TextIO, state: RenderState) -> None:
        self.stream = stream
        self.state = state

    def update(self, text: str) -> None:
        if self.state.interactive:
            self._write(f"{SEQ_CLEAR_LINE}{text}")
        else:
            self._write(f"{text}\n")

    def finish(self) -> None:
        if self.state.interactive:
            self._write(f"{SEQ_CLEAR_LINE}\n")

    def bell(self) -> None:
        self._write(BELL)

    def _write(self, data: str) -> None:
        written = 0
        try:
            while written < len(data):
                n = self.stream.write(data[written:])
                # file-likes returning None accepted everything
                if n is None:
                    break
                written += n
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise WriteError(f"write to output failed: {e}") from e
