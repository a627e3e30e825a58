# zzz/zzz_io/console.py
# Centralized diagnostics console for the entire zzz application

# The status line owns stdout; every diagnostic (errors, warnings, verbose logs) goes
# through this single Rich console bound to stderr.
#
# Architecture notes:
# - Console is created as a bare Console(stderr=True) at import time
# - The _ConsoleProxy pattern allows reconfiguring/resetting without breaking module-level references
# - Tests: Use reset_console() for isolation; mock `zzz.zzz_io.console.console` to intercept output

from __future__ import annotations
from typing import Any
from rich.console import Console


# proxy delegating to underlying Console instance; allows reconfiguring/resetting console w/out breaking module-level references; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console(stderr=True)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


# single proxy instance used by all modules for diagnostics
console = _ConsoleProxy()


# * Reset console to default configuration (useful for tests)
def reset_console() -> Console:
    console._set_console(Console(stderr=True))
    return console._get_console()


__all__ = [
    "console",
    "reset_console",
]
