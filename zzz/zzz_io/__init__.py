# zzz/zzz_io/__init__.py
# Terminal & console I/O for zzz

from .console import console, reset_console
from .terminal import RenderState, TerminalRenderer, is_term_interactive

__all__ = [
    "console",
    "reset_console",
    "RenderState",
    "TerminalRenderer",
    "is_term_interactive",
]
