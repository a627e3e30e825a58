# zzz/cli/app.py
# Root Typer application: the single `zzz` command

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from .. import __version__
from ..config.settings import get_settings
from ..core.constants import OverflowPolicy
from ..core.duration import check_duration, total_seconds
from ..core.verbose import VerboseSession, vlog_config
from .decorators import handle_zzz_error
from .runner import run_countdown


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={
        "help_option_names": ["--help", "-h"],
        # "-5" reaches the duration parser instead of failing as an unknown option
        "ignore_unknown_options": True,
    },
)


# * Print version & exit when --version is given
def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"zzz {__version__}")
        raise typer.Exit()


@app.command()
@handle_zzz_error
def zzz(
    ctx: typer.Context,
    durations: List[str] = typer.Argument(
        ...,
        metavar="NUMBER[SUFFIX]...",
        help="Durations to add up. Suffixes: s seconds (default), m minutes, h hours, d days.",
        show_default=False,
    ),
    up: Optional[bool] = typer.Option(
        None,
        "--up/--down",
        "-u/-d",
        help="Show elapsed time instead of time left.",
        rich_help_panel="Display",
    ),
    bell: Optional[bool] = typer.Option(
        None,
        "--bell/--no-bell",
        "-b/-B",
        help="Ring the terminal bell when done.",
        rich_help_panel="Display",
    ),
    overflow: Optional[OverflowPolicy] = typer.Option(
        None,
        "--overflow",
        case_sensitive=False,
        help="Reject or clamp durations above the maximum [default: reject].",
        rich_help_panel="Limits",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Log stages (-v) & every tick (-vv) to stderr.",
        rich_help_panel="Logging",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress warnings.", rich_help_panel="Logging"
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write verbose logs to file (enables verbose mode).",
        rich_help_panel="Logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version & exit.",
    ),
) -> None:
    """Sleep for the total of [bold]NUMBER[SUFFIX]...[/], showing the time left.

    Example: [bold]zzz 1m 30s[/] waits ninety seconds.
    """
    settings = get_settings(ctx)

    with VerboseSession(verbosity=verbose, quiet=quiet, log_file=log_file):
        policy = overflow if overflow is not None else settings.overflow_policy
        count_up = up if up is not None else settings.count_up
        ring = bell if bell is not None else settings.bell
        vlog_config("overflow_policy", policy.value)
        vlog_config("max_seconds", f"{settings.max_seconds:g}")
        vlog_config("count_up", count_up)
        vlog_config("bell", ring)

        seconds = check_duration(total_seconds(durations), policy, settings.max_seconds)
        run_countdown(seconds, count_up=count_up, bell=ring)
