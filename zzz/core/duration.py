# zzz/core/duration.py
# Parse NUMBER[SUFFIX] arguments into seconds & enforce the duration ceiling

from __future__ import annotations

import math
import re
from typing import Sequence

from .constants import MAX_SECONDS, UNIT_SECONDS, OverflowPolicy
from .exceptions import DurationOverflowError, InvalidDurationError
from .verbose import vlog, warn

# leading real number: hex w/ optional binary exponent,
# decimal w/ optional fraction & exponent, or inf/nan spellings
_NUMBER_RE = re.compile(
    r"[+-]?(?:"
    r"(?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?)"
    r"|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
    r"|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


# * Parse one command-line argument into seconds
def parse_duration_arg(arg: str) -> float:
    match = _NUMBER_RE.match(arg)
    if match is None:
        raise InvalidDurationError(
            f"Argument '{arg}': does not start with number", argument=arg
        )
    text = match.group(0)
    value = float.fromhex(text) if match.group("hex") else float(text)
    if value < 0:
        raise InvalidDurationError(
            f"Argument '{arg}': does not start with number", argument=arg
        )

    suffix = arg[match.end():]
    if suffix == "":
        return value
    if suffix not in UNIT_SECONDS:
        raise InvalidDurationError(f"Argument '{arg}': invalid suffix", argument=arg)
    return value * UNIT_SECONDS[suffix]


# * Sum all arguments into a single duration in seconds
def total_seconds(args: Sequence[str]) -> float:
    if not args:
        raise InvalidDurationError("At least one argument is required.")
    total = 0.0
    for arg in args:
        seconds = parse_duration_arg(arg)
        vlog("PARSE", f"'{arg}' = {seconds:g}s")
        total += seconds
    return total


# * Apply the overflow policy; returns a finite duration within the ceiling
def check_duration(
    seconds: float,
    policy: OverflowPolicy = OverflowPolicy.REJECT,
    max_seconds: float = MAX_SECONDS,
) -> float:
    if math.isnan(seconds):
        raise DurationOverflowError(
            "That amount of time is not a number.", seconds, max_seconds
        )
    if seconds <= max_seconds:
        return seconds

    if policy is OverflowPolicy.CLAMP:
        warn(
            f"Duration of {seconds:g}s exceeds the maximum; "
            f"clamping to {max_seconds:g}s"
        )
        return max_seconds
    raise DurationOverflowError("That amount of time is insane.", seconds, max_seconds)
