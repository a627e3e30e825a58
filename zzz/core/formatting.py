# zzz/core/formatting.py
# Display formatting for durations (pure - no I/O)

from __future__ import annotations

import math

# (unit suffix, seconds per unit) for every unit above seconds, largest first
_LARGER_UNITS = (("d", 86400), ("h", 3600), ("m", 60))


# * Round seconds to the nearest whole second, halves rounding up
def round_seconds(seconds: float) -> int:
    if seconds <= 0:
        return 0
    return math.floor(seconds + 0.5)


# * Format a duration as "Dd Hh Mm Ss", dropping leading zero units
def format_duration(seconds: float) -> str:
    left = round_seconds(seconds)
    parts: list[str] = []
    for suffix, size in _LARGER_UNITS:
        value, left = divmod(left, size)
        # once a unit is shown every smaller unit is shown too
        if value or parts:
            parts.append(f"{value}{suffix}")
    parts.append(f"{left}s")
    return " ".join(parts)
