# zzz/core/constants.py
# Constants & enums for duration limits, terminal control & display modes

import math
from enum import Enum


# * Largest accepted duration in seconds: anything below 2**31, fractions included
MAX_SECONDS = math.nextafter(float(2**31), 0.0)

# * Length of one countdown tick in seconds
TICK_SECONDS = 1.0

# * Seconds per unit suffix accepted on the command line
UNIT_SECONDS = {
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
    "d": 86400.0,
}

# erase from start of line to cursor, then move cursor to column 1
SEQ_CLEAR_LINE = "\033[1K\033[1G"

BELL = "\a"

# TERM value that marks a terminal without cursor control
DUMB_TERM = "dumb"


# * What to do w/ a duration above MAX_SECONDS
class OverflowPolicy(str, Enum):
    REJECT = "reject"
    CLAMP = "clamp"


# * Which value the status line shows
class DisplayMode(Enum):
    REMAINING = "remaining"
    ELAPSED = "elapsed"
