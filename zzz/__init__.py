# zzz/__init__.py
# Countdown timer that sleeps for a duration while showing the time left

__version__ = "0.1.0"
