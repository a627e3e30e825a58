# zzz/core/exceptions.py
# Custom exception hierarchy for zzz (pure - no I/O operations)

from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for zzz
class ZzzError(Exception):
    pass


# * Configuration errors
class ConfigurationError(ZzzError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * Duration argument errors
class DurationError(ZzzError):
    pass


# * Argument could not be parsed as NUMBER[SUFFIX]
class InvalidDurationError(DurationError):
    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, argument={self.argument!r})"


# * Total duration is not finite or exceeds the maximum
class DurationOverflowError(DurationError):
    def __init__(self, message: str, seconds: float, max_seconds: float):
        super().__init__(message)
        self.seconds = seconds
        self.max_seconds = max_seconds

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"seconds={self.seconds!r}, max_seconds={self.max_seconds!r})"
        )


# * Monotonic clock unavailable
class ClockError(ZzzError):
    pass


# * Sleep failed for a reason other than being interrupted
class SleepError(ZzzError):
    pass


# * Output stream rejected a write
class WriteError(ZzzError):
    pass
