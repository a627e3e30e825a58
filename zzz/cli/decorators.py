# zzz/cli/decorators.py
# CLI decorator turning zzz errors into a diagnostic on stderr & a non-zero exit

import functools
from typing import Callable, TypeVar, Any, cast

from ..core.exceptions import (
    ZzzError,
    ConfigurationError,
    DurationError,
    ClockError,
    SleepError,
    WriteError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

# * Exit status for every fatal zzz error
EXIT_FAILURE = 1


# * Decorator for handling zzz errors in CLI commands w/ Rich output
def handle_zzz_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import so tests can patch the console proxy
        from ..zzz_io.console import console

        try:
            return func(*args, **kwargs)
        except DurationError as e:
            console.print(format_error_message("Duration Error", str(e)))
            raise SystemExit(EXIT_FAILURE)
        except ConfigurationError as e:
            console.print(format_error_message("Configuration Error", str(e)))
            raise SystemExit(EXIT_FAILURE)
        except ClockError as e:
            console.print(format_error_message("Clock Error", str(e)))
            raise SystemExit(EXIT_FAILURE)
        except SleepError as e:
            console.print(format_error_message("Sleep Error", str(e)))
            raise SystemExit(EXIT_FAILURE)
        except WriteError as e:
            console.print(format_error_message("Write Error", str(e)))
            raise SystemExit(EXIT_FAILURE)
        except ZzzError as e:
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(EXIT_FAILURE)

    return cast(F, wrapper)
