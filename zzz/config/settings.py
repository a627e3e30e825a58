# zzz/config/settings.py
# Runtime settings for zzz, read from ZZZ_* environment variables (no config files)

from __future__ import annotations

import math
import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, cast

import typer

from ..core.constants import MAX_SECONDS, OverflowPolicy
from ..core.exceptions import SettingsValidationError

ENV_PREFIX = "ZZZ_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


# * Default settings dataclass w/ overflow policy & display defaults
@dataclass
class ZzzSettings:
    # behaviour for durations above max_seconds
    overflow_policy: OverflowPolicy = OverflowPolicy.REJECT
    max_seconds: float = MAX_SECONDS

    # ring the terminal bell when the countdown ends
    bell: bool = False

    # show elapsed time instead of remaining time
    count_up: bool = False

    def __post_init__(self) -> None:
        # Validate settings values after initialization.
        if not isinstance(self.overflow_policy, OverflowPolicy):
            try:
                self.overflow_policy = OverflowPolicy(self.overflow_policy)
            except ValueError:
                valid = [p.value for p in OverflowPolicy]
                raise ValueError(
                    f"overflow_policy must be one of {valid}, got '{self.overflow_policy}'"
                )

        if isinstance(self.max_seconds, bool) or not isinstance(
            self.max_seconds, (int, float)
        ):
            raise ValueError(
                f"max_seconds must be a number, got {type(self.max_seconds).__name__}"
            )
        if not math.isfinite(self.max_seconds) or not 0 < self.max_seconds <= MAX_SECONDS:
            raise ValueError(
                f"max_seconds must be in (0, {MAX_SECONDS:g}], got {self.max_seconds}"
            )

        for name in ("bell", "count_up"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}"
                )


# * Convert a raw environment string to the type of the matching setting
def _coerce(name: str, raw: str) -> Any:
    if name in ("bell", "count_up"):
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"{name} must be a boolean (true/false), got '{raw}'")
    if name == "max_seconds":
        try:
            return float(raw)
        except ValueError:
            raise ValueError(f"max_seconds must be a number, got '{raw}'")
    return raw.strip().lower()


# * Build settings from ZZZ_* environment variables
def load_settings(environ: Optional[Mapping[str, str]] = None) -> ZzzSettings:
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for field in fields(ZzzSettings):
        var = f"{ENV_PREFIX}{field.name.upper()}"
        if var not in env:
            continue
        try:
            values[field.name] = _coerce(field.name, env[var])
        except ValueError as e:
            raise SettingsValidationError(
                f"{var}: {e}", setting_name=field.name, value=env[var]
            ) from e

    try:
        return ZzzSettings(**values)
    except ValueError as e:
        # validation messages lead w/ the offending field name
        name = next((n for n in values if str(e).startswith(n)), "settings")
        raise SettingsValidationError(
            str(e), setting_name=name, value=values.get(name)
        ) from e


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[ZzzSettings] = None
) -> ZzzSettings:
    # prefer explicitly provided settings
    if provided is not None:
        return provided

    # search ctx & root for ZzzSettings
    candidates: list[typer.Context] = [ctx]
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, ZzzSettings):
            return obj

    return load_settings()
