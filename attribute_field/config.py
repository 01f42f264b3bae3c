"""Rendering configuration.

Settings are read once from ATTRFIELD_* environment variables over the
model defaults and cached for the process. Getter helpers give display
code a single place to ask for the user's timezone and labels.
"""

import os
from collections.abc import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "ATTRFIELD_"


class RenderSettings(BaseModel):
    """Display settings used by the bundled value renderers."""

    true_label: str = "On"
    false_label: str = "Off"
    decimal_places: int = Field(default=2, ge=0, le=12)
    timezone: str = "UTC"
    datetime_format: str = "%Y-%m-%d %H:%M:%S"
    log_level: str = "INFO"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


def load_settings(environ: Mapping[str, str] | None = None) -> RenderSettings:
    """Build settings from environment variables (env > defaults).

    Args:
        environ: Mapping to read instead of os.environ

    Raises:
        pydantic.ValidationError: if a variable holds an invalid value
    """
    env = os.environ if environ is None else environ
    overrides = {}
    for name in RenderSettings.model_fields:
        key = f"{ENV_PREFIX}{name.upper()}"
        if key in env:
            overrides[name] = env[key]
    return RenderSettings.model_validate(overrides)


_settings: RenderSettings | None = None


def get_settings() -> RenderSettings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings (for testing)."""
    global _settings
    _settings = None


def get_user_timezone(settings: RenderSettings | None = None) -> ZoneInfo:
    """Get the display timezone of `settings` (default: process settings)."""
    if settings is None:
        settings = get_settings()
    return ZoneInfo(settings.timezone)
