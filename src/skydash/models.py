"""Data model definitions: explicit boundaries between the provider and render layers."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Result:
    """Tagged envelope returned by every handler."""

    success: bool
    data: Any = None  # Payload dict, set when success is True
    error: str | None = None  # Failure message, set when success is False


@dataclass(frozen=True)
class DashboardState:
    """The sole input to renderers. None means the field has not been loaded."""

    time: str | None = None  # ISO-8601 UTC timestamp
    periods: tuple[str, ...] | None = None  # Period identifiers, catalog order
    star_sign: str | None = None  # One of the twelve zodiac names


@dataclass(frozen=True)
class Settings:
    """Process configuration read from the environment."""

    lang: str = "en"  # Label language ("en" or "ko")
    timezone: str | None = None  # IANA zone for human-readable times; None = system local
    log_level: str = "WARNING"
