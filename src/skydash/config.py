"""Environment-based configuration."""

import logging
import os
from collections.abc import Mapping

from pytz import UnknownTimeZoneError, timezone

from skydash.i18n import SUPPORTED_LANGS
from skydash.models import Settings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Invalid configuration value."""


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from SKYDASH_* environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ConfigError: On an unsupported language, unknown timezone, or log level.
    """
    env = os.environ if environ is None else environ

    lang = env.get("SKYDASH_LANG", "en").strip().lower() or "en"
    if lang not in SUPPORTED_LANGS:
        raise ConfigError(f"Unsupported SKYDASH_LANG: {lang}")

    tz_name = env.get("SKYDASH_TIMEZONE", "").strip() or None
    if tz_name is not None:
        try:
            timezone(tz_name)
        except UnknownTimeZoneError as e:
            raise ConfigError(f"Unknown SKYDASH_TIMEZONE: {tz_name}") from e

    log_level = env.get("SKYDASH_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"Unknown SKYDASH_LOG_LEVEL: {log_level}")

    return Settings(lang=lang, timezone=tz_name, log_level=log_level)


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
