"""CLI entry point for the console dashboard.

Run with:
    uv run skydash
"""

import logging
from datetime import datetime

from dotenv import load_dotenv
from pytz import utc

from skydash.clock import format_human_readable
from skydash.config import ConfigError, configure_logging, load_settings
from skydash.controller import dashboard_controller
from skydash.i18n import t
from skydash.models import Settings

logger = logging.getLogger(__name__)


def main() -> None:
    load_dotenv()
    try:
        settings = load_settings()
        error = None
    except ConfigError as e:
        settings = Settings()
        error = e
    configure_logging(settings)
    if error is not None:
        logger.warning("%s; using default settings", error)

    print(t("initializing", settings.lang))
    output = dashboard_controller(lang=settings.lang)
    print(output)
    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "Dashboard rendered at %s",
            format_human_readable(datetime.now(utc), settings.timezone),
        )


if __name__ == "__main__":
    main()
