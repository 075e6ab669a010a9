"""Period catalog: the fixed set of supported date-range periods."""

import logging
from enum import Enum

from skydash.models import Result
from skydash.shared import success

logger = logging.getLogger(__name__)


class Period(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


def get_available_periods() -> list[str]:
    """Return all period identifiers in catalog order (day, week, month, year)."""
    return [p.value for p in Period]


def is_valid_period(period: object) -> bool:
    """Return True if period is one of the supported identifiers."""
    return period in get_available_periods()


def get_periods_handler() -> Result:
    """Period handler."""
    periods = get_available_periods()
    logger.debug("period handler -> %s", periods)
    return success({"periods": periods})
