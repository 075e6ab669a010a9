"""Time provider: ISO timestamps and human-readable formatting."""

import logging
from datetime import datetime

from pytz import timezone, utc

from skydash.models import Result
from skydash.shared import success

logger = logging.getLogger(__name__)


def _as_utc(date: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already
    if date.tzinfo is None:
        return utc.localize(date)
    return date.astimezone(utc)


def get_current_time_iso(date: datetime | None = None) -> str:
    """Return the instant as an ISO-8601 UTC string with millisecond precision.

    Args:
        date: Instant to format. Defaults to the current wall-clock time.

    Returns:
        String such as ``2024-01-01T00:00:00.000Z``.
    """
    if date is None:
        date = datetime.now(utc)
    utc_dt = _as_utc(date)
    return utc_dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{utc_dt.microsecond // 1000:03d}Z"


def format_human_readable(date: datetime, tz_name: str | None = None) -> str:
    """Format a date with the current locale's date and time representation.

    Args:
        date: Instant to format. Naive values are treated as UTC.
        tz_name: IANA zone to display the instant in. System local zone if None.
    """
    utc_dt = _as_utc(date)
    local_dt = utc_dt.astimezone(timezone(tz_name)) if tz_name else utc_dt.astimezone()
    return local_dt.strftime("%c")


def get_time_handler() -> Result:
    """Time handler."""
    time = get_current_time_iso()
    logger.debug("time handler -> %s", time)
    return success({"time": time})
