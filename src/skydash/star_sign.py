"""Star sign catalog and random selection."""

import logging
from collections.abc import Callable

from skydash.models import Result
from skydash.shared import get_random_int, success

logger = logging.getLogger(__name__)

STAR_SIGNS: tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)


def get_random_star_sign(random_int: Callable[[int, int], int]) -> str:
    """Pick one sign from STAR_SIGNS.

    Args:
        random_int: Function returning an integer in [min, max] inclusive.
            Called once as ``random_int(0, 11)``.

    Returns:
        The sign at the chosen index.
    """
    index = random_int(0, len(STAR_SIGNS) - 1)
    return STAR_SIGNS[index]


def get_star_sign_handler() -> Result:
    """Star sign handler."""
    star_sign = get_random_star_sign(get_random_int)
    logger.debug("star sign handler -> %s", star_sign)
    return success({"starSign": star_sign})
