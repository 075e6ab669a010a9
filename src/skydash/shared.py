"""Helpers shared by every provider: result envelopes and the random source."""

import random

from skydash.models import Result


def success(data) -> Result:
    """Wrap a value in a success envelope."""
    return Result(success=True, data=data)


def failure(error: str) -> Result:
    """Wrap an error message in a failure envelope."""
    return Result(success=False, error=error)


def get_random_int(min_value: int, max_value: int) -> int:
    """Return a uniformly distributed integer in [min_value, max_value], both ends inclusive."""
    return random.randint(min_value, max_value)
