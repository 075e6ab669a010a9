"""Dashboard controller: collects every handler's data and renders it."""

import logging
from typing import Any

from skydash.clock import get_time_handler
from skydash.models import DashboardState, Result
from skydash.period import get_periods_handler
from skydash.renderers.console import render_dashboard
from skydash.star_sign import get_star_sign_handler

logger = logging.getLogger(__name__)


def _extract(result: Result, field: str, fallback: Any, source: str) -> Any:
    if result.success:
        return result.data[field]
    logger.warning("%s handler failed (%s); using %r", source, result.error, fallback)
    return fallback


def dashboard_controller(lang: str = "en") -> str:
    """Call the time, period and star sign handlers in that order and render the result.

    A failing handler never aborts rendering: its field falls back to
    ``"Error"`` (time, star sign) or an empty list (periods).
    """
    time_result = get_time_handler()
    period_result = get_periods_handler()
    star_sign_result = get_star_sign_handler()

    state = DashboardState(
        time=_extract(time_result, "time", "Error", "time"),
        periods=tuple(_extract(period_result, "periods", [], "period")),
        star_sign=_extract(star_sign_result, "starSign", "Error", "star sign"),
    )
    return render_dashboard(state, lang=lang)
