"""Plain-text console renderer."""

from skydash.i18n import t
from skydash.models import DashboardState

_WIDTH = 41
_BANNER_INDENT = 10


def render_dashboard(state: DashboardState, lang: str = "en") -> str:
    """Render DashboardState as a multi-line text block.

    Missing time or star sign (None or empty) shows the loading placeholder.
    Periods show the placeholder only when absent; an empty sequence renders
    an empty list.

    Args:
        state: Values collected by the controller.
        lang: Label language code.

    Returns:
        The dashboard text, starting with a newline.
    """
    loading = t("loading", lang)
    rule = "=" * _WIDTH
    separator = "-" * _WIDTH

    if state.periods is not None:
        periods_block = "\n".join(f"- {p}" for p in state.periods)
    else:
        periods_block = loading

    lines = [
        "",
        rule,
        " " * _BANNER_INDENT + t("banner", lang),
        rule,
        f"{t('label_time', lang)}: {state.time or loading}",
        separator,
        f"{t('label_periods', lang)}:",
        periods_block,
        separator,
        f"{t('label_star_sign', lang)}: {state.star_sign or loading}",
        rule,
        "  ",
    ]
    return "\n".join(lines)
