"""Simple two-language (en/ko) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "banner": {
        "ko": "대시보드 개요",
        "en": "DASHBOARD OVERVIEW",
    },
    "label_time": {
        "ko": "현재 시각",
        "en": "Current Time",
    },
    "label_periods": {
        "ko": "조회 기간",
        "en": "Available Periods",
    },
    "label_star_sign": {
        "ko": "방문자 별자리",
        "en": "Visitor Star Sign",
    },
    "loading": {
        "ko": "불러오는 중...",
        "en": "Loading...",
    },
    "initializing": {
        "ko": "대시보드 초기화 중...",
        "en": "Initializing Dashboard...",
    },
}

SUPPORTED_LANGS: tuple[str, ...] = ("en", "ko")


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
