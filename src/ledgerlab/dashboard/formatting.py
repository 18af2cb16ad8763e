"""Formatting and color rules shared by the dashboard views."""

from __future__ import annotations

GREEN = "green"
RED = "red"
YELLOW = "yellow"
GRAY = "gray"
BLUE = "blue"
VIOLET = "violet"

STRONG = "strong"
MEDIUM = "medium"
NEUTRAL = "neutral"

RESULT_COLORS: dict[str, str] = {
    "win": GREEN,
    "loss": RED,
    "push": YELLOW,
    "pending": GRAY,
}

CONFIDENCE_COLORS: dict[str, str] = {
    "alto": GREEN,
    "medio": YELLOW,
}

LOTTERY_LABELS: dict[str, str] = {
    "mega-sena": "Mega-Sena",
    "quina": "Quina",
    "lotofacil": "Lotofacil",
    "lotomania": "Lotomania",
    "dupla-sena": "Dupla Sena",
    "dia-de-sorte": "Dia de Sorte",
    "super-sete": "Super Sete",
    "timemania": "Timemania",
}

# Tailwind 400-shade hex values used by the HTML snippets.
PALETTE: dict[str, str] = {
    GREEN: "#34d399",
    RED: "#fb7185",
    YELLOW: "#facc15",
    GRAY: "#6b7280",
    BLUE: "#60a5fa",
    VIOLET: "#a78bfa",
    STRONG: "#34d399",
    MEDIUM: "#facc15",
    NEUTRAL: "#6b7280",
}


def format_currency(value: float) -> str:
    """US-locale currency string, e.g. ``$1,234.50`` or ``-$12.00``."""

    value = value + 0.0  # folds -0.0 into 0.0
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def format_signed_currency(value: float, *, strict: bool = True) -> str:
    """Currency with an explicit ``+`` for gains; zero is signed only when ``strict`` is False."""

    value = value + 0.0
    prefix = "+" if value > 0 or (not strict and value == 0) else ""
    return f"{prefix}{format_currency(value)}"


def format_percent(value: float) -> str:
    value = value + 0.0
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.1f}%"


def result_color(result: str) -> str:
    return RESULT_COLORS.get(result, GRAY)


def pnl_color(value: float) -> str:
    if value > 0:
        return GREEN
    if value < 0:
        return RED
    return GRAY


def lottery_label(key: str) -> str:
    return LOTTERY_LABELS.get(key, key)


def match_color(matches: int) -> str:
    if matches >= 4:
        return STRONG
    if matches >= 2:
        return MEDIUM
    return NEUTRAL


def confidence_color(tier: str) -> str:
    return CONFIDENCE_COLORS.get(tier, NEUTRAL)


def event_color(event_type: str) -> str:
    return BLUE if event_type == "prediction" else VIOLET


def truncate(value: str, length: int, *, ellipsis: str = "...") -> str:
    """Keep the first ``length`` characters and append ``ellipsis``."""

    return f"{value[:length]}{ellipsis}"


def short_sha(sha: str) -> str:
    return sha[:7]


def format_timestamp(value: str) -> str:
    """Drop fractional seconds and offsets from an ISO timestamp."""

    return value[:19]


def format_number(value: float) -> str:
    """Plain number as the backend sent it: integral values without a decimal part."""

    value = float(value) + 0.0
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_ball(number: int) -> str:
    return f"{number:02d}"


def color_hex(tone: str) -> str:
    return PALETTE.get(tone, PALETTE[GRAY])
