"""Number formatting helpers shared by tables, charts and the CLI."""

from __future__ import annotations

import math
from numbers import Real
from typing import Optional

from ..config import get_settings

NOT_AVAILABLE = "N/A"


def is_finite_number(value: object) -> bool:
    """True for real, finite numbers; booleans and ``None`` are rejected."""
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(float(value))


def format_currency(value: Optional[float], symbol: Optional[str] = None) -> str:
    """Format a portfolio sum as whole currency units, e.g. ``$1,234,568``."""
    if not is_finite_number(value):
        return NOT_AVAILABLE
    symbol = get_settings().currency_symbol if symbol is None else symbol
    text = f"{abs(float(value)):,.0f}"
    sign = "-" if value < 0 and text != "0" else ""
    return f"{sign}{symbol}{text}"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    """Format a ratio (0.07) as a percentage string (``7.0%``)."""
    if not is_finite_number(value):
        return NOT_AVAILABLE
    return f"{float(value) * 100:.{decimals}f}%"


def format_axis_currency(value: Optional[float], symbol: Optional[str] = None) -> str:
    """Compact currency label for chart axes (``$1.2M``, ``$350K``, ``$900``)."""
    symbol = get_settings().currency_symbol if symbol is None else symbol
    if not is_finite_number(value):
        return f"{symbol}0"
    number = float(value)
    sign = "-" if number < 0 else ""
    magnitude = abs(number)
    if magnitude >= 1e6:
        return f"{sign}{symbol}{magnitude / 1e6:.1f}M"
    if magnitude >= 1e3:
        return f"{sign}{symbol}{magnitude / 1e3:.0f}K"
    return f"{sign}{symbol}{magnitude:.0f}"


def ordinal(value: float) -> str:
    """English ordinal for a percentile, e.g. ``1 -> "1st"``, ``95 -> "95th"``."""
    number = float(value)
    if not number.is_integer():
        return f"{number:g}th"
    whole = int(number)
    if 10 <= whole % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(whole % 10, "th")
    return f"{whole}{suffix}"


def format_band_label(low_percentile: float, high_percentile: float) -> str:
    """Legend label for a percentile band, e.g. ``5th - 95th Percentile``."""
    return f"{ordinal(low_percentile)} - {ordinal(high_percentile)} Percentile"


__all__ = [
    "NOT_AVAILABLE",
    "format_axis_currency",
    "format_band_label",
    "format_currency",
    "format_percent",
    "is_finite_number",
    "ordinal",
]
