"""Shared helper utilities."""

from .numbers import (
    format_axis_currency,
    format_band_label,
    format_currency,
    format_percent,
    is_finite_number,
)

__all__ = [
    "format_axis_currency",
    "format_band_label",
    "format_currency",
    "format_percent",
    "is_finite_number",
]
