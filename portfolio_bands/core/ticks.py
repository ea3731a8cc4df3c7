"""Sparse x-axis tick positions for monthly series spanning many years."""

from __future__ import annotations

from typing import Set, Tuple

MONTHS_PER_YEAR = 12
MILESTONE_YEARS = 5


def select_ticks(total_steps: int) -> Tuple[int, ...]:
    """
    Choose which month indices get an axis label.

    Labels the start, the one-year mark when a second year of data exists,
    every five-year milestone inside the series, and the final month so the
    right edge of the chart is always labelled.
    """
    total_steps = int(total_steps)
    if total_steps <= 0:
        return ()

    ticks: Set[int] = {0}
    if total_steps > MONTHS_PER_YEAR:
        ticks.add(MONTHS_PER_YEAR)

    milestone = MONTHS_PER_YEAR * MILESTONE_YEARS
    ticks.update(range(milestone, total_steps, milestone))

    if total_steps > 1:
        ticks.add(total_steps - 1)
    return tuple(sorted(ticks))


def format_year_tick(step: int) -> str:
    """Label a month index with its whole year, e.g. ``60 -> "5Y"``."""
    return f"{int(step) // MONTHS_PER_YEAR}Y"


__all__ = ["MILESTONE_YEARS", "MONTHS_PER_YEAR", "format_year_tick", "select_ticks"]
