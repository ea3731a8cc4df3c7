"""Interpolated percentile of an already-sorted sample."""

from __future__ import annotations

import math
from typing import Sequence


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """
    Return the ``p``-th percentile of ``sorted_values`` (ascending).

    Uses linear interpolation between the two closest order statistics, the
    same convention as ``numpy.percentile``'s default. ``p`` is clamped to
    ``[0, 100]`` and a NaN ``p`` is read as the median. An empty sample yields
    ``0.0``; callers should treat it as missing data rather than a real value.
    """
    n = len(sorted_values)
    if n == 0:
        return 0.0
    if n == 1:
        return float(sorted_values[0])

    p = float(p)
    if math.isnan(p):
        p = 50.0
    p = min(max(p, 0.0), 100.0)
    index = (p / 100.0) * (n - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return float(sorted_values[lower])

    low_value = float(sorted_values[lower])
    high_value = float(sorted_values[upper])
    return low_value + (high_value - low_value) * (index - lower)


__all__ = ["percentile"]
