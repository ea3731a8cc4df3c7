"""Aggregate simulated portfolio paths into per-month percentile bands."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..config import get_settings
from ..models.results import AggregatedPoint, FinalStats
from .percentile import percentile

LOGGER = logging.getLogger(__name__)

PathMatrix = Sequence[Sequence[Optional[float]]]

POINT_COLUMNS = ["month", "median", "low_band", "high_band"]


def _usable(value: object) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)  # type: ignore[arg-type]
    except TypeError:
        return False


def _values_at(paths: PathMatrix, step: int) -> List[float]:
    """Collect the usable value at ``step`` from every path that reaches it."""
    values: List[float] = []
    for path in paths:
        if path is None or step >= len(path):
            continue
        value = path[step]
        if _usable(value):
            values.append(float(value))
    return values


def _rows(paths: Optional[PathMatrix]) -> List[Sequence[Optional[float]]]:
    if paths is None:
        return []
    return [path for path in paths if path is not None]


def _validate_band(low_percentile: float, high_percentile: float) -> None:
    if not 0.0 <= low_percentile <= 50.0 <= high_percentile <= 100.0:
        raise ValueError(
            "Band percentiles must satisfy 0 <= low <= 50 <= high <= 100, "
            f"got low={low_percentile!r}, high={high_percentile!r}"
        )


def aggregate_paths(
    paths: PathMatrix,
    low_percentile: Optional[float] = None,
    high_percentile: Optional[float] = None,
) -> Tuple[AggregatedPoint, ...]:
    """
    Build one ``AggregatedPoint`` per month from a matrix of simulated paths.

    Parameters
    ----------
    paths:
        Simulated portfolio values, one sequence per path. Ragged paths are
        tolerated: a month only aggregates the paths that reach it.
    low_percentile, high_percentile:
        Band edges. Default to the configured values (5 and 95).

    Months where no path has a usable value are skipped. Points are returned
    in increasing month order.
    """
    settings = get_settings()
    low = settings.low_percentile if low_percentile is None else float(low_percentile)
    high = settings.high_percentile if high_percentile is None else float(high_percentile)
    _validate_band(low, high)

    if paths is None or len(paths) == 0:
        return ()
    first = paths[0]
    horizon = 0 if first is None else len(first)
    if horizon == 0:
        return ()

    points: List[AggregatedPoint] = []
    skipped = 0
    for step in range(horizon):
        values = _values_at(paths, step)
        if not values:
            skipped += 1
            continue
        values.sort()
        points.append(
            AggregatedPoint(
                step=step,
                median=percentile(values, 50),
                low_band=percentile(values, low),
                high_band=percentile(values, high),
            )
        )
    if skipped:
        LOGGER.debug("Skipped %d of %d months with no usable values", skipped, horizon)
    return tuple(points)


def points_to_frame(points: Iterable[AggregatedPoint]) -> pd.DataFrame:
    """Tabulate aggregated points (one row per month)."""
    rows = [point.to_dict() for point in points]
    if not rows:
        return pd.DataFrame(columns=POINT_COLUMNS)
    return pd.DataFrame(rows, columns=POINT_COLUMNS)


def final_values(paths: PathMatrix) -> np.ndarray:
    """Return the last usable value of each path."""
    finals: List[float] = []
    for path in _rows(paths):
        for value in reversed(list(path)):
            if _usable(value):
                finals.append(float(value))
                break
    return np.asarray(finals, dtype=float)


def summarise_final_values(paths: PathMatrix) -> FinalStats:
    """Compute min/median/mean/max of the final values; zeros when empty."""
    finals = final_values(paths)
    if finals.size == 0:
        return FinalStats(min=0.0, median=0.0, mean=0.0, max=0.0)
    return FinalStats(
        min=float(finals.min()),
        median=float(np.median(finals)),
        mean=float(finals.mean()),
        max=float(finals.max()),
    )


def sample_paths(paths: PathMatrix, limit: Optional[int] = None) -> List[List[Optional[float]]]:
    """
    Pick at most ``limit`` paths, evenly spaced across the matrix.

    Drawing every path of a large run is illegible; a spread-out sample keeps
    the first and last path and preserves the overall shape.
    """
    limit = get_settings().sample_paths if limit is None else int(limit)
    rows = [list(path) for path in _rows(paths)]
    if limit <= 0 or not rows:
        return []
    if len(rows) <= limit:
        return rows
    indices = np.unique(np.linspace(0, len(rows) - 1, limit).astype(int))
    return [rows[index] for index in indices]


__all__ = [
    "PathMatrix",
    "aggregate_paths",
    "final_values",
    "points_to_frame",
    "sample_paths",
    "summarise_final_values",
]
