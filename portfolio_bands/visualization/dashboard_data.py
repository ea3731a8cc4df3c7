"""Data preparation helpers for the results chart and table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import get_settings
from ..core.aggregation import aggregate_paths
from ..core.summary import build_summary
from ..core.ticks import select_ticks
from ..models.results import AggregatedPoint, SimulationResult, SummaryRow
from ..utils.numbers import format_band_label


@dataclass(frozen=True)
class ChartPayload:
    """Everything the presentation layer needs to draw one result."""

    points: Tuple[AggregatedPoint, ...]
    ticks: Tuple[int, ...]
    rows: Tuple[SummaryRow, ...]
    band_label: str

    @property
    def is_empty(self) -> bool:
        return not self.points


def extract_chart_payload(
    result: SimulationResult,
    *,
    low_percentile: Optional[float] = None,
    high_percentile: Optional[float] = None,
) -> ChartPayload:
    """
    Aggregate a normalised result into bands, ticks and summary rows.

    Ticks span the charted months, from month 0 to the last emitted point.
    """
    settings = get_settings()
    low = settings.low_percentile if low_percentile is None else low_percentile
    high = settings.high_percentile if high_percentile is None else high_percentile

    points = aggregate_paths(result.paths, low, high)
    total_steps = points[-1].step + 1 if points else 0
    return ChartPayload(
        points=points,
        ticks=select_ticks(total_steps),
        rows=build_summary(result.final_stats, result.success_rate, result.simulated_cagr),
        band_label=format_band_label(low, high),
    )


__all__ = ["ChartPayload", "extract_chart_payload"]
