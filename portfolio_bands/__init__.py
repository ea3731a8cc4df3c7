"""Chart-ready percentile bands and summary rows for Monte Carlo portfolio paths."""

from .core import (
    PayloadValidationError,
    aggregate_paths,
    build_summary,
    normalize_payload,
    percentile,
    select_ticks,
)
from .models import AggregatedPoint, FinalStats, SimulationParameters, SimulationResult, SummaryRow

__version__ = "0.1.0"

__all__ = [
    "AggregatedPoint",
    "FinalStats",
    "PayloadValidationError",
    "SimulationParameters",
    "SimulationResult",
    "SummaryRow",
    "aggregate_paths",
    "build_summary",
    "normalize_payload",
    "percentile",
    "select_ticks",
]
