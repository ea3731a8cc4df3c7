"""Core aggregation logic: percentiles, bands, ticks and summary rows."""

from .adapter import PayloadValidationError, detect_wire_shape, normalize_payload
from .aggregation import (
    aggregate_paths,
    final_values,
    points_to_frame,
    sample_paths,
    summarise_final_values,
)
from .percentile import percentile
from .result_validation import ValidationResult, validate_simulation_result
from .summary import build_summary, rows_to_frame, simulated_cagr
from .ticks import format_year_tick, select_ticks

__all__ = [
    "PayloadValidationError",
    "ValidationResult",
    "aggregate_paths",
    "build_summary",
    "detect_wire_shape",
    "final_values",
    "format_year_tick",
    "normalize_payload",
    "percentile",
    "points_to_frame",
    "rows_to_frame",
    "sample_paths",
    "select_ticks",
    "simulated_cagr",
    "summarise_final_values",
    "validate_simulation_result",
]
