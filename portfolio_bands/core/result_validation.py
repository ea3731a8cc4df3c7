"""Sanity checks on normalised simulation results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np

from ..models.results import SimulationResult
from .aggregation import summarise_final_values

STATS_TOLERANCE = 0.01


@dataclass
class ValidationResult:
    """Basic container for validation outcomes."""

    status: str
    failed_checks: Sequence[str]
    warnings: Sequence[str]

    @property
    def passed(self) -> bool:
        return self.status == "PASS"

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status,
            "failed_checks": list(self.failed_checks),
            "warnings": list(self.warnings),
        }


def validate_simulation_result(result: SimulationResult) -> ValidationResult:
    """Flag inconsistencies between the paths and the reported statistics."""
    failed: list[str] = []
    warnings: list[str] = []

    stats = result.final_stats
    rate = result.success_rate
    if not math.isfinite(rate) or not 0.0 <= rate <= 1.0:
        failed.append("success_rate_out_of_range")
    if not (stats.min <= stats.median <= stats.max and stats.min <= stats.mean <= stats.max):
        failed.append("final_stats_ordering")

    paths = result.paths
    if not paths or not paths[0]:
        # An empty matrix is the chart's "no data" state, not a broken result.
        warnings.append("no_paths")
        status = "PASS" if not failed else "FAIL"
        return ValidationResult(status=status, failed_checks=failed, warnings=warnings)

    lengths = {len(path) for path in paths}
    if len(lengths) > 1:
        warnings.append("ragged_paths")

    flat = np.array(
        [np.nan if value is None else value for path in paths for value in path],
        dtype=float,
    )
    if not np.all(np.isfinite(flat)):
        warnings.append("non_finite_values")

    derived = summarise_final_values(paths)
    scale = max(abs(derived.min), abs(derived.max), abs(stats.min), abs(stats.max), 1.0)
    gaps = [
        abs(getattr(derived, key) - getattr(stats, key))
        for key in ("min", "median", "mean", "max")
    ]
    if max(gaps) > STATS_TOLERANCE * scale:
        warnings.append("final_stats_mismatch")

    status = "PASS" if not failed else "FAIL"
    return ValidationResult(status=status, failed_checks=failed, warnings=warnings)


__all__ = ["ValidationResult", "validate_simulation_result"]
