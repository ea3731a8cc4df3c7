"""Result data models for simulation payloads and chart-ready outputs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FinalStats(BaseModel):
    """Descriptive statistics of final-period portfolio values."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(..., description="Smallest final portfolio value")
    median: float = Field(..., description="Median final portfolio value")
    mean: float = Field(..., description="Average final portfolio value")
    max: float = Field(..., description="Largest final portfolio value")


class SimulationResult(BaseModel):
    """Canonical record of one simulation run, independent of its wire shape."""

    model_config = ConfigDict(frozen=True)

    paths: List[List[Optional[float]]] = Field(
        default_factory=list,
        description="Simulated portfolio values, one list per path, one value per month",
    )
    final_stats: FinalStats = Field(..., description="Statistics of the final values")
    success_rate: float = Field(
        ..., description="Share of paths that were never depleted, in [0, 1]"
    )
    simulated_cagr: Optional[float] = Field(
        default=None, description="Compound annual growth rate reported by the service"
    )
    wire_shape: str = Field(
        default="camel", description="Wire variant the record was parsed from"
    )

    @field_validator("paths", mode="before")
    @classmethod
    def _coerce_paths(cls, value: object) -> object:
        """Treat a missing matrix as empty and accept numpy arrays."""
        if value is None:
            return []
        if hasattr(value, "tolist"):
            return value.tolist()
        return value

    @property
    def horizon(self) -> int:
        """Number of time steps in the first path."""
        return len(self.paths[0]) if self.paths else 0


@dataclass(frozen=True)
class AggregatedPoint:
    """Median and percentile band of all paths at one time step."""

    step: int
    median: float
    low_band: float
    high_band: float

    def to_dict(self) -> dict:
        return {
            "month": self.step,
            "median": self.median,
            "low_band": self.low_band,
            "high_band": self.high_band,
        }


@dataclass(frozen=True)
class SummaryRow:
    """A labelled, already-formatted value for tabular display."""

    label: str
    display_value: str


__all__ = [
    "AggregatedPoint",
    "FinalStats",
    "SimulationResult",
    "SummaryRow",
]
