"""Data models for simulation payloads, parameters and chart outputs."""

from .parameters import PortfolioItem, SimulationParameters
from .results import AggregatedPoint, FinalStats, SimulationResult, SummaryRow

__all__ = [
    "AggregatedPoint",
    "FinalStats",
    "PortfolioItem",
    "SimulationParameters",
    "SimulationResult",
    "SummaryRow",
]
