"""Chart builders for aggregated simulation output."""

from __future__ import annotations

from .band_plots import plot_band_chart, plot_path_sample, save_figure
from .dashboard_data import ChartPayload, extract_chart_payload
from .fan_chart import NO_DATA_MESSAGE, build_fan_chart

__all__ = [
    "ChartPayload",
    "NO_DATA_MESSAGE",
    "build_fan_chart",
    "extract_chart_payload",
    "plot_band_chart",
    "plot_path_sample",
    "save_figure",
]
