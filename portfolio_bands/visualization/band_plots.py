"""Static (matplotlib) renderings of percentile bands and sample paths."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter, MaxNLocator
import numpy as np

from ..core.ticks import format_year_tick
from ..models.results import AggregatedPoint
from ..utils.numbers import format_axis_currency
from .fan_chart import NO_DATA_MESSAGE
from .themes import DEFAULT_THEME

PATH_COLORS = (
    "#8884D8", "#82CA9D", "#FFC658", "#FF7300", "#00C49F",
    "#FFBB28", "#FF8042", "#0088FE", "#AF19FF", "#FF1919",
)


def _setup_figure(figsize=(12, 7)):
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def _format_currency_axis(ax) -> None:
    """Compact currency labels on the y-axis."""
    ax.yaxis.set_major_formatter(FuncFormatter(lambda val, _pos: format_axis_currency(val)))
    ax.yaxis.set_major_locator(MaxNLocator(6))
    ax.tick_params(axis="y", labelsize=10)
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)


def _apply_year_ticks(ax, ticks: Sequence[int]) -> None:
    ax.set_xticks(list(ticks))
    ax.set_xticklabels([format_year_tick(tick) for tick in ticks])


def plot_band_chart(
    points: Sequence[AggregatedPoint],
    ticks: Sequence[int],
    *,
    band_label: str = "5th - 95th Percentile",
    title: str = "Projection Distribution",
    theme: Optional[dict] = None,
) -> plt.Figure:
    """Create a band chart of the median and low/high percentiles over time."""
    palette = (theme or DEFAULT_THEME)["palette"]
    fig, ax = _setup_figure()

    if not points:
        ax.text(0.5, 0.5, NO_DATA_MESSAGE, ha="center", va="center", transform=ax.transAxes)
        ax.set_axis_off()
        ax.set_title(title, fontsize=14, fontweight="bold")
        return fig

    months = np.array([point.step for point in points])
    ax.fill_between(
        months,
        [point.low_band for point in points],
        [point.high_band for point in points],
        color=palette["band"],
        alpha=0.25,
        label=band_label,
    )
    ax.plot(
        months,
        [point.median for point in points],
        color=palette["median"],
        linewidth=2.5,
        label="Median Value",
    )
    ax.axhline(0, color=palette["reference"], linewidth=1, linestyle=":")

    ax.set_xlim(0, months[-1] if months[-1] > 0 else 1)
    _apply_year_ticks(ax, ticks)
    _format_currency_axis(ax)
    ax.set_xlabel("Year")
    ax.set_ylabel("Portfolio Value")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig


def plot_path_sample(
    paths: Iterable[Sequence[Optional[float]]],
    ticks: Sequence[int],
    *,
    title: str = "Sample Simulation Paths",
) -> plt.Figure:
    """Draw a handful of individual paths (see ``sample_paths``)."""
    fig, ax = _setup_figure()
    colors = PATH_COLORS
    drawn = 0
    for index, path in enumerate(paths):
        values = np.array([np.nan if value is None else value for value in path], dtype=float)
        ax.plot(
            np.arange(values.size),
            values,
            color=colors[index % len(colors)],
            linewidth=1.5,
            label=f"Path {index + 1}",
        )
        drawn += 1
    if not drawn:
        ax.text(0.5, 0.5, NO_DATA_MESSAGE, ha="center", va="center", transform=ax.transAxes)
        ax.set_axis_off()
    else:
        _apply_year_ticks(ax, ticks)
        _format_currency_axis(ax)
        ax.set_xlabel("Year")
        ax.set_ylabel("Portfolio Value")
        ax.grid(True, alpha=0.3)
    ax.set_title(title, fontsize=14, fontweight="bold")
    fig.tight_layout()
    return fig


def save_figure(fig: plt.Figure, output_path: Path) -> Path:
    """Persist matplotlib figure to disk."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return output_path


__all__ = ["plot_band_chart", "plot_path_sample", "save_figure"]
