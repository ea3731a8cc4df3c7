"""Interactive percentile band chart of projected portfolio value."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import plotly.graph_objects as go

from ..core.ticks import format_year_tick
from ..models.results import AggregatedPoint
from ..utils.numbers import format_axis_currency
from .themes import DEFAULT_THEME

NO_DATA_MESSAGE = "No data to display"


def _value_ticks(points: Sequence[AggregatedPoint], count: int = 6) -> np.ndarray:
    low = min(point.low_band for point in points)
    high = max(point.high_band for point in points)
    low = min(low, 0.0)
    if high <= low:
        high = low + 1.0
    return np.linspace(low, high, count)


def build_fan_chart(
    points: Sequence[AggregatedPoint],
    ticks: Sequence[int],
    *,
    band_label: str = "5th - 95th Percentile",
    title: str = "Projection Distribution",
    theme: Optional[dict] = None,
) -> go.Figure:
    """
    Construct a band chart: shaded low/high percentile area plus the median.

    ``ticks`` are month indices (see ``select_ticks``) and are labelled by
    year. An empty ``points`` sequence produces a placeholder figure.
    """
    theme = theme or DEFAULT_THEME
    palette = theme["palette"]
    figure = go.Figure()

    if not points:
        figure.update_layout(
            template=theme["plotly_template"],
            title=title,
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            annotations=[
                dict(
                    text=NO_DATA_MESSAGE,
                    x=0.5,
                    y=0.5,
                    xref="paper",
                    yref="paper",
                    showarrow=False,
                    font=dict(size=16, color=theme["subtext_color"]),
                )
            ],
        )
        return figure

    months = [point.step for point in points]
    figure.add_trace(
        go.Scatter(
            x=months,
            y=[point.high_band for point in points],
            line=dict(width=0, color=palette["band"]),
            hoverinfo="skip",
            showlegend=False,
            name="High band",
        )
    )
    figure.add_trace(
        go.Scatter(
            x=months,
            y=[point.low_band for point in points],
            line=dict(width=0, color=palette["band"]),
            fill="tonexty",
            fillcolor=palette["band_fill"],
            name=band_label,
            customdata=[point.high_band for point in points],
            hovertemplate="Month %{x}<br>%{y:$,.0f} - %{customdata:$,.0f}<extra></extra>",
        )
    )
    figure.add_trace(
        go.Scatter(
            x=months,
            y=[point.median for point in points],
            line=dict(color=palette["median"], width=2.5),
            name="Median Value",
            hovertemplate="Month %{x}<br>Median %{y:$,.0f}<extra></extra>",
        )
    )
    figure.add_hline(y=0, line=dict(color=palette["reference"], width=1, dash="dot"))

    value_ticks = _value_ticks(points)
    figure.update_layout(
        template=theme["plotly_template"],
        title=title,
        hovermode="x unified",
        margin=dict(l=80, r=30, t=60, b=60),
        xaxis=dict(
            title="Year",
            range=[0, months[-1]],
            tickmode="array",
            tickvals=list(ticks),
            ticktext=[format_year_tick(tick) for tick in ticks],
        ),
        yaxis=dict(
            title="Portfolio Value",
            tickmode="array",
            tickvals=value_ticks.tolist(),
            ticktext=[format_axis_currency(value) for value in value_ticks],
        ),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
    )
    return figure


__all__ = ["NO_DATA_MESSAGE", "build_fan_chart"]
