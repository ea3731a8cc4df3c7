"""Light theme configuration for band charts."""

from __future__ import annotations

from typing import Dict


MEDIAN_INDIGO = "#4F46E5"
BAND_LAVENDER = "#8884D8"
BAND_FILL = "rgba(136, 132, 216, 0.20)"
REFERENCE_GRAY = "#666666"
GRID_GRAY = "#E0E0E0"
BACKGROUND = "#FFFFFF"
TEXT_COLOR = "#555555"
SUBTEXT_COLOR = "#666666"


LIGHT_THEME: Dict[str, object] = {
    "name": "light",
    "background_color": BACKGROUND,
    "text_color": TEXT_COLOR,
    "subtext_color": SUBTEXT_COLOR,
    "palette": {
        "median": MEDIAN_INDIGO,
        "band": BAND_LAVENDER,
        "band_fill": BAND_FILL,
        "reference": REFERENCE_GRAY,
        "grid": GRID_GRAY,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "Inter, Helvetica, Arial, sans-serif", "color": TEXT_COLOR},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": BACKGROUND,
            "title": {"font": {"size": 20, "color": TEXT_COLOR}},
            "legend": {"bgcolor": BACKGROUND, "bordercolor": GRID_GRAY},
            "xaxis": {"gridcolor": GRID_GRAY, "linecolor": "#CCCCCC", "zerolinecolor": GRID_GRAY},
            "yaxis": {"gridcolor": GRID_GRAY, "linecolor": "#CCCCCC", "zerolinecolor": GRID_GRAY},
        }
    },
}
