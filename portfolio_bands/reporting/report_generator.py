"""Persist chart-ready outputs (tables, ticks, charts) to disk."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Sequence

import numpy as np

from ..core.aggregation import points_to_frame, sample_paths
from ..core.result_validation import ValidationResult
from ..core.summary import rows_to_frame
from ..core.ticks import format_year_tick
from ..models.results import AggregatedPoint, SimulationResult, SummaryRow
from ..visualization import build_fan_chart, plot_band_chart, plot_path_sample, save_figure

LOGGER = logging.getLogger(__name__)


def _json_default(obj: object) -> object:
    """JSON serializer that handles numpy/path objects gracefully."""
    if isinstance(obj, (np.integer,)):
        return int(obj)
    if isinstance(obj, (np.floating,)):
        return float(obj)
    if isinstance(obj, (datetime,)):
        return obj.isoformat()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class ReportGenerator:
    """Write band tables, summary rows, tick sets and charts for one result."""

    def __init__(
        self,
        output_dir: str | Path = "output",
        *,
        timestamped: bool = False,
        run_label: Optional[str] = None,
    ) -> None:
        base_dir = Path(output_dir)
        base_dir.mkdir(parents=True, exist_ok=True)
        if timestamped:
            run_label = run_label or datetime.now(timezone.utc).strftime("run_%Y%m%d_%H%M%S")
            self.output_dir = base_dir / run_label
        else:
            self.output_dir = base_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.base_dir = base_dir
        self.run_label = self.output_dir.name

    # ------------------------------------------------------------------ helpers
    def _write_json(self, payload: object, filename: str) -> Path:
        path = self.output_dir / filename
        with path.open("w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2, default=_json_default)
        LOGGER.info("Wrote %s", path)
        return path

    # ------------------------------------------------------------------ tables
    def export_bands(self, points: Sequence[AggregatedPoint], filename: str = "bands.csv") -> Path:
        path = self.output_dir / filename
        points_to_frame(points).to_csv(path, index=False)
        LOGGER.info("Wrote %d band rows to %s", len(points), path)
        return path

    def export_summary(self, rows: Sequence[SummaryRow], filename: str = "summary.csv") -> Path:
        path = self.output_dir / filename
        rows_to_frame(rows).to_csv(path, index=False)
        LOGGER.info("Wrote %d summary rows to %s", len(rows), path)
        return path

    def export_ticks(self, ticks: Sequence[int], filename: str = "ticks.json") -> Path:
        payload = [{"month": int(tick), "label": format_year_tick(tick)} for tick in ticks]
        return self._write_json(payload, filename)

    def export_validation(
        self, validation: ValidationResult, filename: str = "validation.json"
    ) -> Path:
        return self._write_json(validation.to_dict(), filename)

    # ------------------------------------------------------------------ charts
    def export_fan_chart_html(
        self,
        points: Sequence[AggregatedPoint],
        ticks: Sequence[int],
        filename: str = "fan_chart.html",
        **chart_kwargs,
    ) -> Path:
        path = self.output_dir / filename
        figure = build_fan_chart(points, ticks, **chart_kwargs)
        figure.write_html(str(path), include_plotlyjs="cdn")
        LOGGER.info("Wrote %s", path)
        return path

    def export_fan_chart_png(
        self,
        points: Sequence[AggregatedPoint],
        ticks: Sequence[int],
        filename: str = "fan_chart.png",
        **chart_kwargs,
    ) -> Path:
        path = save_figure(plot_band_chart(points, ticks, **chart_kwargs), self.output_dir / filename)
        LOGGER.info("Wrote %s", path)
        return path

    def export_path_sample_png(
        self,
        result: SimulationResult,
        ticks: Sequence[int],
        *,
        limit: Optional[int] = None,
        filename: str = "sample_paths.png",
    ) -> Path:
        figure = plot_path_sample(sample_paths(result.paths, limit), ticks)
        path = save_figure(figure, self.output_dir / filename)
        LOGGER.info("Wrote %s", path)
        return path

    # ------------------------------------------------------------------ bundle
    def export_all(
        self,
        *,
        points: Sequence[AggregatedPoint],
        ticks: Sequence[int],
        rows: Sequence[SummaryRow],
        validation: Optional[ValidationResult] = None,
        result: Optional[SimulationResult] = None,
        html: bool = True,
        png: bool = False,
        band_label: Optional[str] = None,
    ) -> Dict[str, Path]:
        """Export every artefact; returns a name -> path mapping."""
        chart_kwargs = {"band_label": band_label} if band_label else {}
        outputs: Dict[str, Path] = {
            "bands": self.export_bands(points),
            "summary": self.export_summary(rows),
            "ticks": self.export_ticks(ticks),
        }
        if validation is not None:
            outputs["validation"] = self.export_validation(validation)
        if html:
            outputs["fan_chart_html"] = self.export_fan_chart_html(points, ticks, **chart_kwargs)
        if png:
            outputs["fan_chart_png"] = self.export_fan_chart_png(points, ticks, **chart_kwargs)
            if result is not None:
                outputs["sample_paths_png"] = self.export_path_sample_png(result, ticks)
        return outputs


__all__ = ["ReportGenerator"]
