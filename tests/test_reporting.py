import json
import tempfile
import unittest
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd

from portfolio_bands.core.aggregation import aggregate_paths
from portfolio_bands.core.result_validation import validate_simulation_result
from portfolio_bands.core.summary import build_summary
from portfolio_bands.core.ticks import select_ticks
from portfolio_bands.models.results import FinalStats, SimulationResult
from portfolio_bands.reporting import ReportGenerator
from portfolio_bands.visualization import (
    NO_DATA_MESSAGE,
    build_fan_chart,
    extract_chart_payload,
    plot_band_chart,
)


def _growth_paths(count: int = 20, months: int = 73) -> list:
    paths = []
    for index in range(count):
        rate = 1.0 + (index - count / 2) / 1000.0
        paths.append([100_000.0 * rate ** month for month in range(months)])
    return paths


class ChartPayloadTests(unittest.TestCase):
    def test_payload_combines_points_ticks_and_rows(self) -> None:
        result = SimulationResult(
            paths=_growth_paths(),
            final_stats=FinalStats(min=1.0, median=2.0, mean=2.0, max=3.0),
            success_rate=0.9,
            simulated_cagr=0.05,
        )
        payload = extract_chart_payload(result, low_percentile=10, high_percentile=90)
        self.assertEqual(len(payload.points), 73)
        self.assertEqual(payload.ticks, (0, 12, 60, 72))
        self.assertEqual(len(payload.rows), 6)
        self.assertEqual(payload.band_label, "10th - 90th Percentile")
        self.assertFalse(payload.is_empty)

    def test_empty_payload(self) -> None:
        result = SimulationResult(
            paths=[], final_stats=FinalStats(min=0, median=0, mean=0, max=0), success_rate=0.0
        )
        payload = extract_chart_payload(result)
        self.assertTrue(payload.is_empty)
        self.assertEqual(payload.ticks, ())
        self.assertEqual(len(payload.rows), 5)


class FigureTests(unittest.TestCase):
    def test_fan_chart_traces_and_ticks(self) -> None:
        points = aggregate_paths(_growth_paths(), 5, 95)
        ticks = select_ticks(len(points))
        figure = build_fan_chart(points, ticks)
        self.assertEqual(len(figure.data), 3)
        self.assertEqual(figure.data[1].fill, "tonexty")
        self.assertEqual(list(figure.layout.xaxis.tickvals), [0, 12, 60, 72])
        self.assertEqual(list(figure.layout.xaxis.ticktext), ["0Y", "1Y", "5Y", "6Y"])

    def test_fan_chart_placeholder_for_no_data(self) -> None:
        figure = build_fan_chart((), ())
        self.assertEqual(len(figure.data), 0)
        self.assertEqual(figure.layout.annotations[0].text, NO_DATA_MESSAGE)

    def test_matplotlib_band_chart_ticks(self) -> None:
        import matplotlib.pyplot as plt

        points = aggregate_paths(_growth_paths(), 5, 95)
        fig = plot_band_chart(points, select_ticks(len(points)))
        try:
            ax = fig.axes[0]
            self.assertEqual(list(ax.get_xticks()), [0, 12, 60, 72])
        finally:
            plt.close(fig)


class ReportGeneratorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.output_dir = Path(self._tmp.name)
        self.result = SimulationResult(
            paths=[[100.0, 110.0, 120.0], [100.0, 90.0, 80.0], [100.0, 130.0, 160.0]],
            final_stats=FinalStats(min=80.0, median=120.0, mean=120.0, max=160.0),
            success_rate=1.0,
            simulated_cagr=0.2,
        )

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_export_all(self) -> None:
        payload = extract_chart_payload(self.result, low_percentile=5, high_percentile=95)
        reporter = ReportGenerator(self.output_dir)
        outputs = reporter.export_all(
            points=payload.points,
            ticks=payload.ticks,
            rows=payload.rows,
            validation=validate_simulation_result(self.result),
            result=self.result,
            html=True,
            png=True,
            band_label=payload.band_label,
        )
        self.assertEqual(
            set(outputs),
            {"bands", "summary", "ticks", "validation", "fan_chart_html", "fan_chart_png", "sample_paths_png"},
        )
        for path in outputs.values():
            self.assertTrue(path.exists(), msg=str(path))

        bands = pd.read_csv(outputs["bands"])
        self.assertEqual(bands["month"].tolist(), [0, 1, 2])
        self.assertAlmostEqual(bands.loc[2, "low_band"], 84.0)

        summary = pd.read_csv(outputs["summary"])
        self.assertEqual(summary["statistic"].tolist()[-2:], ["Simulated CAGR", "Success Rate"])

        ticks = json.loads(outputs["ticks"].read_text(encoding="utf-8"))
        self.assertEqual(ticks, [{"month": 0, "label": "0Y"}, {"month": 2, "label": "0Y"}])

        validation = json.loads(outputs["validation"].read_text(encoding="utf-8"))
        self.assertEqual(validation["status"], "PASS")

    def test_timestamped_run_directory(self) -> None:
        reporter = ReportGenerator(self.output_dir, timestamped=True, run_label="run_test")
        self.assertEqual(reporter.output_dir, self.output_dir / "run_test")
        self.assertTrue(reporter.output_dir.is_dir())


if __name__ == "__main__":
    unittest.main()
