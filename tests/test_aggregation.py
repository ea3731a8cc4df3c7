import math
import unittest

import numpy as np

from portfolio_bands.core.aggregation import (
    aggregate_paths,
    final_values,
    points_to_frame,
    sample_paths,
    summarise_final_values,
)
from portfolio_bands.models.results import AggregatedPoint


class AggregatePathsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.paths = [
            [100.0, 110.0, 120.0],
            [100.0, 90.0, 80.0],
            [100.0, 130.0, 160.0],
        ]

    def test_empty_inputs_yield_no_points(self) -> None:
        self.assertEqual(aggregate_paths([]), ())
        self.assertEqual(aggregate_paths([[]]), ())
        self.assertEqual(aggregate_paths(None), ())

    def test_three_by_three_scenario(self) -> None:
        points = aggregate_paths(self.paths, 5, 95)
        self.assertEqual([point.step for point in points], [0, 1, 2])

        self.assertEqual(points[0], AggregatedPoint(step=0, median=100.0, low_band=100.0, high_band=100.0))

        self.assertAlmostEqual(points[1].median, 110.0)
        self.assertAlmostEqual(points[1].low_band, 92.0)
        self.assertAlmostEqual(points[1].high_band, 128.0)

        self.assertAlmostEqual(points[2].median, 120.0)
        self.assertAlmostEqual(points[2].low_band, 84.0)
        self.assertAlmostEqual(points[2].high_band, 156.0)

    def test_band_ordering_holds_for_random_paths(self) -> None:
        rng = np.random.default_rng(11)
        growth = rng.normal(1.005, 0.04, size=(250, 120)).cumprod(axis=1)
        paths = 100_000 * growth
        points = aggregate_paths(paths, 10, 90)
        self.assertEqual(len(points), 120)
        for point in points:
            self.assertLessEqual(point.low_band, point.median)
            self.assertLessEqual(point.median, point.high_band)

    def test_ragged_paths_only_use_available_values(self) -> None:
        paths = [
            [100.0, 50.0, 0.0],
            [100.0, 150.0],
            [100.0],
        ]
        points = aggregate_paths(paths, 5, 95)
        self.assertEqual(len(points), 3)
        self.assertAlmostEqual(points[1].median, 100.0)
        self.assertEqual(points[2], AggregatedPoint(step=2, median=0.0, low_band=0.0, high_band=0.0))

    def test_steps_without_values_are_skipped(self) -> None:
        paths = [[100.0, None, 120.0], [100.0, float("nan"), 140.0]]
        points = aggregate_paths(paths, 5, 95)
        self.assertEqual([point.step for point in points], [0, 2])
        self.assertAlmostEqual(points[1].median, 130.0)

    def test_horizon_follows_first_path(self) -> None:
        points = aggregate_paths([[1.0, 2.0], [1.0, 2.0, 3.0, 4.0]], 5, 95)
        self.assertEqual(len(points), 2)

    def test_idempotent_on_same_input(self) -> None:
        first = aggregate_paths(self.paths, 5, 95)
        second = aggregate_paths(self.paths, 5, 95)
        self.assertEqual(first, second)
        self.assertEqual(self.paths[1], [100.0, 90.0, 80.0])

    def test_defaults_use_five_and_ninety_five(self) -> None:
        self.assertEqual(aggregate_paths(self.paths), aggregate_paths(self.paths, 5, 95))

    def test_invalid_band_percentiles_raise(self) -> None:
        with self.assertRaises(ValueError):
            aggregate_paths(self.paths, 60, 95)
        with self.assertRaises(ValueError):
            aggregate_paths(self.paths, 5, 40)
        with self.assertRaises(ValueError):
            aggregate_paths(self.paths, -1, 101)


class PathHelperTests(unittest.TestCase):
    def test_points_to_frame(self) -> None:
        frame = points_to_frame(aggregate_paths([[1.0, 2.0], [3.0, 4.0]], 5, 95))
        self.assertEqual(list(frame.columns), ["month", "median", "low_band", "high_band"])
        self.assertEqual(frame["month"].tolist(), [0, 1])
        self.assertAlmostEqual(frame.loc[1, "median"], 3.0)

    def test_points_to_frame_empty(self) -> None:
        frame = points_to_frame(())
        self.assertTrue(frame.empty)
        self.assertEqual(list(frame.columns), ["month", "median", "low_band", "high_band"])

    def test_final_values_use_last_usable_entry(self) -> None:
        finals = final_values([[1.0, 2.0, 3.0], [5.0, None], [], [7.0, float("nan")]])
        self.assertEqual(finals.tolist(), [3.0, 5.0, 7.0])

    def test_summarise_final_values(self) -> None:
        stats = summarise_final_values([[0.0, 10.0], [0.0, 20.0], [0.0, 40.0], [0.0, 30.0]])
        self.assertEqual(stats.min, 10.0)
        self.assertEqual(stats.max, 40.0)
        self.assertAlmostEqual(stats.median, 25.0)
        self.assertAlmostEqual(stats.mean, 25.0)

    def test_summarise_final_values_empty(self) -> None:
        stats = summarise_final_values([])
        self.assertEqual((stats.min, stats.median, stats.mean, stats.max), (0.0, 0.0, 0.0, 0.0))

    def test_sample_paths_spreads_selection(self) -> None:
        paths = [[float(index)] for index in range(100)]
        sampled = sample_paths(paths, limit=10)
        self.assertEqual(len(sampled), 10)
        self.assertEqual(sampled[0], [0.0])
        self.assertEqual(sampled[-1], [99.0])

    def test_sample_paths_small_matrix_returned_whole(self) -> None:
        paths = [[1.0, 2.0], [3.0, 4.0]]
        self.assertEqual(sample_paths(paths, limit=10), paths)
        self.assertEqual(sample_paths(paths, limit=0), [])

    def test_sample_paths_accepts_numpy(self) -> None:
        matrix = np.arange(12, dtype=float).reshape(4, 3)
        sampled = sample_paths(matrix, limit=2)
        self.assertEqual(len(sampled), 2)
        self.assertTrue(math.isclose(sampled[-1][-1], 11.0))


if __name__ == "__main__":
    unittest.main()
