import unittest

import numpy as np

from portfolio_bands.core.percentile import percentile


class PercentileTests(unittest.TestCase):
    def setUp(self) -> None:
        self.values = [80.0, 120.0, 160.0]

    def test_empty_sample_returns_zero_sentinel(self) -> None:
        self.assertEqual(percentile([], 50), 0.0)

    def test_single_value_is_every_percentile(self) -> None:
        for p in (0, 5, 50, 95, 100):
            self.assertEqual(percentile([42.5], p), 42.5)

    def test_extremes_return_first_and_last(self) -> None:
        self.assertEqual(percentile(self.values, 0), 80.0)
        self.assertEqual(percentile(self.values, 100), 160.0)

    def test_exact_order_statistic(self) -> None:
        self.assertEqual(percentile(self.values, 50), 120.0)

    def test_linear_interpolation_between_neighbours(self) -> None:
        self.assertAlmostEqual(percentile(self.values, 5), 84.0)
        self.assertAlmostEqual(percentile(self.values, 95), 156.0)
        self.assertAlmostEqual(percentile([1.0, 2.0, 3.0, 4.0], 25), 1.75)

    def test_monotonic_in_p(self) -> None:
        values = sorted([3.0, -1.0, 7.5, 7.5, 10.0, 2.0])
        grid = [0, 1, 5, 10, 25, 33.3, 50, 75, 90, 95, 99, 100]
        results = [percentile(values, p) for p in grid]
        self.assertEqual(results, sorted(results))

    def test_matches_numpy_linear_percentile(self) -> None:
        rng = np.random.default_rng(7)
        values = np.sort(rng.normal(100_000, 25_000, size=37))
        for p in (1, 5, 12.5, 50, 87.5, 95, 99):
            self.assertAlmostEqual(
                percentile(values.tolist(), p),
                float(np.percentile(values, p)),
                places=6,
            )

    def test_out_of_range_p_is_clamped(self) -> None:
        self.assertEqual(percentile(self.values, -10), 80.0)
        self.assertEqual(percentile(self.values, 150), 160.0)

    def test_nan_p_reads_as_median(self) -> None:
        self.assertEqual(percentile(self.values, float("nan")), 120.0)

    def test_does_not_sort_its_input(self) -> None:
        unsorted = [3.0, 1.0, 2.0]
        self.assertEqual(percentile(unsorted, 0), 3.0)
        self.assertEqual(unsorted, [3.0, 1.0, 2.0])


if __name__ == "__main__":
    unittest.main()
