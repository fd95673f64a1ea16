from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from sparkline_svg import SparklineDataError
from sparkline_svg.adapters import INTERVAL_SAMPLES, normalize_samples, sample_every, sample_for_interval


class NormalizeSamplesTests(unittest.TestCase):
    def test_pairs_keep_values_in_order(self) -> None:
        values = normalize_samples([[1700000000000, 3.5], [1700000300000, 2.0], [1700000600000, 4.25]])
        self.assertEqual(values.dtype, np.float64)
        self.assertEqual(values.tolist(), [3.5, 2.0, 4.25])

    def test_bare_values(self) -> None:
        self.assertEqual(normalize_samples([1, 2, 3]).tolist(), [1.0, 2.0, 3.0])

    def test_decimal_and_missing_values_are_masked(self) -> None:
        values = normalize_samples([Decimal("1.5"), None, float("inf"), Decimal("2.25"), float("nan")])
        self.assertEqual(values.tolist(), [1.5, 2.25])

    def test_numpy_pair_array(self) -> None:
        arr = np.asarray([[0, 10], [1, 11], [2, 9]], dtype=np.int64)
        self.assertEqual(normalize_samples(arr).tolist(), [10.0, 11.0, 9.0])

    def test_empty_input_is_empty_array(self) -> None:
        self.assertEqual(normalize_samples([]).size, 0)

    def test_rejects_unsupported_input(self) -> None:
        with self.assertRaisesRegex(SparklineDataError, "unsupported"):
            normalize_samples("1,2,3")
        with self.assertRaisesRegex(SparklineDataError, "N x 2"):
            normalize_samples(np.zeros((3, 3)))
        with self.assertRaisesRegex(SparklineDataError, "non-numeric"):
            normalize_samples([[0, "abc"], [1, 2.0]])

    def test_rejects_values_beyond_float_range(self) -> None:
        with self.assertRaisesRegex(SparklineDataError, "non-numeric value at index 0"):
            normalize_samples([10**400, 1])

    def test_torch_tensor(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        values = normalize_samples(torch.tensor([[0, 5], [1, 7]], dtype=torch.int64))
        self.assertEqual(values.tolist(), [5.0, 7.0])

    def test_pandas_dataframe_single_numeric_column(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"token": ["btc", "btc", "btc"], "price": [1, 2, 3]})
        self.assertEqual(normalize_samples(df).tolist(), [1.0, 2.0, 3.0])

    def test_pandas_dataframe_named_column(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"ts": [0, 1, 2], "price": [9.5, 9.0, 10.0]})
        self.assertEqual(normalize_samples(df, column="price").tolist(), [9.5, 9.0, 10.0])
        with self.assertRaisesRegex(SparklineDataError, "exactly one numeric column"):
            normalize_samples(df)


class SamplingTests(unittest.TestCase):
    def test_sample_every_keeps_multiples_of_interval(self) -> None:
        data = [[i, float(i)] for i in range(10)]
        self.assertEqual([p[0] for p in sample_every(data, 3)], [0, 3, 6, 9])

    def test_interval_of_one_keeps_everything(self) -> None:
        data = [[0, 1.0], [1, 2.0]]
        self.assertEqual(sample_every(data, 1), data)
        self.assertEqual(sample_every(data, 0), data)

    def test_interval_labels(self) -> None:
        self.assertEqual(INTERVAL_SAMPLES["1h"], 12)
        data = list(range(100))
        self.assertEqual(sample_for_interval(data, "4h"), [0, 48, 96])
        with self.assertRaisesRegex(ValueError, "Unknown sampling interval"):
            sample_for_interval(data, "2h")


if __name__ == "__main__":
    unittest.main()
