import random
import unittest
from unittest.mock import Mock

import numpy as np

from pattern_filters.algorithms.sampling import (
    copy_from_indexes,
    generate_random_indexes,
    sample_size,
)
from pattern_filters.errors import InvalidArgumentError, NullReferenceError
from pattern_filters.utils.random_source import PythonRandomSource


def scripted_source(*draws):
    return Mock(next_int=Mock(side_effect=list(draws)))


class TestSampleSize(unittest.TestCase):
    def test_floor_of_product(self):
        self.assertEqual(sample_size(5, 0.4), 2)
        self.assertEqual(sample_size(3, 0.9), 2)
        self.assertEqual(sample_size(100, 0.25), 25)

    def test_never_below_one(self):
        self.assertEqual(sample_size(10, 0.01), 1)
        self.assertEqual(sample_size(1, 0.5), 1)

    def test_length_formula_over_grid(self):
        for n in range(1, 40):
            for x in (0.05, 0.1, 0.33, 0.5, 0.75, 0.99):
                self.assertEqual(sample_size(n, x), max(int(np.floor(n * x)), 1))
                self.assertLessEqual(sample_size(n, x), n)


class TestGenerateRandomIndexes(unittest.TestCase):
    def test_duplicates_are_discarded(self):
        source = scripted_source(3, 3, 3, 1)
        indexes = generate_random_indexes(5, 2, source)
        self.assertEqual(indexes, [1, 3])
        self.assertEqual(source.next_int.call_count, 4)
        source.next_int.assert_called_with(5)

    def test_result_is_ascending_and_unique(self):
        source = PythonRandomSource(random.Random(0))
        for max_exclusive in (1, 2, 7, 50):
            for amount in range(1, max_exclusive + 1):
                indexes = generate_random_indexes(max_exclusive, amount, source)
                self.assertEqual(len(indexes), amount)
                self.assertEqual(indexes, sorted(set(indexes)))
                self.assertTrue(all(0 <= i < max_exclusive for i in indexes))

    def test_full_amount_selects_every_position(self):
        source = PythonRandomSource(random.Random(3))
        self.assertEqual(generate_random_indexes(6, 6, source), [0, 1, 2, 3, 4, 5])

    def test_amount_above_maximum_fails(self):
        with self.assertRaises(InvalidArgumentError):
            generate_random_indexes(3, 4, scripted_source())

    def test_non_positive_amount_fails(self):
        with self.assertRaises(InvalidArgumentError):
            generate_random_indexes(3, 0, scripted_source())

    def test_missing_source_fails(self):
        with self.assertRaises(NullReferenceError):
            generate_random_indexes(3, 1, None)

    def test_out_of_range_draws_fail(self):
        for draw in (-1, 5):
            with self.subTest(draw=draw):
                with self.assertRaises(InvalidArgumentError):
                    generate_random_indexes(5, 2, scripted_source(draw, 1))


class TestCopyFromIndexes(unittest.TestCase):
    def test_projection_follows_index_order(self):
        result = copy_from_indexes([10.0, 20.0, 30.0, 40.0, 50.0], [1, 3])
        np.testing.assert_array_equal(result, np.array([20.0, 40.0]))

    def test_returns_new_float_array(self):
        src = np.array([1.0, 2.0, 3.0])
        result = copy_from_indexes(src, [0, 2])
        self.assertEqual(result.dtype, np.float64)
        result[0] = 99.0
        self.assertEqual(src[0], 1.0)

    def test_integer_input_is_converted(self):
        result = copy_from_indexes([1, 2, 3], [2])
        np.testing.assert_array_equal(result, np.array([3.0]))


if __name__ == "__main__":
    unittest.main()
