import unittest

import numpy as np
import torch

from pattern_filters.pattern import Pattern, PatternLike


class TestPattern(unittest.TestCase):
    def test_vector_is_float_array(self):
        pattern = Pattern([1, 2, 3], name="p")
        vector = pattern.get_vector()
        self.assertIsInstance(vector, np.ndarray)
        self.assertEqual(vector.dtype, np.float64)
        self.assertEqual(len(pattern), 3)

    def test_input_is_copied(self):
        source = np.array([1.0, 2.0])
        pattern = Pattern(source)
        source[0] = 5.0
        self.assertEqual(pattern.get_vector()[0], 1.0)

    def test_tensor_input(self):
        pattern = Pattern(torch.tensor([1.0, 2.0, 3.0]))
        np.testing.assert_array_equal(pattern.get_vector(), [1.0, 2.0, 3.0])

    def test_set_vector_replaces(self):
        pattern = Pattern([1, 2, 3])
        pattern.set_vector([4, 5])
        np.testing.assert_array_equal(pattern.get_vector(), [4.0, 5.0])

    def test_multidimensional_vector_rejected(self):
        with self.assertRaises(ValueError):
            Pattern([[1, 2], [3, 4]])

    def test_clone_is_deep(self):
        pattern = Pattern([1, 2, 3], name="p")
        clone = pattern.clone()
        self.assertEqual(clone, pattern)
        self.assertIsNot(clone.get_vector(), pattern.get_vector())
        clone.get_vector()[0] = 10.0
        self.assertEqual(pattern.get_vector()[0], 1.0)

    def test_equality(self):
        self.assertEqual(Pattern([1, 2], name="a"), Pattern([1.0, 2.0], name="a"))
        self.assertNotEqual(Pattern([1, 2], name="a"), Pattern([1, 2], name="b"))
        self.assertNotEqual(Pattern([1, 2]), Pattern([1, 3]))
        self.assertNotEqual(Pattern([1, 2]), [1, 2])

    def test_protocol(self):
        self.assertIsInstance(Pattern([1.0]), PatternLike)
        self.assertNotIsInstance(object(), PatternLike)

    def test_repr(self):
        self.assertEqual(repr(Pattern([1, 2], name="x")), "Pattern(name='x', vector=[1.0, 2.0])")


if __name__ == "__main__":
    unittest.main()
