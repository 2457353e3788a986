import unittest

import numpy as np

from shapedarray import (
    AxisError,
    ShapeMismatchError,
    ShapedArray,
    UnevenSplitError,
)


class TestReshape(unittest.TestCase):
    def setUp(self):
        self.a = ShapedArray((3, 2, 3), range(18))

    def test_reshape_varargs_and_sequence(self):
        self.assertEqual(self.a.reshape(6, 3).shape, (6, 3))
        self.assertEqual(self.a.reshape((9, 2)).shape, (9, 2))
        self.assertEqual(self.a.reshape([18]).scalars, list(range(18)))

    def test_placeholder_positions(self):
        self.assertEqual(self.a.reshape(-1, 3, 3).shape, (2, 3, 3))
        self.assertEqual(self.a.reshape(3, -1, 3).shape, (3, 2, 3))
        self.assertEqual(self.a.reshape(3, 3, -1).shape, (3, 3, 2))
        self.assertEqual(self.a.reshape(-1).shape, (18,))

    def test_reshape_returns_copy(self):
        b = self.a.reshape(18)
        b[0] = 100
        self.assertEqual(self.a.scalars[0], 0)

    def test_reshape_to_rank_zero(self):
        s = ShapedArray((1, 1), [5]).reshape(())
        self.assertEqual(s.shape, ())
        self.assertEqual(s.scalar, 5)

    def test_reshape_errors(self):
        with self.assertRaises(ShapeMismatchError):
            self.a.reshape(4, 5)
        with self.assertRaises(ShapeMismatchError):
            self.a.reshape(-1, -1)
        with self.assertRaises(ShapeMismatchError):
            self.a.reshape(-1, 4)
        with self.assertRaises(ShapeMismatchError):
            self.a.reshape(-2, -9)

    def test_reshaped_like_and_flatten(self):
        other = ShapedArray((2, 9), [0] * 18)
        self.assertEqual(self.a.reshaped_like(other).shape, (2, 9))
        self.assertEqual(self.a.flatten().shape, (18,))
        self.assertEqual(self.a[1].flatten().scalars, list(range(6, 12)))
        self.assertEqual(ShapedArray.from_scalar(4).flatten().shape, (1,))


class TestExpandAndSqueeze(unittest.TestCase):
    def setUp(self):
        self.a = ShapedArray((2, 3), range(6))

    def test_expand_dims(self):
        self.assertEqual(self.a.expand_dims(0).shape, (1, 2, 3))
        self.assertEqual(self.a.expand_dims(2).shape, (2, 3, 1))
        self.assertEqual(self.a.expand_dims(-1).shape, (2, 3, 1))
        self.assertEqual(self.a.expand_dims([0, 2]).shape, (1, 2, 1, 3))

    def test_expand_dims_matches_numpy_single_axis(self):
        x = np.arange(6).reshape(2, 3)
        for axis in (-3, -2, -1, 0, 1, 2):
            self.assertEqual(self.a.expand_dims(axis).shape, np.expand_dims(x, axis).shape)

    def test_expand_dims_out_of_range(self):
        with self.assertRaises(AxisError):
            self.a.expand_dims(3)
        with self.assertRaises(AxisError):
            self.a.expand_dims(-4)

    def test_expand_dims_of_scalar(self):
        self.assertEqual(ShapedArray.from_scalar(1).expand_dims(0).shape, (1,))

    def test_squeeze_all(self):
        b = ShapedArray((1, 2, 1, 3, 1), range(6))
        self.assertEqual(b.squeeze().shape, (2, 3))
        self.assertEqual(b.squeeze().scalars, list(range(6)))
        self.assertEqual(ShapedArray((1, 1), [3]).squeeze().shape, ())

    def test_squeeze_named_axes(self):
        b = ShapedArray((1, 2, 1, 3), range(6))
        self.assertEqual(b.squeeze(0).shape, (2, 1, 3))
        self.assertEqual(b.squeeze([0, -2]).shape, (2, 3))

    def test_squeeze_errors(self):
        b = ShapedArray((1, 2, 1, 3), range(6))
        with self.assertRaises(ShapeMismatchError):
            b.squeeze(1)
        with self.assertRaises(AxisError):
            b.squeeze(4)
        with self.assertRaises(AxisError):
            b.squeeze([0, -4])

    def test_expand_then_squeeze_round_trip(self):
        self.assertEqual(self.a.expand_dims([0, 3]).squeeze(), self.a)


class TestSplitAndUnstack(unittest.TestCase):
    def setUp(self):
        self.a = ShapedArray((3, 2, 3), range(18))
        self.x = np.arange(18).reshape(3, 2, 3)

    def test_split_matches_numpy(self):
        for count, axis in ((3, 0), (2, 1), (3, 2), (1, 0)):
            parts = self.a.split(count, axis=axis)
            expected = np.split(self.x, count, axis=axis)
            self.assertEqual(len(parts), len(expected))
            for p, e in zip(parts, expected):
                self.assertEqual(p.shape, e.shape)
                self.assertEqual(p.scalars, e.ravel().tolist())

    def test_split_negative_axis(self):
        parts = self.a.split(3, axis=-1)
        self.assertEqual(parts[0].shape, (3, 2, 1))
        self.assertEqual(parts[0].scalars, [0, 3, 6, 9, 12, 15])

    def test_uneven_split(self):
        with self.assertRaises(UnevenSplitError):
            self.a.split(2, axis=0)
        with self.assertRaises(UnevenSplitError):
            self.a.split(0, axis=1)

    def test_split_axis_out_of_range(self):
        with self.assertRaises(AxisError):
            self.a.split(1, axis=3)

    def test_unstack_axis_two(self):
        parts = self.a.unstack(axis=2)
        self.assertEqual(len(parts), 3)
        self.assertEqual(parts[0].shape, (3, 2))
        flat = [v for p in parts for v in p.scalars]
        self.assertEqual(flat[:6], [0, 3, 6, 9, 12, 15])
        self.assertEqual(flat[6:12], [1, 4, 7, 10, 13, 16])

    def test_unstack_matches_numpy(self):
        for axis in (0, 1, 2, -1):
            parts = self.a.unstack(axis)
            expected = np.moveaxis(self.x, axis, 0)
            self.assertEqual(len(parts), expected.shape[0])
            for p, e in zip(parts, expected):
                self.assertEqual(p.shape, e.shape)
                self.assertEqual(p.scalars, e.ravel().tolist())

    def test_unstack_rank_zero(self):
        with self.assertRaises(AxisError):
            ShapedArray.from_scalar(1).unstack()

    def test_unstack_rank_one(self):
        parts = ShapedArray((3,), [1, 2, 3]).unstack()
        self.assertEqual([p.scalar for p in parts], [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
