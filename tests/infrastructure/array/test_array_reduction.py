import math
import unittest
import warnings

import numpy as np

from shapedarray import AxisError, ShapedArray


class TestArraySum(unittest.TestCase):
    def setUp(self):
        self.a = ShapedArray((3, 2, 3), range(18))
        self.x = np.arange(18).reshape(3, 2, 3)

    def test_global_sum(self):
        s = self.a.sum()
        self.assertEqual(s.shape, ())
        self.assertEqual(s.scalar, 153)

    def test_global_sum_keepdims(self):
        s = self.a.sum(keepdims=True)
        self.assertEqual(s.shape, (1,))
        self.assertEqual(s.scalars, [153])

    def test_single_axes(self):
        self.assertEqual(self.a.sum(axis=1).shape, (3, 3))
        self.assertEqual(self.a.sum(axis=1).scalars, [3, 5, 7, 15, 17, 19, 27, 29, 31])
        self.assertEqual(self.a.sum(axis=2).scalars, [3, 12, 21, 30, 39, 48])
        self.assertEqual(self.a.sum(axis=0).scalars, self.x.sum(axis=0).ravel().tolist())

    def test_multiple_axes(self):
        self.assertEqual(self.a.sum(axis=[0, 2]).scalars, [63, 90])
        self.assertEqual(self.a.sum(axis=[1, 2]).scalars, [15, 51, 87])

    def test_reducing_every_axis_is_global(self):
        s = self.a.sum(axis=(0, 1, 2))
        self.assertEqual(s.shape, ())
        self.assertEqual(s.scalar, 153)

    def test_keepdims(self):
        s = self.a.sum(axis=[0, 2], keepdims=True)
        self.assertEqual(s.shape, (1, 2, 1))
        self.assertEqual(s.scalars, [63, 90])
        self.assertEqual(self.a.sum(axis=1, keepdims=True).shape, (3, 1, 3))

    def test_negative_axes_match_numpy(self):
        for axis in (-1, -2, (-1, 0)):
            expected = self.x.sum(axis=axis)
            got = self.a.sum(axis=axis)
            self.assertEqual(got.shape, expected.shape)
            self.assertEqual(got.scalars, expected.ravel().tolist())

    def test_numpy_integer_axis(self):
        self.assertEqual(self.a.sum(axis=np.int64(0)), self.a.sum(axis=0))
        self.assertEqual(self.a.mean(axis=np.int64(-1)), self.a.mean(axis=2))
        self.assertEqual(self.a.sum(axis=[np.int64(0), 2]).scalars, [63, 90])

    def test_invalid_axes(self):
        with self.assertRaises(AxisError):
            self.a.sum(axis=3)
        with self.assertRaises(AxisError):
            self.a.sum(axis=[2, -1])

    def test_sum_of_view(self):
        self.assertEqual(self.a[1].sum(axis=0).scalars, [15, 17, 19])

    def test_result_keeps_backend(self):
        a = ShapedArray((2, 2), [1, 2, 3, 4], backend="python")
        self.assertTrue(a.sum(axis=0).backend.is_python())

    def test_empty_axis_gives_identity(self):
        a = ShapedArray((2, 0), [])
        self.assertEqual(a.sum(axis=1).scalars, [0, 0])


class TestArrayProduct(unittest.TestCase):
    def setUp(self):
        self.a = ShapedArray((3, 2, 3), range(1, 19))

    def test_global_product(self):
        self.assertEqual(self.a.product().scalar, 6402373705728000)

    def test_single_axes(self):
        self.assertEqual(self.a.product(axis=0).scalars, [91, 224, 405, 640, 935, 1296])
        self.assertEqual(
            self.a.product(axis=1).scalars, [4, 10, 18, 70, 88, 108, 208, 238, 270]
        )
        self.assertEqual(self.a.product(axis=2).scalars, [6, 120, 504, 1320, 2730, 4896])

    def test_multiple_axes(self):
        self.assertEqual(self.a.product(axis=[0, 2]).scalars, [8255520, 775526400])
        self.assertEqual(self.a.product(axis=[1, 2]).scalars, [720, 665280, 13366080])

    def test_backends_agree(self):
        b = self.a.with_backend("python")
        self.assertEqual(self.a.product(axis=1), b.product(axis=1))


class TestArrayMean(unittest.TestCase):
    def setUp(self):
        self.a = ShapedArray((3, 2, 3), range(18))
        self.x = np.arange(18, dtype=np.float64).reshape(3, 2, 3)

    def test_global_mean(self):
        self.assertEqual(self.a.mean().scalar, 8.5)

    def test_axes(self):
        self.assertEqual(
            self.a.mean(axis=1).scalars, [1.5, 2.5, 3.5, 7.5, 8.5, 9.5, 13.5, 14.5, 15.5]
        )
        self.assertEqual(self.a.mean(axis=2).scalars, [1, 4, 7, 10, 13, 16])
        self.assertEqual(self.a.mean(axis=[0, 2]).scalars, [7, 10])
        self.assertEqual(self.a.mean(axis=[1, 2]).scalars, [2.5, 8.5, 14.5])

    def test_matches_numpy(self):
        for axis in (0, 1, 2, (0, 1), (-1,)):
            expected = self.x.mean(axis=axis)
            got = self.a.mean(axis=axis)
            self.assertEqual(got.shape, expected.shape)
            np.testing.assert_allclose(got.to_numpy(), expected)

    def test_keepdims(self):
        m = self.a.mean(axis=0, keepdims=True)
        self.assertEqual(m.shape, (1, 2, 3))
        np.testing.assert_allclose(m.to_numpy(), self.x.mean(axis=0, keepdims=True))

    def test_empty_axes_divide_by_scalar_count(self):
        self.assertEqual(self.a.mean(axis=[]).scalar, 8.5)

    def test_mean_over_zero_elements_warns(self):
        a = ShapedArray((2, 0), [])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            m = a.mean(axis=1)
        self.assertEqual(m.shape, (2,))
        self.assertTrue(all(math.isnan(v) for v in m.scalars))
        self.assertTrue(any(issubclass(w.category, RuntimeWarning) for w in caught))


if __name__ == "__main__":
    unittest.main()
