import operator
import unittest

import numpy as np

from shapedarray import ShapeMismatchError, ShapedArray


class TestBroadcastingOp(unittest.TestCase):
    def setUp(self):
        self.col = ShapedArray((4, 1), [0, 10, 20, 30])
        self.row = ShapedArray((3,), [0, 1, 2])

    def test_add(self):
        out = self.col.broadcasting_op(self.row, operator.add)
        self.assertEqual(out.shape, (4, 3))
        self.assertEqual(out.scalars, [0, 1, 2, 10, 11, 12, 20, 21, 22, 30, 31, 32])

    def test_mul(self):
        out = self.col.broadcasting_op(self.row, operator.mul)
        self.assertEqual(out.scalars, [0, 0, 0, 0, 10, 20, 0, 20, 40, 0, 30, 60])

    def test_rank_three_with_rank_two(self):
        a = ShapedArray((3, 1, 5), range(15))
        b = ShapedArray((5, 5), range(25))
        out = a.broadcasting_op(b, operator.add)
        self.assertEqual(out.shape, (3, 5, 5))
        expected = a.to_numpy() + b.to_numpy()
        self.assertEqual(out.scalars, expected.ravel().tolist())

    def test_arbitrary_callable(self):
        a = ShapedArray((2,), [3, 7])
        out = a.broadcasting_op(ShapedArray.from_scalar(5), max)
        self.assertEqual(out.scalars, [5, 7])

    def test_python_scalar_operand(self):
        out = self.row.broadcasting_op(10, operator.sub)
        self.assertEqual(out.scalars, [-10, -9, -8])

    def test_equal_shapes(self):
        a = ShapedArray((2, 2), [1, 2, 3, 4])
        self.assertEqual(a.broadcasting_op(a, operator.mul).scalars, [1, 4, 9, 16])

    def test_incompatible_shapes(self):
        with self.assertRaises(ShapeMismatchError) as ctx:
            ShapedArray((2, 3), range(6)).broadcasting_op(ShapedArray((2,), [1, 2]), operator.add)
        self.assertEqual(ctx.exception.shapes, ((2, 3), (2,)))

    def test_view_operands(self):
        a = ShapedArray((2, 3), range(6))
        out = a[1].broadcasting_op(a[0:1], operator.add)
        self.assertEqual(out.shape, (1, 3))
        self.assertEqual(out.scalars, [3, 5, 7])


class TestArithmeticOperators(unittest.TestCase):
    def setUp(self):
        self.xa = np.arange(12, dtype=np.float64).reshape(4, 3) + 1.0
        self.xb = np.array([1.0, 2.0, 4.0])

    def _check_both_backends(self, fn, expected):
        for backend in ("python", "numpy"):
            a = ShapedArray.from_numpy(self.xa, backend=backend)
            b = ShapedArray.from_numpy(self.xb)
            out = fn(a, b)
            self.assertEqual(out.shape, expected.shape)
            np.testing.assert_allclose(out.to_numpy(), expected)
            self.assertEqual(out.backend, a.backend)

    def test_add(self):
        self._check_both_backends(lambda a, b: a + b, self.xa + self.xb)

    def test_sub(self):
        self._check_both_backends(lambda a, b: a - b, self.xa - self.xb)

    def test_mul(self):
        self._check_both_backends(lambda a, b: a * b, self.xa * self.xb)

    def test_truediv(self):
        self._check_both_backends(lambda a, b: a / b, self.xa / self.xb)

    def test_reflected_with_python_scalars(self):
        for backend in ("python", "numpy"):
            a = ShapedArray((3,), [1.0, 2.0, 4.0], backend=backend)
            self.assertEqual((2 + a).scalars, [3.0, 4.0, 6.0])
            self.assertEqual((10 - a).scalars, [9.0, 8.0, 6.0])
            self.assertEqual((3 * a).scalars, [3.0, 6.0, 12.0])
            self.assertEqual((8 / a).scalars, [8.0, 4.0, 2.0])

    def test_numpy_array_on_the_left_defers(self):
        a = ShapedArray((3,), [1, 2, 3])
        out = np.array([10, 20, 30]) + a
        self.assertIsInstance(out, ShapedArray)
        self.assertEqual(out.scalars, [11, 22, 33])

    def test_int_results_are_python_ints(self):
        a = ShapedArray((2,), [1, 2])
        out = a + a
        self.assertEqual(out.scalars, [2, 4])
        self.assertIsInstance(out.scalars[0], int)

    def test_incompatible_shapes_on_both_backends(self):
        for backend in ("python", "numpy"):
            a = ShapedArray((2, 3), range(6), backend=backend)
            with self.assertRaises(ShapeMismatchError):
                a + ShapedArray((4,), range(4))

    def test_division_by_zero_follows_backend(self):
        with self.assertRaises(ZeroDivisionError):
            ShapedArray((1,), [1.0], backend="python") / 0
        with np.errstate(divide="ignore"):
            out = ShapedArray((1,), [1.0], backend="numpy") / 0
        self.assertEqual(out.scalars, [float("inf")])


class TestBackendsAgreeOnPythonScalars(unittest.TestCase):
    def _both(self, shape, scalars):
        return (
            ShapedArray(shape, scalars, backend="python"),
            ShapedArray(shape, scalars, backend="numpy"),
        )

    def test_large_ints_do_not_wrap(self):
        for a in self._both((2,), [2**62, 2**70]):
            self.assertEqual((a + a).scalars, [2**63, 2**71])
            self.assertEqual((a * 4).scalars, [2**64, 2**72])
            self.assertEqual((0 - a).scalars, [-(2**62), -(2**70)])

    def test_bools_add_as_ints(self):
        for a in self._both((2,), [True, False]):
            self.assertEqual((a + a).scalars, [2, 0])
            self.assertEqual((a * a).scalars, [1, 0])

    def test_mixed_int_float_keeps_python_types(self):
        py, nu = self._both((2,), [1, 2.5])
        self.assertEqual((py + 0).scalars, (nu + 0).scalars)
        self.assertIs(type((nu + 0).scalars[0]), int)

    def test_ints_true_divide_like_python(self):
        for a in self._both((3,), [1, 7, -9]):
            self.assertEqual((a / 3).scalars, [1 / 3, 7 / 3, -9 / 3])
        py, nu = self._both((1,), [10**20 + 1])
        self.assertEqual((nu / 7).scalars, (py / 7).scalars)

    def test_exact_results_match_sum(self):
        a = ShapedArray((2,), [2**62, 2**62])
        self.assertEqual((a[0:1] + a[1:2]).scalars, [a.sum().scalar])


if __name__ == "__main__":
    unittest.main()
