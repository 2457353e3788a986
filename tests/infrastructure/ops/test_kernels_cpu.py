from __future__ import annotations

import operator
import unittest

import numpy as np

from shapedarray import AxisError, ShapeMismatchError, UnevenSplitError
from shapedarray.infrastructure.ops import vector_math_numpy, vector_math_python
from shapedarray.infrastructure.ops.broadcast_cpu import broadcast_forward, broadcast_shapes
from shapedarray.infrastructure.ops.reduce_cpu import reduce_forward
from shapedarray.infrastructure.ops.stack_cpu import split_forward, stack_forward, unstack_forward


class TestReduceForward(unittest.TestCase):
    def setUp(self):
        self.x = np.arange(24).reshape(2, 3, 4)
        self.buf = self.x.ravel().tolist()

    def test_matches_numpy_sum(self):
        for axes in ((0,), (1,), (2,), (0, 2), (-1, 1)):
            for keepdims in (False, True):
                shape, out = reduce_forward(self.buf, (2, 3, 4), operator.add, 0, axes, keepdims)
                expected = self.x.sum(axis=axes, keepdims=keepdims)
                self.assertEqual(shape, expected.shape)
                self.assertEqual(out, expected.ravel().tolist())

    def test_global_fold(self):
        self.assertEqual(reduce_forward(self.buf, (2, 3, 4), operator.add, 0), ((), [276]))
        self.assertEqual(
            reduce_forward(self.buf, (2, 3, 4), operator.add, 0, (0, 1, 2), True),
            ((1,), [276]),
        )

    def test_fold_order_is_op_of_element_and_accumulator(self):
        _, out = reduce_forward(["a", "b", "c"], (3,), operator.add, "")
        self.assertEqual(out, ["cba"])

    def test_duplicate_axes(self):
        with self.assertRaises(AxisError):
            reduce_forward(self.buf, (2, 3, 4), operator.add, 0, (1, -2))


class TestStackKernels(unittest.TestCase):
    def test_stack_matches_numpy(self):
        xs = [np.arange(6).reshape(2, 3) + 10 * i for i in range(4)]
        bufs = [x.ravel().tolist() for x in xs]
        for axis in range(3):
            shape, out = stack_forward(bufs, (2, 3), axis)
            expected = np.stack(xs, axis=axis)
            self.assertEqual(shape, expected.shape)
            self.assertEqual(out, expected.ravel().tolist())

    def test_unstack_matches_numpy(self):
        x = np.arange(24).reshape(2, 3, 4)
        for axis in range(3):
            parts = unstack_forward(x.ravel().tolist(), (2, 3, 4), axis)
            expected = np.moveaxis(x, axis, 0)
            self.assertEqual([p[1] for p in parts], [e.ravel().tolist() for e in expected])
            self.assertEqual(parts[0][0], expected.shape[1:])

    def test_split(self):
        parts = split_forward(list(range(12)), (3, 4), 2, 1)
        self.assertEqual(parts[0], ((3, 2), [0, 1, 4, 5, 8, 9]))
        self.assertEqual(parts[1], ((3, 2), [2, 3, 6, 7, 10, 11]))
        with self.assertRaises(UnevenSplitError) as ctx:
            split_forward(list(range(12)), (3, 4), 3, 1)
        self.assertEqual((ctx.exception.count, ctx.exception.size), (3, 4))


class TestBroadcastKernels(unittest.TestCase):
    def test_broadcast_shapes(self):
        self.assertEqual(broadcast_shapes((4, 1), (3,)), (4, 3))
        self.assertEqual(broadcast_shapes((3, 1, 5), (5, 5)), (3, 5, 5))
        self.assertEqual(broadcast_shapes((), (2, 2)), (2, 2))
        self.assertEqual(broadcast_shapes((0, 1), (1, 4)), (0, 4))
        with self.assertRaises(ShapeMismatchError):
            broadcast_shapes((2, 3), (3, 2))

    def test_broadcast_forward_matches_numpy(self):
        a = np.arange(6).reshape(2, 1, 3)
        b = np.arange(4).reshape(4, 1)
        shape, out = broadcast_forward(
            a.ravel().tolist(), a.shape, b.ravel().tolist(), b.shape, operator.sub
        )
        self.assertEqual(shape, (2, 4, 3))
        self.assertEqual(out, (a - b).ravel().tolist())


class TestVectorMathKernels(unittest.TestCase):
    def test_unary_kernels_write_into_destination(self):
        src = [1.0, 4.0, 9.0]
        for module in (vector_math_python, vector_math_numpy):
            dst = [None] * 3
            module.unary_forward("sqrt", dst, src, 3)
            self.assertEqual(dst, [1.0, 2.0, 3.0])

    def test_partial_count(self):
        for module in (vector_math_python, vector_math_numpy):
            dst = [None] * 3
            module.unary_forward("neg", dst, [1, 2, 3], 2)
            self.assertEqual(dst, [-1, -2, None])

    def test_binary_kernels_agree(self):
        a = [1.0, 2.0, 3.0, 4.0]
        b = [2.0, 4.0]
        for op_name in ("add", "sub", "mul", "truediv"):
            py = vector_math_python.binary_forward(op_name, a, (2, 2), b, (2,))
            nu = vector_math_numpy.binary_forward(op_name, a, (2, 2), b, (2,))
            self.assertEqual(py, nu)

    def test_numpy_kernels_vectorize_only_exact_float_buffers(self):
        self.assertTrue(vector_math_numpy.can_vectorize("add", [1.5], [2.0]))
        self.assertFalse(vector_math_numpy.can_vectorize("add", [1.5], [2]))
        self.assertFalse(vector_math_numpy.can_vectorize("neg", [True]))
        self.assertTrue(vector_math_numpy.can_vectorize("truediv", [1], [2**53]))
        self.assertFalse(vector_math_numpy.can_vectorize("truediv", [1], [2**53 + 1]))
        self.assertTrue(vector_math_numpy.can_vectorize("sqrt", [4, 9.0]))
        self.assertFalse(vector_math_numpy.can_vectorize("sqrt", [True]))

    def test_numpy_kernels_fall_back_without_wrapping(self):
        shape, out = vector_math_numpy.binary_forward("add", [2**62], (1,), [2**62], (1,))
        self.assertEqual((shape, out), ((1,), [2**63]))
        dst = [None]
        vector_math_numpy.unary_forward("neg", dst, [-(2**63)], 1)
        self.assertEqual(dst, [2**63])

    def test_unknown_op(self):
        for module in (vector_math_python, vector_math_numpy):
            with self.assertRaises(ValueError):
                module.unary_forward("cbrt", [None], [1.0], 1)
            with self.assertRaises(ValueError):
                module.binary_forward("pow", [1], (1,), [1], (1,))


if __name__ == "__main__":
    unittest.main()
