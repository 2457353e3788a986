import unittest

from shapedarray.domain._errors import (
    ShapedArrayError,
    ConstructionError,
    IndexOutOfBoundsError,
    AxisError,
    ShapeMismatchError,
    UnevenSplitError,
    BackendNotSupportedError,
)


class TestErrors(unittest.TestCase):
    def test_errors_also_derive_from_builtins(self):
        self.assertTrue(issubclass(ConstructionError, ValueError))
        self.assertTrue(issubclass(IndexOutOfBoundsError, IndexError))
        self.assertTrue(issubclass(AxisError, ValueError))
        self.assertTrue(issubclass(ShapeMismatchError, ValueError))
        self.assertTrue(issubclass(UnevenSplitError, ValueError))
        self.assertTrue(issubclass(BackendNotSupportedError, RuntimeError))
        for err in (
            ConstructionError,
            IndexOutOfBoundsError,
            AxisError,
            ShapeMismatchError,
            UnevenSplitError,
            BackendNotSupportedError,
        ):
            self.assertTrue(issubclass(err, ShapedArrayError))

    def test_index_error_carries_index_and_shape(self):
        e = IndexOutOfBoundsError(7, [2, 3])
        self.assertEqual(e.index, 7)
        self.assertEqual(e.shape, (2, 3))
        self.assertIn("7", str(e))
        self.assertIn("(2, 3)", str(e))

    def test_axis_error_carries_axes_and_rank(self):
        e = AxisError([0, 5], 3)
        self.assertEqual(e.axes, (0, 5))
        self.assertEqual(e.rank, 3)
        self.assertIn("rank 3", str(e))

    def test_shape_mismatch_keeps_shapes(self):
        e = ShapeMismatchError("bad", [2, 3], (3,))
        self.assertEqual(e.shapes, ((2, 3), (3,)))
        self.assertEqual(str(e), "bad")

    def test_uneven_split_message(self):
        e = UnevenSplitError(4, 6)
        self.assertEqual((e.count, e.size), (4, 6))
        self.assertIn("6", str(e))

    def test_backend_not_supported_message(self):
        e = BackendNotSupportedError("sqrt", "python")
        self.assertEqual(e.op, "sqrt")
        self.assertIn("python", str(e))


if __name__ == "__main__":
    unittest.main()
