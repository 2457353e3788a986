"""
Unary mixin defining elementwise math (VectorMath) on shaped arrays.

Every method here maps each scalar through one math function and returns a
new array of the same shape on the same backend. Implementations are selected
per backend:

- ``Backend("python")``: `math`-module semantics; out-of-domain inputs raise
  (e.g. ``sqrt(-1)`` raises `ValueError`).
- ``Backend("numpy")``: NumPy ufunc semantics on float buffers; out-of-domain
  inputs produce ``nan`` / ``-inf``. Buffers that ``float64`` cannot hold
  exactly (bools, large ints, other scalar types) use the python kernels.
"""

from abc import ABC

from .....domain._shaped_array import IShapedArray


class ArrayMixinUnary(ABC):
    """
    Mixin declaring elementwise unary operations for shaped arrays.

    Raises
    ------
    BackendNotSupportedError
        If no control path is registered for the array's backend.
    """

    def sqrt(self: IShapedArray) -> IShapedArray:
        """Elementwise square root."""

    def exp(self: IShapedArray) -> IShapedArray:
        """Elementwise natural exponential."""

    def log(self: IShapedArray) -> IShapedArray:
        """Elementwise natural logarithm."""

    def sin(self: IShapedArray) -> IShapedArray:
        """Elementwise sine (radians)."""

    def cos(self: IShapedArray) -> IShapedArray:
        """Elementwise cosine (radians)."""

    def tanh(self: IShapedArray) -> IShapedArray:
        """Elementwise hyperbolic tangent."""

    def abs(self: IShapedArray) -> IShapedArray:
        """Elementwise absolute value."""

    def __neg__(self: IShapedArray) -> IShapedArray:
        """Elementwise negation (unary minus)."""

    def __abs__(self: IShapedArray) -> IShapedArray:
        return self.abs()
