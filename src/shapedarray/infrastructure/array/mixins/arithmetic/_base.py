"""
Arithmetic mixin defining broadcasting elementwise operations.

This module declares :class:`ArrayMixinArithmetic`, which specifies:

- `broadcasting_op(other, op)`: apply an arbitrary binary callable over the
  broadcast of two operands (backend-independent reference kernel).
- The arithmetic operators ``+ - * /`` and their reflected forms, dispatched
  per backend to the python or NumPy elementwise kernels.

Operands
--------
The other operand may be an array or view, a NumPy array, or a bare Python
scalar (treated as a rank-0 array). The result always lives on the backend of
the array the operator was called on.
"""

from typing import Any, Callable, List, Tuple
from abc import ABC

import numpy as np

from .....domain._shaped_array import IShapedArray


def as_operand(value: Any) -> Tuple[Tuple[int, ...], List[Any]]:
    """
    Return ``(shape, scalars)`` for any supported operand.
    """
    from ..._shape_and_indexing import ArrayShapeAndIndexingMixin

    if isinstance(value, ArrayShapeAndIndexingMixin):
        return value.shape, value.scalars
    if isinstance(value, np.ndarray):
        return tuple(value.shape), value.reshape(-1).tolist()
    return (), [value]


class ArrayMixinArithmetic(ABC):
    """
    Mixin declaring broadcasting elementwise operations for shaped arrays.

    Raises
    ------
    ShapeMismatchError
        From every method, when the operand shapes cannot be broadcast.
    """

    # Make NumPy defer to the reflected operators below instead of
    # broadcasting over the array as an opaque object.
    __array_ufunc__ = None

    def broadcasting_op(
        self: IShapedArray, other: Any, op: Callable[[Any, Any], Any]
    ) -> IShapedArray:
        """
        Apply ``op(self_elem, other_elem)`` over the broadcast of both operands.

        Shapes are aligned on trailing dimensions; each aligned pair of sizes
        must be equal or contain a 1, and the output takes the size that is not 1.

        Examples
        --------
        A ``(4, 1)`` array holding ``0, 10, 20, 30`` combined with a ``(3,)``
        array holding ``0, 1, 2`` by ``+`` yields a ``(4, 3)`` array
        ``[0, 1, 2, 10, 11, 12, 20, 21, 22, 30, 31, 32]``.
        """

    def __add__(self: IShapedArray, other: Any) -> IShapedArray:
        """Elementwise ``self + other`` with broadcasting."""

    def __radd__(self: IShapedArray, other: Any) -> IShapedArray:
        """Elementwise ``other + self`` with broadcasting."""

    def __sub__(self: IShapedArray, other: Any) -> IShapedArray:
        """Elementwise ``self - other`` with broadcasting."""

    def __rsub__(self: IShapedArray, other: Any) -> IShapedArray:
        """Elementwise ``other - self`` with broadcasting."""

    def __mul__(self: IShapedArray, other: Any) -> IShapedArray:
        """Elementwise ``self * other`` with broadcasting."""

    def __rmul__(self: IShapedArray, other: Any) -> IShapedArray:
        """Elementwise ``other * self`` with broadcasting."""

    def __truediv__(self: IShapedArray, other: Any) -> IShapedArray:
        """
        Elementwise ``self / other`` with broadcasting.

        Division by zero follows backend semantics: `ZeroDivisionError` on the
        python backend, ``inf``/``nan`` on the NumPy backend for operands it
        vectorizes.
        """

    def __rtruediv__(self: IShapedArray, other: Any) -> IShapedArray:
        """Elementwise ``other / self`` with broadcasting."""
