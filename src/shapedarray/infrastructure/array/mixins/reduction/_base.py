"""
Reduction mixin defining the public shaped array reduction API.

This module declares :class:`ArrayMixinReduction`, an abstract mixin that
specifies the *interface and semantics* of the axis-wise reductions
(`sum`, `product`, `mean`) shared by arrays and views.

The mixin itself does not implement any numerical logic. Concrete
implementations are registered via the array control-path manager and all
fold through the `reduce_forward` kernel.
"""

from typing import Optional
from abc import ABC

from .....domain._shaped_array import IShapedArray, Axes


class ArrayMixinReduction(ABC):
    """
    Abstract mixin defining reduction operations for shaped arrays.

    Axis semantics
    --------------
    - ``axis=None`` (default) reduces over every scalar. The result has shape
      ``()``, or ``(1,)`` with ``keepdims=True``.
    - ``axis`` may be an int or a sequence of ints, possibly negative. Axes are
      validated jointly; duplicates after normalization are rejected.
    - Reducing every axis is treated like ``axis=None``.
    - Otherwise the result keeps the remaining dimensions, with reduced ones
      either removed or kept as size 1 (``keepdims=True``).
    - Scalars must satisfy `Numeric` for `sum` and `product`, and
      `SupportsTrueDivision` for `mean`. They are never coerced, so
      `Fraction` or `Decimal` scalars fold with their own operators.

    Raises
    ------
    AxisError
        If an axis is out of range or duplicated.
    """

    def sum(
        self: IShapedArray, axis: Optional[Axes] = None, keepdims: bool = False
    ) -> IShapedArray:
        """
        Sum scalars over the given axes (identity ``0``, operator ``+``).
        """

    def product(
        self: IShapedArray, axis: Optional[Axes] = None, keepdims: bool = False
    ) -> IShapedArray:
        """
        Multiply scalars over the given axes (identity ``1``, operator ``*``).
        """

    def mean(
        self: IShapedArray, axis: Optional[Axes] = None, keepdims: bool = False
    ) -> IShapedArray:
        """
        Arithmetic mean over the given axes.

        Computed as the sum over the axes divided by the product of the
        input sizes of the reduced axes (the full scalar count for a
        global reduction).

        Notes
        -----
        Averaging over zero elements emits a `RuntimeWarning` and yields NaN
        cells.
        """
