"""
Shaped array memory / shape-transform mixin.

This module defines `ArrayMixinMemory`, the interface of every operation that
re-lays out scalars without computing new values:

- reshaping: `reshape`, `reshaped_like`, `flatten`
- rank changes: `expand_dims`, `squeeze`
- partitioning: `split`, `unstack`
- copies and interop: `copy`, `with_backend`, `to_numpy`

All of them return fresh owning arrays; none aliases the source buffer.
Stacking, the inverse of `unstack`, is a static constructor on `ShapedArray`.
"""

from typing import Any, List, Optional, Union
from abc import ABC

import numpy as np

from .....domain._shaped_array import IShapedArray, Axes
from .....domain.backend._backend import Backend


class ArrayMixinMemory(ABC):
    """
    Mixin declaring shape-transform and copy operations for shaped arrays.

    Concrete implementations are registered for every backend by the modules
    of this package; the layout arithmetic never depends on the backend.
    """

    def reshape(self: IShapedArray, *shape: Any) -> IShapedArray:
        """
        Return a copy with a new shape holding the same row-major scalars.

        Parameters
        ----------
        *shape : int or Sequence[int]
            New shape, given as varargs (``a.reshape(3, -1)``) or as one
            sequence (``a.reshape((3, -1))``). At most one size may be ``-1``;
            it is inferred from the scalar count.

        Raises
        ------
        ShapeMismatchError
            If more than one ``-1`` is given, a size is otherwise negative, the
            placeholder cannot be inferred, or the scalar counts differ.
        """

    def reshaped_like(self: IShapedArray, other: IShapedArray) -> IShapedArray:
        """
        Reshape to `other.shape`.
        """

    def flatten(self: IShapedArray) -> IShapedArray:
        """
        Reshape to rank 1 (``reshape(-1)``).
        """

    def expand_dims(self: IShapedArray, axes: Axes) -> IShapedArray:
        """
        Insert size-1 dimensions.

        Axes are applied in order, each against the shape produced by the
        previous insertion, and must lie in ``[-(rank + 1), rank]`` of that
        shape. A negative axis counts from the end of the grown shape.

        Raises
        ------
        AxisError
            If an axis is out of range for the current shape.
        """

    def squeeze(self: IShapedArray, axes: Optional[Axes] = None) -> IShapedArray:
        """
        Remove size-1 dimensions.

        With no axes, every size-1 dimension is removed. Named axes are
        validated jointly and each must have size 1.

        Raises
        ------
        AxisError
            If a named axis is out of range or duplicated.
        ShapeMismatchError
            If a named axis does not have size 1.
        """

    def split(self: IShapedArray, count: int, axis: int = 0) -> List[IShapedArray]:
        """
        Split into `count` equal parts along `axis`.

        Raises
        ------
        AxisError
            If `axis` is out of range.
        UnevenSplitError
            If `count` is not positive or does not divide ``shape[axis]``.
        """

    def unstack(self: IShapedArray, axis: int = 0) -> List[IShapedArray]:
        """
        Split into ``shape[axis]`` arrays of rank ``rank - 1``.

        ``ShapedArray.stack(a.unstack(axis), axis) == a`` for every valid axis.

        Raises
        ------
        AxisError
            If `axis` is out of range (always the case for rank 0).
        """

    def copy(self: IShapedArray) -> IShapedArray:
        """
        Return an owning deep-buffer copy on the same backend.
        """

    def with_backend(self: IShapedArray, backend: Union[str, Backend]) -> IShapedArray:
        """
        Return an owning copy on another backend.
        """

    def to_numpy(self: IShapedArray, dtype: Optional[Any] = None) -> np.ndarray:
        """
        Return a new C-contiguous NumPy array with the same shape and scalars.
        """
