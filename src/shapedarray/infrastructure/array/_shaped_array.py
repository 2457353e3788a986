"""
Concrete owning shaped array.

This module provides `ShapedArray`, the owning implementation of the
domain-level `IShapedArray` protocol. A shaped array stores:

- a flat, row-major Python list of scalars (exclusively owned),
- a shape tuple whose product equals the buffer length,
- a `Backend` descriptor selecting the elementwise kernels.

Design notes
------------
- Subscripting returns `ShapedArraySlice` views sharing this buffer; every
  other operation (reductions, shape transforms, broadcasting, unary math)
  returns a fresh `ShapedArray`.
- Scalars can be any Python objects. Operations only require the
  capabilities they use (``+`` for `sum`, ``*`` for `product`, ...).
- Arrays are mutable and therefore unhashable.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from ...domain._shaped_array import IShapedArray
from ...domain._errors import AxisError, ConstructionError, ShapeMismatchError
from ...domain.backend._backend import Backend, DEFAULT_BACKEND
from ..ops.stack_cpu import stack_forward
from ..shape._shape_math import shape_size, validate_shape
from ._shape_and_indexing import ArrayShapeAndIndexingMixin
from .mixins.reduction import ArrayMixinReduction
from .mixins.memory import ArrayMixinMemory
from .mixins.arithmetic import ArrayMixinArithmetic
from .mixins.unary import ArrayMixinUnary

BackendLike = Union[str, Backend]


class ShapedArray(
    ArrayShapeAndIndexingMixin,
    ArrayMixinReduction,
    ArrayMixinMemory,
    ArrayMixinArithmetic,
    ArrayMixinUnary,
    IShapedArray,
):
    """
    Dense, row-major, fixed-rank array over a flat scalar buffer.

    Parameters
    ----------
    shape : Sequence[int]
        Sizes per dimension. ``()`` denotes a rank-0 (scalar) array.
    scalars : Iterable[Any]
        Row-major scalars. Copied into a new buffer; the count must equal the
        product of `shape`.
    backend : str or Backend, optional
        Backend for elementwise kernels. Defaults to `DEFAULT_BACKEND`.

    Raises
    ------
    ConstructionError
        If `shape` is invalid or the scalar count does not match it.

    Examples
    --------
    >>> a = ShapedArray((2, 3), range(6))
    >>> a[1].scalars
    [3, 4, 5]
    """

    def __init__(
        self,
        shape: Sequence[int],
        scalars: Iterable[Any],
        backend: Optional[BackendLike] = None,
    ) -> None:
        self._shape = validate_shape(shape)
        self._buffer = list(scalars)
        if len(self._buffer) != shape_size(self._shape):
            raise ConstructionError(
                f"the scalar count ({len(self._buffer)}) does not match the shape "
                f"{self._shape!r} ({shape_size(self._shape)} scalars)"
            )
        self._backend = DEFAULT_BACKEND if backend is None else Backend(backend)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def repeating(
        cls, value: Any, shape: Sequence[int], backend: Optional[BackendLike] = None
    ) -> "ShapedArray":
        """
        Array of `shape` whose every scalar is `value`.
        """
        shape = validate_shape(shape)
        return cls(shape, [value] * shape_size(shape), backend=backend)

    @classmethod
    def from_scalar(cls, value: Any, backend: Optional[BackendLike] = None) -> "ShapedArray":
        """
        Rank-0 array holding `value`.
        """
        return cls((), [value], backend=backend)

    @classmethod
    def from_nested(cls, nested: Any, backend: Optional[BackendLike] = None) -> "ShapedArray":
        """
        Build an array from nested lists/tuples by recursively stacking.

        Each nesting level becomes one dimension; any other object is a
        scalar. An empty list becomes a dimension of size 0. Arrays and
        views found inside `nested` are stacked as they are.

        Raises
        ------
        ConstructionError
            If the nesting is ragged.

        Examples
        --------
        >>> ShapedArray.from_nested([[1, 2, 3], [4, 5, 6]]).shape
        (2, 3)
        """

        def build(value: Any) -> IShapedArray:
            if isinstance(value, ArrayShapeAndIndexingMixin):
                return value
            if isinstance(value, (list, tuple)):
                if not value:
                    return cls((0,), [], backend=backend)
                return cls.stack([build(v) for v in value])
            return cls((), [value], backend=backend)

        try:
            out = build(nested)
        except ShapeMismatchError as e:
            raise ConstructionError(f"nested sequence is ragged: {e}") from e
        return cls(out.shape, out.scalars, backend=backend)

    @classmethod
    def from_numpy(cls, arr: Any, backend: Optional[BackendLike] = None) -> "ShapedArray":
        """
        Copy a NumPy array (or anything `np.asarray` accepts) into a new
        shaped array of the same shape. Scalars become Python scalars.
        """
        a = np.asarray(arr)
        return cls(a.shape, a.reshape(-1).tolist(), backend=backend)

    @staticmethod
    def stack(arrays: Sequence[IShapedArray], axis: int = 0) -> "ShapedArray":
        """
        Stack equally shaped arrays along a new dimension.

        Parameters
        ----------
        arrays : Sequence[IShapedArray]
            Arrays or views, all of the same shape.
        axis : int, optional
            Position of the new dimension in ``[0, rank]``. Negative values
            count from the end of the *output* shape. Defaults to 0.

        Returns
        -------
        ShapedArray
            Array of shape ``shape[:axis] + (len(arrays),) + shape[axis:]`` on
            the backend of the first array.

        Raises
        ------
        ConstructionError
            If `arrays` is empty.
        ShapeMismatchError
            If the shapes are not all identical.
        AxisError
            If `axis` is outside ``[-(rank + 1), rank]``.
        """
        arrays = list(arrays)
        if not arrays:
            raise ConstructionError("cannot stack an empty list of arrays")

        shape = arrays[0].shape
        for a in arrays[1:]:
            if a.shape != shape:
                raise ShapeMismatchError(
                    f"all arrays must have the same shape to be stacked; "
                    f"got {shape!r} and {a.shape!r}",
                    shape,
                    a.shape,
                )

        rank = len(shape)
        if not -(rank + 1) <= axis <= rank:
            raise AxisError(
                (axis,),
                rank + 1,
                f"stack axis {axis} is out of range [{-(rank + 1)}, {rank}] "
                f"for arrays of shape {shape!r}",
            )
        if axis < 0:
            axis += rank + 1

        out_shape, out = stack_forward([a.scalars for a in arrays], shape, axis)
        return ShapedArray(out_shape, out, backend=arrays[0].backend)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def scalar_range(self) -> range:
        """
        The whole buffer.
        """
        return range(0, len(self._buffer))

    def _locate(self) -> Tuple["ShapedArray", Tuple[int, ...], Optional[range]]:
        return self, (), None
