"""
Shape and stride arithmetic for row-major shaped arrays.

This module contains the pure index-mapping functions shared by the array,
view, reduction, shape-transform and broadcasting code:

- `shape_size` / `validate_shape`
- `strides_for_shape`
- `ravel_multi_index` / `unravel_index`
- `is_valid_axis` / `normalize_axis` / `normalize_axes`
- `iter_multi_indices`

All functions are stateless. Shapes are tuples of non-negative ints; the empty
tuple denotes a rank-0 (scalar) shape holding exactly one element.

Notes
-----
- Negative coordinates are never wrapped. A negative component of a
  multi-index is out of bounds.
- Axis normalization follows the usual convention: an axis is valid iff
  ``-rank <= axis < rank`` and a negative axis maps to ``axis + rank``.
"""

from __future__ import annotations

import itertools
import operator
from collections import abc
from functools import reduce
from typing import Iterable, Iterator, Sequence, Tuple, Union

from ...domain._errors import AxisError, ConstructionError, IndexOutOfBoundsError

Shape = Tuple[int, ...]


def shape_size(shape: Sequence[int]) -> int:
    """
    Return the number of elements described by `shape`.

    Parameters
    ----------
    shape : Sequence[int]
        Sizes per dimension.

    Returns
    -------
    int
        Product of the sizes; 1 for the rank-0 shape ``()``.
    """
    return reduce(operator.mul, shape, 1)


def validate_shape(shape: Iterable[int]) -> Shape:
    """
    Coerce a shape-like iterable into a validated shape tuple.

    Parameters
    ----------
    shape : Iterable[int]
        Candidate sizes. Each must be an integer (``bool`` excluded) and
        non-negative.

    Returns
    -------
    tuple[int, ...]
        The validated shape.

    Raises
    ------
    ConstructionError
        If `shape` is not iterable, or a size is negative or not an integer.
    """
    try:
        dims = tuple(shape)
    except TypeError:
        raise ConstructionError(f"shape must be a sequence of ints, got {shape!r}") from None

    out = []
    for d in dims:
        if isinstance(d, bool):
            raise ConstructionError(f"shape sizes must be integers, got {d!r} in {dims!r}")
        try:
            d = operator.index(d)
        except TypeError:
            raise ConstructionError(
                f"shape sizes must be integers, got {d!r} in {dims!r}"
            ) from None
        if d < 0:
            raise ConstructionError(f"shape sizes must be non-negative, got {dims!r}")
        out.append(d)
    return tuple(out)


def strides_for_shape(shape: Sequence[int]) -> Shape:
    """
    Compute row-major strides (in elements) for `shape`.

    The stride of dimension ``i`` is the product of the sizes strictly after
    ``i``; the last dimension has stride 1.

    Examples
    --------
    >>> strides_for_shape((9, 8, 7, 6))
    (336, 42, 6, 1)
    >>> strides_for_shape(())
    ()
    """
    strides = [0] * len(shape)
    acc = 1
    for i in range(len(shape) - 1, -1, -1):
        strides[i] = acc
        acc *= shape[i]
    return tuple(strides)


def ravel_multi_index(multi_index: Sequence[int], shape: Sequence[int]) -> int:
    """
    Convert a coordinate tuple into a row-major linear index.

    Parameters
    ----------
    multi_index : Sequence[int]
        One coordinate per dimension.
    shape : Sequence[int]
        Shape the coordinates refer to.

    Returns
    -------
    int
        ``sum(i * stride)`` over all dimensions.

    Raises
    ------
    IndexOutOfBoundsError
        If the number of coordinates differs from the rank or any coordinate
        lies outside ``[0, shape[d])``.
    """
    if len(multi_index) != len(shape):
        raise IndexOutOfBoundsError(
            tuple(multi_index),
            shape,
            f"index {tuple(multi_index)!r} has {len(multi_index)} components "
            f"but shape {tuple(shape)!r} has rank {len(shape)}",
        )
    linear = 0
    acc = 1
    for i in range(len(shape) - 1, -1, -1):
        c = multi_index[i]
        if c < 0 or c >= shape[i]:
            raise IndexOutOfBoundsError(tuple(multi_index), shape)
        linear += c * acc
        acc *= shape[i]
    return linear


def unravel_index(linear_index: int, shape: Sequence[int]) -> Shape:
    """
    Convert a row-major linear index into a coordinate tuple.

    The most significant dimension is produced first by successive division
    and modulus with the strides of `shape`.

    Raises
    ------
    IndexOutOfBoundsError
        If `linear_index` is outside ``[0, shape_size(shape))``. The error
        carries the offending index and the shape.

    Examples
    --------
    >>> unravel_index(1621, (6, 7, 8, 9))
    (3, 1, 4, 1)
    """
    size = shape_size(shape)
    if linear_index < 0 or linear_index >= size:
        raise IndexOutOfBoundsError(linear_index, shape)
    out = []
    remainder = linear_index
    for stride in strides_for_shape(shape):
        q, remainder = divmod(remainder, stride)
        out.append(q)
    return tuple(out)


def is_valid_axis(axis: int, rank: int) -> bool:
    """
    Return True iff ``-rank <= axis < rank``.
    """
    return -rank <= axis < rank


def normalize_axis(axis: int, rank: int) -> int:
    """
    Normalize a possibly negative axis into ``[0, rank)``.

    Raises
    ------
    AxisError
        If the axis is out of range for `rank`.
    """
    if not is_valid_axis(axis, rank):
        raise AxisError((axis,), rank)
    return axis + rank if axis < 0 else axis


def normalize_axes(axes: Union[int, Iterable[int]], rank: int) -> Shape:
    """
    Normalize a collection of axes and reject duplicates.

    Parameters
    ----------
    axes : int or Iterable[int]
        Axis or axes, possibly negative.
    rank : int
        Rank the axes refer to.

    Returns
    -------
    tuple[int, ...]
        Normalized axes in the order given.

    Raises
    ------
    AxisError
        If any axis is out of range or two axes normalize to the same value.
        The error names the axes exactly as given.
    """
    if not isinstance(axes, abc.Iterable):
        given = (operator.index(axes),)
    else:
        given = tuple(operator.index(a) for a in axes)
    normalized = []
    for a in given:
        if not is_valid_axis(a, rank):
            raise AxisError(given, rank)
        normalized.append(a + rank if a < 0 else a)
    if len(set(normalized)) != len(normalized):
        raise AxisError(given, rank, f"axes {list(given)} contain duplicates for rank {rank}")
    return tuple(normalized)


def as_axis_tuple(axes: Union[None, int, Iterable[int]]) -> Shape:
    """
    Coerce ``None``, a single axis or an iterable of axes into a tuple.

    ``None`` becomes the empty tuple. No range validation is performed.
    """
    if axes is None:
        return ()
    if not isinstance(axes, abc.Iterable):
        return (operator.index(axes),)
    try:
        return tuple(operator.index(a) for a in axes)
    except TypeError:
        raise TypeError(f"axes must be an int or a sequence of ints, got {axes!r}") from None


def iter_multi_indices(shape: Sequence[int]) -> Iterator[Shape]:
    """
    Enumerate every coordinate of `shape` in row-major order.

    The outermost dimension advances slowest. A rank-0 shape yields a single
    empty tuple; a shape containing a zero size yields nothing.
    """
    return itertools.product(*(range(d) for d in shape))
