"""
CPU reference kernels for stacking, unstacking and splitting flat buffers.

All kernels operate on flat row-major Python lists and return new lists; they
never alias their inputs.

Offset arithmetic
-----------------
Let ``n`` be the number of stacked arrays, each of shape ``S``, stacked along
``axis``. With ``block = prod(S[axis:])``, scalar ``j`` of array ``i`` lands at

    j % block + i * block + (j // block) * block * n

For unstacking an array of shape ``S`` along ``axis`` with
``after = prod(S[axis+1:])`` and ``at = prod(S[axis:])``, scalar ``j`` of part
``i`` is read from

    j % after + i * after + (j // after) * at

The two mappings are inverses of each other for every axis.
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from ..shape._shape_math import (
    iter_multi_indices,
    ravel_multi_index,
    shape_size,
)
from ...domain._errors import UnevenSplitError

Part = Tuple[Tuple[int, ...], List[Any]]


def stack_forward(
    buffers: Sequence[Sequence[Any]],
    shape: Tuple[int, ...],
    axis: int,
) -> Part:
    """
    Stack equally shaped buffers along a new dimension.

    Parameters
    ----------
    buffers : Sequence[Sequence[Any]]
        Flat row-major buffers, all of shape `shape`.
    shape : tuple[int, ...]
        Common shape of the inputs.
    axis : int
        Position of the new dimension, already normalized to ``[0, rank]``.

    Returns
    -------
    tuple[tuple[int, ...], list[Any]]
        ``shape[:axis] + (n,) + shape[axis:]`` and the stacked buffer.
    """
    n = len(buffers)
    block = shape_size(shape[axis:])
    out: List[Any] = [None] * (n * shape_size(shape))
    for i, buf in enumerate(buffers):
        base = i * block
        for j, x in enumerate(buf):
            out[j % block + base + (j // block) * block * n] = x
    return shape[:axis] + (n,) + shape[axis:], out


def unstack_forward(
    scalars: Sequence[Any],
    shape: Tuple[int, ...],
    axis: int,
) -> List[Part]:
    """
    Split a buffer into ``shape[axis]`` parts of rank ``rank - 1``.

    Parameters
    ----------
    scalars : Sequence[Any]
        Flat row-major input buffer.
    shape : tuple[int, ...]
        Input shape (rank >= 1).
    axis : int
        Axis to remove, already normalized to ``[0, rank)``.

    Returns
    -------
    list[tuple[tuple[int, ...], list[Any]]]
        One ``(shape, buffer)`` pair per index along `axis`.
    """
    after = shape_size(shape[axis + 1 :])
    at = shape_size(shape[axis:])
    part_shape = shape[:axis] + shape[axis + 1 :]
    part_size = shape_size(part_shape)

    parts: List[Part] = []
    for i in range(shape[axis]):
        offset = i * after
        parts.append(
            (
                part_shape,
                [scalars[j % after + offset + (j // after) * at] for j in range(part_size)],
            )
        )
    return parts


def split_forward(
    scalars: Sequence[Any],
    shape: Tuple[int, ...],
    count: int,
    axis: int,
) -> List[Part]:
    """
    Split a buffer into `count` equal parts along `axis`.

    Each part keeps the input rank; its size along `axis` is
    ``shape[axis] // count``. Coordinates of each part are enumerated in
    row-major order and mapped back to the input through `ravel_multi_index`.

    Raises
    ------
    UnevenSplitError
        If `count` is not positive or does not divide ``shape[axis]``.
    """
    size = shape[axis]
    if count <= 0 or size % count != 0:
        raise UnevenSplitError(count, size)

    step = size // count
    part_shape = shape[:axis] + (step,) + shape[axis + 1 :]

    parts: List[Part] = []
    for k in range(count):
        shift = k * step
        buf = []
        for idx in iter_multi_indices(part_shape):
            src = idx[:axis] + (idx[axis] + shift,) + idx[axis + 1 :]
            buf.append(scalars[ravel_multi_index(src, shape)])
        parts.append((part_shape, buf))
    return parts
