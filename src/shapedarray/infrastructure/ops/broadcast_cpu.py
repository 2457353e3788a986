"""
CPU reference implementation of broadcasting elementwise binary operations.

Shapes are aligned on their trailing dimensions: the shorter shape is padded
with leading size-1 dimensions. Each aligned pair of sizes must be equal or
contain a 1; the output takes the size that is not 1. A size-1 dimension of
an operand always reads coordinate 0, which is expressed here as a zero
stride.

Examples
--------
``(4, 1)`` with ``(3,)`` broadcasts to ``(4, 3)``; ``(3, 1, 5)`` with
``(5, 5)`` broadcasts to ``(3, 5, 5)``.
"""

from __future__ import annotations

from typing import Any, Callable, List, Sequence, Tuple

from ..shape._shape_math import iter_multi_indices, shape_size, strides_for_shape
from ...domain._errors import ShapeMismatchError

BinaryOp = Callable[[Any, Any], Any]


def broadcast_shapes(a: Sequence[int], b: Sequence[int]) -> Tuple[int, ...]:
    """
    Compute the broadcast output shape of two shapes.

    Raises
    ------
    ShapeMismatchError
        If an aligned pair of sizes differs and neither is 1.
    """
    rank = max(len(a), len(b))
    pa = (1,) * (rank - len(a)) + tuple(a)
    pb = (1,) * (rank - len(b)) + tuple(b)
    out = []
    for x, y in zip(pa, pb):
        if x != y and x != 1 and y != 1:
            raise ShapeMismatchError(
                f"shapes {tuple(a)!r} and {tuple(b)!r} cannot be broadcast together",
                a,
                b,
            )
        out.append(y if x == 1 else x)
    return tuple(out)


def _broadcast_strides(shape: Sequence[int], rank: int) -> List[int]:
    padded = (1,) * (rank - len(shape)) + tuple(shape)
    return [0 if d == 1 else s for d, s in zip(padded, strides_for_shape(padded))]


def broadcast_forward(
    a: Sequence[Any],
    a_shape: Tuple[int, ...],
    b: Sequence[Any],
    b_shape: Tuple[int, ...],
    op: BinaryOp,
) -> Tuple[Tuple[int, ...], List[Any]]:
    """
    Apply ``op(a_elem, b_elem)`` over the broadcast of two buffers.

    Parameters
    ----------
    a, b : Sequence[Any]
        Flat row-major operand buffers.
    a_shape, b_shape : tuple[int, ...]
        Operand shapes.
    op : Callable[[Any, Any], Any]
        Binary elementwise operator.

    Returns
    -------
    tuple[tuple[int, ...], list[Any]]
        The broadcast output shape and its dense buffer.

    Raises
    ------
    ShapeMismatchError
        If the shapes are not broadcast-compatible.
    """
    out_shape = broadcast_shapes(a_shape, b_shape)
    assert len(a) == shape_size(a_shape) and len(b) == shape_size(b_shape)

    if tuple(a_shape) == tuple(b_shape):
        return out_shape, [op(x, y) for x, y in zip(a, b)]

    rank = len(out_shape)
    sa = _broadcast_strides(a_shape, rank)
    sb = _broadcast_strides(b_shape, rank)

    out: List[Any] = []
    for idx in iter_multi_indices(out_shape):
        ia = 0
        ib = 0
        for i, s_a, s_b in zip(idx, sa, sb):
            ia += i * s_a
            ib += i * s_b
        out.append(op(a[ia], b[ib]))
    return out_shape, out
