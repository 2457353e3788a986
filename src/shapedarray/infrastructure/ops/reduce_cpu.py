"""
CPU reference implementation of the multi-axis reduction kernel.

This module provides `reduce_forward`, a readable fold over a flat row-major
buffer that supports reducing any subset of axes with either squeezing or
keep-dims output shapes. It backs `sum`, `product` and `mean` on shaped
arrays and views.

Algorithm
---------
1. Normalize and jointly validate the axes (duplicates are rejected).
2. Partition the dimensions into reduced and remaining ones.
3. Degenerate case: no axes, or no remaining dimension. Fold every scalar
   into one value. The result has shape ``()`` or ``(1,)`` with keep-dims.
4. General case: the output shape keeps the remaining sizes (squeezing) or
   replaces every reduced size by 1 (keep-dims). Both layouts share the same
   linear order.
5. Every output cell starts at `identity`; input scalars are visited in
   row-major order and folded as ``out[dest] = op(x, out[dest])``.

Notes
-----
- Scalars are typed `Numeric` and only need to support `op`; no numeric
  tower is assumed.
- Reduced dimensions contribute a zero stride to the destination offset, so
  all coordinates differing only along reduced axes land in the same cell.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from ..shape._shape_math import (
    iter_multi_indices,
    normalize_axes,
    shape_size,
    strides_for_shape,
)
from ...domain._scalar import Numeric

ReduceOp = Callable[[Numeric, Numeric], Numeric]


def _fold_all(scalars: Sequence[Numeric], op: ReduceOp, identity: Numeric) -> Numeric:
    acc = identity
    for x in scalars:
        acc = op(x, acc)
    return acc


def reduce_forward(
    scalars: Sequence[Numeric],
    shape: Tuple[int, ...],
    op: ReduceOp,
    identity: Numeric,
    axes: Sequence[int] = (),
    keepdims: bool = False,
) -> Tuple[Tuple[int, ...], List[Numeric]]:
    """
    Reduce a row-major buffer over `axes` with a binary operator.

    Parameters
    ----------
    scalars : Sequence[Numeric]
        Flat row-major input buffer; ``len(scalars) == prod(shape)``.
    shape : tuple[int, ...]
        Input shape.
    op : Callable[[Numeric, Numeric], Numeric]
        Binary fold operator, called as ``op(x, accumulated)``.
    identity : Numeric
        Initial value of every output cell.
    axes : Sequence[int], optional
        Axes to reduce (may be negative). Empty means a global reduction.
    keepdims : bool, optional
        Keep reduced dimensions with size 1. Defaults to False.

    Returns
    -------
    tuple[tuple[int, ...], list[Numeric]]
        Output shape and flat output buffer.

    Raises
    ------
    AxisError
        If any axis is out of range or the axes contain duplicates.
    """
    assert len(scalars) == shape_size(shape)
    rank = len(shape)
    reduced = normalize_axes(axes, rank)
    reduced_set = set(reduced)
    remaining = [d for d in range(rank) if d not in reduced_set]

    if not reduced or not remaining:
        value = _fold_all(scalars, op, identity)
        return ((1,) if keepdims else ()), [value]

    if keepdims:
        out_shape = tuple(1 if d in reduced_set else shape[d] for d in range(rank))
    else:
        out_shape = tuple(shape[d] for d in remaining)

    remaining_strides = strides_for_shape([shape[d] for d in remaining])
    dest_strides = [0] * rank
    for d, s in zip(remaining, remaining_strides):
        dest_strides[d] = s

    out_size = 1
    for d in remaining:
        out_size *= shape[d]
    out = [identity] * out_size

    for idx, x in zip(iter_multi_indices(shape), scalars):
        dest = 0
        for i, s in zip(idx, dest_strides):
            dest += i * s
        out[dest] = op(x, out[dest])

    return out_shape, out
