"""
Pure-Python elementwise kernels (``Backend("python")``).

These kernels loop over flat buffers with the `math` module and the builtin
operators. They are the reference semantics for scalar types that NumPy cannot
represent natively, and they follow `math` error behavior: for example
``sqrt(-1.0)`` and ``log(0.0)`` raise `ValueError`, and integer division by
zero raises `ZeroDivisionError`.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Callable, Dict, List, MutableSequence, Sequence, Tuple

from .broadcast_cpu import broadcast_forward

UNARY_OPS: Dict[str, Callable[[Any], Any]] = {
    "sqrt": math.sqrt,
    "exp": math.exp,
    "log": math.log,
    "sin": math.sin,
    "cos": math.cos,
    "tanh": math.tanh,
    "abs": abs,
    "neg": operator.neg,
}

BINARY_OPS: Dict[str, Callable[[Any, Any], Any]] = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "truediv": operator.truediv,
}


def _lookup(table: Dict[str, Callable], op_name: str) -> Callable:
    try:
        return table[op_name]
    except KeyError:
        raise ValueError(
            f"Unsupported elementwise op {op_name!r}. Expected one of {sorted(table)}"
        ) from None


def unary_forward(
    op_name: str,
    dst: MutableSequence[Any],
    src: Sequence[Any],
    count: int,
) -> None:
    """
    Write ``op(src[i])`` into ``dst[i]`` for ``i < count``.

    Parameters
    ----------
    op_name : str
        One of ``sqrt, exp, log, sin, cos, tanh, abs, neg``.
    dst : MutableSequence[Any]
        Destination buffer with at least `count` slots.
    src : Sequence[Any]
        Source buffer with at least `count` scalars.
    count : int
        Number of scalars to transform.

    Raises
    ------
    ValueError
        If `op_name` is unknown, or a scalar is outside the domain of the
        `math` function.
    """
    fn = _lookup(UNARY_OPS, op_name)
    for i in range(count):
        dst[i] = fn(src[i])


def binary_forward(
    op_name: str,
    a: Sequence[Any],
    a_shape: Tuple[int, ...],
    b: Sequence[Any],
    b_shape: Tuple[int, ...],
) -> Tuple[Tuple[int, ...], List[Any]]:
    """
    Apply a named arithmetic operator over two broadcast-compatible buffers.
    """
    return broadcast_forward(a, a_shape, b, b_shape, _lookup(BINARY_OPS, op_name))
