"""
NumPy-vectorized elementwise kernels (``Backend("numpy")``).

A buffer is vectorized only when NumPy's ``float64`` represents its scalars
and the result exactly:

- ``add``, ``sub``, ``mul``, ``neg`` and ``abs`` vectorize buffers made only
  of Python floats.
- ``truediv`` and the float-valued math functions (``sqrt``, ``exp``, ``log``,
  ``sin``, ``cos``, ``tanh``) also accept Python ints up to ``2**53`` in
  magnitude, since Python converts those operands to float first as well.

Any other buffer (bools, larger ints, mixed int/float operands of an
int-preserving operator, `Fraction`, `Decimal`, ...) is handed to the
matching `vector_math_python` kernel, so fixed-width NumPy dtypes never wrap,
truncate or retype a result.

Vectorized results are converted back with `tolist()`, so they are plain
Python scalars again. On vectorized buffers NumPy semantics apply:
``sqrt(-1.0)`` produces ``nan`` and division by zero produces ``inf`` (NumPy
itself emits the corresponding `RuntimeWarning`).
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, List, MutableSequence, Sequence, Tuple

import numpy as np

from . import vector_math_python
from .broadcast_cpu import broadcast_shapes

UNARY_UFUNCS: Dict[str, np.ufunc] = {
    "sqrt": np.sqrt,
    "exp": np.exp,
    "log": np.log,
    "sin": np.sin,
    "cos": np.cos,
    "tanh": np.tanh,
    "abs": np.abs,
    "neg": np.negative,
}

BINARY_UFUNCS: Dict[str, np.ufunc] = {
    "add": np.add,
    "sub": np.subtract,
    "mul": np.multiply,
    "truediv": np.true_divide,
}

# Ops whose python result is always a float computed from float operands.
FLOAT_RESULT_OPS: FrozenSet[str] = frozenset(
    {"sqrt", "exp", "log", "sin", "cos", "tanh", "truediv"}
)

_MAX_EXACT_INT = 2**53


def _lookup(table: Dict[str, np.ufunc], op_name: str) -> np.ufunc:
    try:
        return table[op_name]
    except KeyError:
        raise ValueError(
            f"Unsupported elementwise op {op_name!r}. Expected one of {sorted(table)}"
        ) from None


def _is_exact_float(x: Any, allow_int: bool) -> bool:
    if type(x) is float:
        return True
    return allow_int and type(x) is int and -_MAX_EXACT_INT <= x <= _MAX_EXACT_INT


def can_vectorize(op_name: str, *buffers: Sequence[Any]) -> bool:
    """
    Return True if `op_name` over `buffers` gives the same scalars in NumPy
    ``float64`` as in the python kernels.
    """
    allow_int = op_name in FLOAT_RESULT_OPS
    return all(_is_exact_float(x, allow_int) for buf in buffers for x in buf)


def unary_forward(
    op_name: str,
    dst: MutableSequence[Any],
    src: Sequence[Any],
    count: int,
) -> None:
    """
    Write ``ufunc(src[:count])`` into ``dst[:count]``.

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
    """
    ufunc = _lookup(UNARY_UFUNCS, op_name)
    if count == 0:
        return
    values = list(src[:count])
    if not can_vectorize(op_name, values):
        vector_math_python.unary_forward(op_name, dst, values, count)
        return
    dst[:count] = ufunc(np.asarray(values, dtype=np.float64)).tolist()


def binary_forward(
    op_name: str,
    a: Sequence[Any],
    a_shape: Tuple[int, ...],
    b: Sequence[Any],
    b_shape: Tuple[int, ...],
) -> Tuple[Tuple[int, ...], List[Any]]:
    """
    Apply a named arithmetic ufunc with NumPy broadcasting.

    The output shape is validated first, so incompatible shapes raise
    `ShapeMismatchError` rather than NumPy's own `ValueError`.
    """
    ufunc = _lookup(BINARY_UFUNCS, op_name)
    out_shape = broadcast_shapes(a_shape, b_shape)
    if not can_vectorize(op_name, a, b):
        return vector_math_python.binary_forward(op_name, a, a_shape, b, b_shape)
    x = np.asarray(list(a), dtype=np.float64).reshape(a_shape)
    y = np.asarray(list(b), dtype=np.float64).reshape(b_shape)
    out = np.asarray(ufunc(x, y))
    return out_shape, out.reshape(-1).tolist()
