"""
Arithmetic mixins and backend control paths for shaped array operations.

This package aggregates the broadcasting elementwise operations:

- ``broadcasting_op``      : arbitrary binary callable, reference kernel
- ``+ - * /`` (+ reflected) : per-backend python / NumPy kernels

Public API
----------
- ``ArrayMixinArithmetic``
"""

from ._array_broadcasting_op import *
from ._array_operators import *
from ._base import ArrayMixinArithmetic

__all__ = [
    ArrayMixinArithmetic.__name__,
]
