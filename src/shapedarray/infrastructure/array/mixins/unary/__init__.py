"""
Unary mixins and backend-specific implementations for shaped array operations.

This package aggregates the elementwise unary operations and their concrete
control-path implementations:

- ``sqrt``, ``exp``, ``log``
- ``sin``, ``cos``, ``tanh``
- ``abs`` / ``__abs__``
- ``__neg__`` : elementwise negation (unary minus)

Public API
----------
- ``ArrayMixinUnary``
"""

from ._array_unary import *
from ._base import ArrayMixinUnary

__all__ = [
    ArrayMixinUnary.__name__,
]
