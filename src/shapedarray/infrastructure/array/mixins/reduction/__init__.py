"""
Reduction mixins and backend control paths for shaped array operations.

This package aggregates reduction-related mixins and their concrete
control-path implementations, including:

- ``sum``     : summation reduction
- ``product`` : multiplicative reduction
- ``mean``    : arithmetic mean reduction

Reductions fold the flat buffer with the same reference kernel on every
backend, so identical inputs reduce identically regardless of `backend`.

Public API
----------
Only the base mixin class is exported as part of the public interface:

- ``ArrayMixinReduction``

The concrete implementations are imported for side effects so that their
control paths are registered, but they are not intended to be used directly.
"""

from ._array_sum import *
from ._array_product import *
from ._array_mean import *
from ._base import ArrayMixinReduction

__all__ = [
    ArrayMixinReduction.__name__,
]
