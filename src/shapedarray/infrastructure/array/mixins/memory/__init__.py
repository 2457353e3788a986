"""
Memory / shape-transform mixins and their control paths.

Implementation modules are imported for their *side effects*: registering
control paths with the array control-path manager.

Public API
----------
- ``ArrayMixinMemory``
"""

from ._array_reshape import *
from ._array_expand_squeeze import *
from ._array_split import *
from ._array_copy import *
from ._base import ArrayMixinMemory

__all__ = [
    ArrayMixinMemory.__name__,
]
