"""
Owning shaped arrays, their views, and the operation mixins they share.
"""

from ._shaped_array import ShapedArray
from ._shaped_array_slice import ShapedArraySlice
from ._array_builder import array_control_path_manager

__all__ = [
    ShapedArray.__name__,
    ShapedArraySlice.__name__,
    "array_control_path_manager",
]
