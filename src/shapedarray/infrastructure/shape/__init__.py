"""
Row-major shape and stride arithmetic.
"""

from ._shape_math import (
    Shape,
    shape_size,
    validate_shape,
    strides_for_shape,
    ravel_multi_index,
    unravel_index,
    is_valid_axis,
    normalize_axis,
    normalize_axes,
    as_axis_tuple,
    iter_multi_indices,
)

__all__ = [
    "Shape",
    shape_size.__name__,
    validate_shape.__name__,
    strides_for_shape.__name__,
    ravel_multi_index.__name__,
    unravel_index.__name__,
    is_valid_axis.__name__,
    normalize_axis.__name__,
    normalize_axes.__name__,
    as_axis_tuple.__name__,
    iter_multi_indices.__name__,
]
