"""
shapedarray: dense, row-major, multi-dimensional arrays in Python.

Arrays own a flat scalar buffer plus a shape; subscripting yields zero-copy
views, while reductions, shape transforms, broadcasting arithmetic and
elementwise math return new arrays.
"""

from .domain import (
    IShapedArray,
    Numeric,
    SupportsTrueDivision,
    ShapedArrayError,
    ConstructionError,
    IndexOutOfBoundsError,
    AxisError,
    ShapeMismatchError,
    UnevenSplitError,
    BackendNotSupportedError,
    Backend,
    BackendType,
    DEFAULT_BACKEND,
)
from .infrastructure.array import ShapedArray, ShapedArraySlice
from .infrastructure.formatting import (
    PrintOptions,
    DEFAULT_PRINT_OPTIONS,
    describe,
    full_describe,
)
from .infrastructure.encoding import (
    array_to_payload,
    payload_to_array,
    dumps,
    loads,
    array_to_b64_payload,
    b64_payload_to_array,
)
from .infrastructure.shape import (
    shape_size,
    strides_for_shape,
    ravel_multi_index,
    unravel_index,
    is_valid_axis,
    normalize_axis,
    normalize_axes,
)

__version__ = "0.1.0"

__all__ = [
    "IShapedArray",
    "Numeric",
    "SupportsTrueDivision",
    "ShapedArrayError",
    "ConstructionError",
    "IndexOutOfBoundsError",
    "AxisError",
    "ShapeMismatchError",
    "UnevenSplitError",
    "BackendNotSupportedError",
    "Backend",
    "BackendType",
    "DEFAULT_BACKEND",
    "ShapedArray",
    "ShapedArraySlice",
    "PrintOptions",
    "DEFAULT_PRINT_OPTIONS",
    "describe",
    "full_describe",
    "array_to_payload",
    "payload_to_array",
    "dumps",
    "loads",
    "array_to_b64_payload",
    "b64_payload_to_array",
    "shape_size",
    "strides_for_shape",
    "ravel_multi_index",
    "unravel_index",
    "is_valid_axis",
    "normalize_axis",
    "normalize_axes",
]
