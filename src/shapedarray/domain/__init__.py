"""
Domain layer: protocols, errors, backends and dispatch utilities.
"""

from ._shaped_array import IShapedArray, Axes
from ._scalar import Numeric, SupportsTrueDivision
from ._errors import (
    ShapedArrayError,
    ConstructionError,
    IndexOutOfBoundsError,
    AxisError,
    ShapeMismatchError,
    UnevenSplitError,
    BackendNotSupportedError,
)
from .backend import Backend, BackendType, DEFAULT_BACKEND

__all__ = [
    IShapedArray.__name__,
    "Axes",
    Numeric.__name__,
    SupportsTrueDivision.__name__,
    ShapedArrayError.__name__,
    ConstructionError.__name__,
    IndexOutOfBoundsError.__name__,
    AxisError.__name__,
    ShapeMismatchError.__name__,
    UnevenSplitError.__name__,
    BackendNotSupportedError.__name__,
    Backend.__name__,
    BackendType.__name__,
    "DEFAULT_BACKEND",
]
