"""
Shape- and index-related exceptions for shapedarray.

This module defines the typed errors raised by the shape math engine, the
array/view containers, and the reduction, transform and broadcasting
operations. Each error derives from :class:`ShapedArrayError` *and* from the
closest builtin exception, so callers may catch either the library-specific
type or the familiar builtin (``ValueError``, ``IndexError``, ...).

All of these signal synchronous contract violations at the boundary where
the contract is checked. No operation retries or returns partial results.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence


def _fmt_shape(shape: Sequence[int]) -> str:
    return "(" + ", ".join(str(int(d)) for d in shape) + ("," if len(shape) == 1 else "") + ")"


class ShapedArrayError(Exception):
    """
    Base class for every error raised by shapedarray.
    """


class ConstructionError(ShapedArrayError, ValueError):
    """
    Raised when an array cannot be constructed from the given inputs.

    Typical causes are a scalar count that does not match the product of the
    declared shape, a shape containing negative sizes, stacking an empty list
    of arrays, or a malformed serialized payload.
    """


class IndexOutOfBoundsError(ShapedArrayError, IndexError):
    """
    Raised when a linear or coordinate index lies outside a shape.

    Attributes
    ----------
    index : int or tuple[int, ...]
        The offending linear index or multi-index.
    shape : tuple[int, ...]
        The shape the index was checked against.
    """

    def __init__(self, index, shape: Sequence[int], message: Optional[str] = None) -> None:
        """
        Initialize the IndexOutOfBoundsError.

        Parameters
        ----------
        index : int or tuple[int, ...]
            The offending index.
        shape : Sequence[int]
            The shape the index was validated against.
        message : Optional[str], optional
            Custom message. A default one naming both the index and the shape
            is generated when omitted.
        """
        self.index = index
        self.shape = tuple(int(d) for d in shape)
        if message is None:
            message = f"index {index!r} is out of bounds for shape {_fmt_shape(self.shape)}"
        super().__init__(message)


class AxisError(ShapedArrayError, ValueError):
    """
    Raised when an axis is outside ``[-rank, rank)`` or when a set of axes
    contains duplicates after normalization.

    Attributes
    ----------
    axes : tuple[int, ...]
        The axis values as given by the caller.
    rank : int
        The rank the axes were validated against.
    """

    def __init__(self, axes: Iterable[int], rank: int, message: Optional[str] = None) -> None:
        """
        Initialize the AxisError.

        Parameters
        ----------
        axes : Iterable[int]
            Axis value(s) that failed validation.
        rank : int
            Rank of the array the axes refer to.
        message : Optional[str], optional
            Custom message; a default naming the axes and rank is used
            when omitted.
        """
        self.axes = tuple(int(a) for a in axes)
        self.rank = int(rank)
        if message is None:
            message = f"axes {list(self.axes)} are invalid for an array of rank {self.rank}"
        super().__init__(message)


class ShapeMismatchError(ShapedArrayError, ValueError):
    """
    Raised when operand shapes are incompatible for an operation.

    This covers operations that require equal shapes (subscript assignment,
    stacking) as well as operations that require compatible shapes
    (broadcasting, reshaping, squeezing).

    Attributes
    ----------
    shapes : tuple[tuple[int, ...], ...]
        The shapes involved in the failed operation.
    """

    def __init__(self, message: str, *shapes: Sequence[int]) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        message : str
            Human-readable description of the mismatch.
        *shapes : Sequence[int]
            The shapes involved, kept for diagnostics.
        """
        self.shapes = tuple(tuple(int(d) for d in s) for s in shapes)
        super().__init__(message)


class UnevenSplitError(ShapedArrayError, ValueError):
    """
    Raised when a split count does not evenly divide the target axis size.

    Attributes
    ----------
    count : int
        Requested number of splits.
    size : int
        Size of the axis being split.
    """

    def __init__(self, count: int, size: int) -> None:
        self.count = int(count)
        self.size = int(size)
        super().__init__(
            f"cannot split an axis of size {self.size} into {self.count} equal parts"
        )


class BackendNotSupportedError(ShapedArrayError, RuntimeError):
    """
    Raised when an operation is requested on a backend that has no
    registered implementation.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted (e.g., "sqrt").
    backend : str
        String representation of the backend.
    """

    def __init__(self, op: str, backend: str) -> None:
        """
        Initialize the BackendNotSupportedError.

        Parameters
        ----------
        op : str
            The operation name that is not supported on the given backend.
        backend : str
            The backend identifier (e.g., "python", "numpy").
        """
        super().__init__(f"{op} is not implemented for backend '{backend}'.")
        self.op = op
        self.backend = backend
