"""
Shaped array interface definitions.

This module defines the domain-level interface for shaped-array-like objects
using structural typing. Both the owning `ShapedArray` and the non-owning
`ShapedArraySlice` view satisfy this protocol, so reduction, shape-transform,
broadcasting and formatting code can be written once against `IShapedArray`.

Notes
-----
The protocol mirrors the public surface shared by arrays and views. Operations
that allocate (reductions, reshapes, broadcasting, ...) always return an
owning array, which itself satisfies this protocol.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Protocol, Sequence, Union, runtime_checkable

from .backend._backend import Backend

Axes = Union[int, Sequence[int]]


@runtime_checkable
class IShapedArray(Protocol):
    """
    Shaped array interface.

    An `IShapedArray` is a fixed-rank, row-major view of a flat scalar buffer.
    The product of `shape` always equals `scalar_count`; a rank-0 object holds
    exactly one scalar and cannot be subscripted.
    """

    # ---------------------------------------------------------------------
    # Geometry
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape (sizes per dimension, outermost first).
        """
        ...

    @property
    def rank(self) -> int:
        """
        Return the number of dimensions.
        """
        ...

    @property
    def scalar_count(self) -> int:
        """
        Return the total number of scalars (product of `shape`).
        """
        ...

    @property
    def count(self) -> int:
        """
        Return the size of the leading dimension (0 for rank 0).
        """
        ...

    @property
    def backend(self) -> Backend:
        """
        Return the backend used by elementwise kernels.
        """
        ...

    # ---------------------------------------------------------------------
    # Scalar access
    # ---------------------------------------------------------------------
    @property
    def scalars(self) -> List[Any]:
        """
        Return a row-major copy of the scalars.
        """
        ...

    @scalars.setter
    def scalars(self, values: Sequence[Any]) -> None: ...

    @property
    def scalar(self) -> Optional[Any]:
        """
        Return the single scalar of a rank-0 object, otherwise ``None``.
        """
        ...

    def __getitem__(self, key: Union[int, slice]) -> "IShapedArray": ...

    def __setitem__(self, key: Union[int, slice], value: Any) -> None: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator["IShapedArray"]: ...

    # ---------------------------------------------------------------------
    # Reductions
    # ---------------------------------------------------------------------
    def sum(self, axis: Optional[Axes] = None, keepdims: bool = False) -> "IShapedArray": ...

    def product(self, axis: Optional[Axes] = None, keepdims: bool = False) -> "IShapedArray": ...

    def mean(self, axis: Optional[Axes] = None, keepdims: bool = False) -> "IShapedArray": ...

    # ---------------------------------------------------------------------
    # Shape transforms
    # ---------------------------------------------------------------------
    def reshape(self, *shape: Any) -> "IShapedArray": ...

    def flatten(self) -> "IShapedArray": ...

    def expand_dims(self, axes: Axes) -> "IShapedArray": ...

    def squeeze(self, axes: Optional[Axes] = None) -> "IShapedArray": ...

    def split(self, count: int, axis: int = 0) -> List["IShapedArray"]: ...

    def unstack(self, axis: int = 0) -> List["IShapedArray"]: ...

    # ---------------------------------------------------------------------
    # Elementwise
    # ---------------------------------------------------------------------
    def broadcasting_op(
        self, other: Any, op: Callable[[Any, Any], Any]
    ) -> "IShapedArray": ...
