"""
Shared geometry, scalar access and subscripting for arrays and views.

This module defines `ArrayShapeAndIndexingMixin`, the mixin inherited by both
the owning `ShapedArray` and the non-owning `ShapedArraySlice`. It implements
everything that only depends on *where* an object's scalars live inside an
owning buffer:

- geometry: `rank`, `scalar_count`, `count`, `is_scalar`
- scalar access: `scalars`, `scalar` (read and write)
- subscripting: ``obj[i]`` (element-array view), ``obj[a:b]`` (subarray view)
  and the matching assignments
- equality, iteration and textual descriptions

Design notes
------------
- Host classes provide `shape`, `backend`, `scalar_range` and `_locate()`.
  `_locate()` returns ``(base, base_indices, bounds)``: the owning array, the
  integer indices consumed so far and the optional leading-dimension range.
- Subscripting never copies. New views share the base buffer, so writes
  through any of them are visible through all of them.
- Negative indices are never wrapped; they are out of bounds.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Sequence, Tuple, Union

from ..shape._shape_math import shape_size
from ..formatting._description import describe, full_describe
from ..formatting._print_options import DEFAULT_PRINT_OPTIONS, PrintOptions
from ...domain._errors import IndexOutOfBoundsError, ShapeMismatchError

if TYPE_CHECKING:
    from ._shaped_array import ShapedArray
    from ._shaped_array_slice import ShapedArraySlice


class ArrayShapeAndIndexingMixin:
    """
    Geometry, scalar access and subscripting shared by arrays and views.

    Notes
    -----
    - Methods assume the host class provides:
        - `.shape`, `.backend`, `.scalar_range`
        - `._locate()` returning ``(base, base_indices, bounds)``
    - Arrays and views are mutable, so they are unhashable.
    """

    __hash__ = None

    # ------------------------------------------------------------------
    # Host hooks
    # ------------------------------------------------------------------
    def _locate(self) -> Tuple["ShapedArray", Tuple[int, ...], Optional[range]]:
        raise NotImplementedError

    def _new_array(self, shape: Sequence[int], scalars: Sequence[Any]) -> "ShapedArray":
        """
        Build an owning array on this object's backend.
        """
        from ._shaped_array import ShapedArray

        return ShapedArray(shape, scalars, backend=self.backend)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def rank(self) -> int:
        return len(self.shape)

    @property
    def scalar_count(self) -> int:
        return shape_size(self.shape)

    @property
    def count(self) -> int:
        """
        Size of the leading dimension; 0 for a rank-0 object.
        """
        shape = self.shape
        return shape[0] if shape else 0

    @property
    def is_scalar(self) -> bool:
        return not self.shape

    # ------------------------------------------------------------------
    # Scalar access
    # ------------------------------------------------------------------
    @property
    def scalars(self) -> List[Any]:
        """
        Row-major copy of the scalars covered by this object.
        """
        base, _, _ = self._locate()
        r = self.scalar_range
        return base._buffer[r.start : r.stop]

    @scalars.setter
    def scalars(self, values: Sequence[Any]) -> None:
        values = list(values)
        if len(values) != self.scalar_count:
            raise ShapeMismatchError(
                f"cannot assign {len(values)} scalars to an object holding "
                f"{self.scalar_count} scalars (shape {self.shape!r})",
                self.shape,
                (len(values),),
            )
        base, _, _ = self._locate()
        r = self.scalar_range
        base._buffer[r.start : r.stop] = values

    @property
    def scalar(self) -> Optional[Any]:
        """
        The single scalar of a rank-0 object, otherwise ``None``.
        """
        if self.shape:
            return None
        base, _, _ = self._locate()
        return base._buffer[self.scalar_range.start]

    @scalar.setter
    def scalar(self, value: Any) -> None:
        if self.shape:
            raise ShapeMismatchError(
                f"scalar can only be set on a rank-0 array, got shape {self.shape!r}",
                self.shape,
                (),
            )
        base, _, _ = self._locate()
        base._buffer[self.scalar_range.start] = value

    # ------------------------------------------------------------------
    # Subscripting
    # ------------------------------------------------------------------
    def _check_subscriptable(self, key: Any) -> None:
        if not self.shape:
            raise IndexOutOfBoundsError(key, self.shape, "a rank-0 array cannot be indexed")

    def _element_view(self, index: int) -> "ShapedArraySlice":
        from ._shaped_array_slice import ShapedArraySlice

        self._check_subscriptable(index)
        if index < 0 or index >= self.count:
            raise IndexOutOfBoundsError(index, self.shape)
        base, base_indices, bounds = self._locate()
        if bounds is not None:
            index = bounds.start + index
        return ShapedArraySlice(base, base_indices + (index,))

    def _subarray_view(self, key: slice) -> "ShapedArraySlice":
        from ._shaped_array_slice import ShapedArraySlice

        self._check_subscriptable(key)
        if key.step not in (None, 1):
            raise IndexOutOfBoundsError(
                key, self.shape, f"slice step must be 1, got {key.step!r}"
            )
        start = 0 if key.start is None else key.start
        stop = self.count if key.stop is None else key.stop
        if not 0 <= start <= stop <= self.count:
            raise IndexOutOfBoundsError(
                (start, stop),
                self.shape,
                f"slice [{start}:{stop}] is out of bounds for leading dimension "
                f"of size {self.count}",
            )
        base, base_indices, bounds = self._locate()
        if bounds is not None:
            start += bounds.start
            stop += bounds.start
        return ShapedArraySlice(base, base_indices, range(start, stop))

    def __getitem__(self, key: Union[int, slice]) -> "ShapedArraySlice":
        """
        Return a view of one element (``int``) or of a contiguous range of
        elements (``slice``) along the leading dimension.

        Raises
        ------
        IndexOutOfBoundsError
            If the object is rank 0, or the index/bounds fall outside
            ``[0, count]``.
        TypeError
            For any other key type.
        """
        if isinstance(key, slice):
            return self._subarray_view(key)
        if isinstance(key, bool) or not hasattr(type(key), "__index__"):
            raise TypeError(
                f"{type(self).__name__} indices must be integers or slices, "
                f"not {type(key).__name__}"
            )
        return self._element_view(operator.index(key))

    def __setitem__(self, key: Union[int, slice], value: Any) -> None:
        """
        Overwrite the slot selected by `key` with `value`.

        `value` must have exactly the slot's shape. A bare scalar is treated
        as a rank-0 value.

        Raises
        ------
        ShapeMismatchError
            If the value's shape differs from the slot's shape.
        """
        slot = self[key]
        if isinstance(value, ArrayShapeAndIndexingMixin):
            value_shape, values = value.shape, value.scalars
        else:
            value_shape, values = (), [value]
        if value_shape != slot.shape:
            raise ShapeMismatchError(
                f"cannot assign a value of shape {value_shape!r} "
                f"to a slot of shape {slot.shape!r}",
                slot.shape,
                value_shape,
            )
        slot.scalars = values

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator["ShapedArraySlice"]:
        for i in range(self.count):
            yield self._element_view(i)

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        """
        Equal iff both shapes match and the scalars match element-wise.
        Works across arrays and views.
        """
        if not isinstance(other, ArrayShapeAndIndexingMixin):
            return NotImplemented
        return self.shape == other.shape and self.scalars == other.scalars

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # ------------------------------------------------------------------
    # Descriptions
    # ------------------------------------------------------------------
    def description(
        self,
        options: Optional[PrintOptions] = None,
        summarizing: Optional[bool] = None,
    ) -> str:
        """
        Pretty-printed, column-aligned description.

        Parameters
        ----------
        options : Optional[PrintOptions], optional
            Print options. Defaults to `DEFAULT_PRINT_OPTIONS`.
        summarizing : Optional[bool], optional
            Force summarization on or off. By default, summarize when the
            scalar count exceeds ``options.summarize_threshold``.
        """
        opts = DEFAULT_PRINT_OPTIONS if options is None else options
        if summarizing is None:
            summarizing = opts.should_summarize(self.scalar_count)
        return describe(
            self.shape,
            self.scalars,
            line_width=opts.line_width,
            edge_element_count=opts.edge_element_count,
            summarizing=summarizing,
        )

    @property
    def full_description(self) -> str:
        """
        Every scalar on one line, e.g. ``[[1, 2], [3, 4]]``.
        """
        return full_describe(self.shape, self.scalars)

    def __str__(self) -> str:
        return self.description()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={self.shape!r}, "
            f"scalars={self.full_description}, backend='{self.backend}')"
        )
