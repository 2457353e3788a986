"""
Non-owning views into a `ShapedArray` buffer.

A `ShapedArraySlice` is described by its base array, the integer indices
consumed so far (``base_indices``) and an optional range over the next
dimension (``bounds``):

- element-array view: produced by ``obj[i]``; one more base index, one fewer
  dimension.
- subarray view: produced by ``obj[a:b]``; same rank, the leading extent
  narrowed to ``b - a``.

Reads and writes go straight to the base buffer, restricted to
`scalar_range`.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Tuple

from ...domain._shaped_array import IShapedArray
from ...domain._errors import IndexOutOfBoundsError
from ...domain.backend._backend import Backend
from ..shape._shape_math import shape_size
from ._shape_and_indexing import ArrayShapeAndIndexingMixin
from ._shaped_array import BackendLike, ShapedArray
from .mixins.reduction import ArrayMixinReduction
from .mixins.memory import ArrayMixinMemory
from .mixins.arithmetic import ArrayMixinArithmetic
from .mixins.unary import ArrayMixinUnary


class ShapedArraySlice(
    ArrayShapeAndIndexingMixin,
    ArrayMixinReduction,
    ArrayMixinMemory,
    ArrayMixinArithmetic,
    ArrayMixinUnary,
    IShapedArray,
):
    """
    View over a contiguous region of a base array's buffer.

    Parameters
    ----------
    base : ShapedArray
        The owning array.
    base_indices : Sequence[int], optional
        Leading indices into `base`, outermost first. Defaults to ``()``.
    bounds : Optional[range], optional
        Range over the dimension right after the indexed ones. ``None``
        selects the whole dimension.

    Raises
    ------
    IndexOutOfBoundsError
        If there are more indices than base dimensions, an index is outside
        its dimension, or the bounds are outside the next dimension.

    Notes
    -----
    Effective shape is ``(len(bounds),) + base.shape[depth + 1:]`` with bounds
    and ``base.shape[depth:]`` without, where ``depth = len(base_indices)``.
    """

    def __init__(
        self,
        base: ShapedArray,
        base_indices: Sequence[int] = (),
        bounds: Optional[range] = None,
    ) -> None:
        if not isinstance(base, ShapedArray):
            raise TypeError(f"base must be a ShapedArray, got {type(base).__name__}")

        base_indices = tuple(base_indices)
        base_shape = base.shape
        if len(base_indices) > len(base_shape):
            raise IndexOutOfBoundsError(
                base_indices,
                base_shape,
                f"{len(base_indices)} indices given for an array of rank {len(base_shape)}",
            )
        for d, i in enumerate(base_indices):
            if i < 0 or i >= base_shape[d]:
                raise IndexOutOfBoundsError(base_indices, base_shape)

        if bounds is not None:
            depth = len(base_indices)
            if depth >= len(base_shape):
                raise IndexOutOfBoundsError(
                    base_indices, base_shape, "bounds require a dimension left to slice"
                )
            if bounds.step != 1 or not 0 <= bounds.start <= bounds.stop <= base_shape[depth]:
                raise IndexOutOfBoundsError(
                    (bounds.start, bounds.stop),
                    base_shape,
                    f"bounds {bounds!r} are out of range for dimension {depth} "
                    f"of size {base_shape[depth]}",
                )

        self._base = base
        self._base_indices = base_indices
        self._bounds = bounds

    @classmethod
    def from_scalars(
        cls,
        shape: Sequence[int],
        scalars: Iterable[Any],
        backend: Optional[BackendLike] = None,
    ) -> "ShapedArraySlice":
        """
        View over a freshly constructed base array holding `scalars`.
        """
        return cls(ShapedArray(shape, scalars, backend=backend))

    def to_array(self) -> ShapedArray:
        """
        Materialize an owning copy.
        """
        return ShapedArray(self.shape, self.scalars, backend=self.backend)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    @property
    def base(self) -> ShapedArray:
        return self._base

    @property
    def base_indices(self) -> Tuple[int, ...]:
        return self._base_indices

    @property
    def bounds(self) -> Optional[range]:
        return self._bounds

    @property
    def shape(self) -> Tuple[int, ...]:
        depth = len(self._base_indices)
        base_shape = self._base.shape
        if self._bounds is not None:
            return (len(self._bounds),) + base_shape[depth + 1 :]
        return base_shape[depth:]

    @property
    def backend(self) -> Backend:
        return self._base.backend

    @property
    def scalar_range(self) -> range:
        """
        Range of base-buffer positions covered by this view.

        Walks `base_indices`, adding ``index * stride`` where the stride at
        each depth is the size of one element of that dimension, then narrows
        to `bounds` over the next dimension.
        """
        base_shape = self._base.shape
        depth = len(self._base_indices)

        start = 0
        for d, i in enumerate(self._base_indices):
            start += i * shape_size(base_shape[d + 1 :])

        if self._bounds is None:
            return range(start, start + shape_size(base_shape[depth:]))

        trailing = shape_size(base_shape[depth + 1 :])
        return range(start + self._bounds.start * trailing, start + self._bounds.stop * trailing)

    def _locate(self) -> Tuple[ShapedArray, Tuple[int, ...], Optional[range]]:
        return self._base, self._base_indices, self._bounds
