"""
Control paths for `reshape`, `reshaped_like` and `flatten`.
"""

import operator
from collections import abc
from typing import Any, Sequence, Tuple

from ..._array_builder import register_for_all_backends
from ....shape._shape_math import shape_size

from .....domain._shaped_array import IShapedArray
from .....domain._errors import ShapeMismatchError

from ._base import ArrayMixinMemory as AMM


def _resolve_shape(requested: Sequence[Any], scalar_count: int, source: Tuple[int, ...]) -> Tuple[int, ...]:
    """
    Validate a requested shape and infer a single ``-1`` placeholder.
    """
    try:
        dims = [operator.index(d) for d in requested]
    except TypeError:
        raise TypeError(f"reshape sizes must be integers, got {tuple(requested)!r}") from None

    placeholders = [i for i, d in enumerate(dims) if d == -1]
    if len(placeholders) > 1:
        raise ShapeMismatchError(
            f"can only specify one unknown dimension, got {tuple(dims)!r}", source, dims
        )
    if any(d < -1 for d in dims):
        raise ShapeMismatchError(f"invalid reshape sizes {tuple(dims)!r}", source, dims)

    if placeholders:
        known = shape_size(d for d in dims if d != -1)
        if known == 0 or scalar_count % known != 0:
            raise ShapeMismatchError(
                f"cannot reshape array of shape {source!r} into {tuple(dims)!r}",
                source,
                dims,
            )
        dims[placeholders[0]] = scalar_count // known

    if shape_size(dims) != scalar_count:
        raise ShapeMismatchError(
            f"cannot reshape array of shape {source!r} ({scalar_count} scalars) "
            f"into {tuple(dims)!r}",
            source,
            dims,
        )
    return tuple(dims)


@register_for_all_backends(AMM, AMM.reshape)
def array_reshape(self: IShapedArray, *shape: Any) -> IShapedArray:
    if len(shape) == 1 and isinstance(shape[0], abc.Iterable):
        shape = tuple(shape[0])
    new_shape = _resolve_shape(shape, self.scalar_count, self.shape)
    return self._new_array(new_shape, self.scalars)


@register_for_all_backends(AMM, AMM.reshaped_like)
def array_reshaped_like(self: IShapedArray, other: IShapedArray) -> IShapedArray:
    return self.reshape(other.shape)


@register_for_all_backends(AMM, AMM.flatten)
def array_flatten(self: IShapedArray) -> IShapedArray:
    return self._new_array((self.scalar_count,), self.scalars)
