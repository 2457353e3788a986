"""
Control paths for `expand_dims` and `squeeze`.
"""

from typing import Optional

from ..._array_builder import register_for_all_backends
from ....shape._shape_math import as_axis_tuple, normalize_axes

from .....domain._shaped_array import IShapedArray, Axes
from .....domain._errors import AxisError, ShapeMismatchError

from ._base import ArrayMixinMemory as AMM


@register_for_all_backends(AMM, AMM.expand_dims)
def array_expand_dims(self: IShapedArray, axes: Axes) -> IShapedArray:
    shape = list(self.shape)
    for axis in as_axis_tuple(axes):
        rank = len(shape)
        if not -(rank + 1) <= axis <= rank:
            raise AxisError(
                (axis,),
                rank,
                f"axis {axis} is out of range [{-(rank + 1)}, {rank}] "
                f"for inserting into shape {tuple(shape)!r}",
            )
        shape.insert(axis + rank + 1 if axis < 0 else axis, 1)
    return self._new_array(shape, self.scalars)


@register_for_all_backends(AMM, AMM.squeeze)
def array_squeeze(self: IShapedArray, axes: Optional[Axes] = None) -> IShapedArray:
    requested = as_axis_tuple(axes)
    if not requested:
        return self._new_array([d for d in self.shape if d != 1], self.scalars)

    dropped = set(normalize_axes(requested, self.rank))
    for d in sorted(dropped):
        if self.shape[d] != 1:
            raise ShapeMismatchError(
                f"cannot squeeze axis {d} with size {self.shape[d]} (shape {self.shape!r})",
                self.shape,
            )
    return self._new_array(
        [size for d, size in enumerate(self.shape) if d not in dropped], self.scalars
    )
