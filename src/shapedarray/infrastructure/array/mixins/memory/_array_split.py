"""
Control paths for `split` and `unstack`.
"""

from typing import List

from ..._array_builder import register_for_all_backends
from ....ops.stack_cpu import split_forward, unstack_forward
from ....shape._shape_math import normalize_axis

from .....domain._shaped_array import IShapedArray

from ._base import ArrayMixinMemory as AMM


@register_for_all_backends(AMM, AMM.split)
def array_split(self: IShapedArray, count: int, axis: int = 0) -> List[IShapedArray]:
    axis = normalize_axis(axis, self.rank)
    parts = split_forward(self.scalars, self.shape, count, axis)
    return [self._new_array(shape, buf) for shape, buf in parts]


@register_for_all_backends(AMM, AMM.unstack)
def array_unstack(self: IShapedArray, axis: int = 0) -> List[IShapedArray]:
    axis = normalize_axis(axis, self.rank)
    parts = unstack_forward(self.scalars, self.shape, axis)
    return [self._new_array(shape, buf) for shape, buf in parts]
