"""
Control path for `broadcasting_op` (backend-independent).
"""

from typing import Any, Callable

from ..._array_builder import register_for_all_backends
from ....ops.broadcast_cpu import broadcast_forward

from .....domain._shaped_array import IShapedArray

from ._base import ArrayMixinArithmetic as AMA, as_operand


@register_for_all_backends(AMA, AMA.broadcasting_op)
def array_broadcasting_op(
    self: IShapedArray, other: Any, op: Callable[[Any, Any], Any]
) -> IShapedArray:
    other_shape, other_scalars = as_operand(other)
    out_shape, out = broadcast_forward(self.scalars, self.shape, other_scalars, other_shape, op)
    return self._new_array(out_shape, out)
