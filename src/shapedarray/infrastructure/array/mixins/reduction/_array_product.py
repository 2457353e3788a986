"""
Control path for `product` (backend-independent).
"""

import operator
from typing import Optional

from ..._array_builder import register_for_all_backends
from ....ops.reduce_cpu import reduce_forward
from ....shape._shape_math import as_axis_tuple

from .....domain._shaped_array import IShapedArray, Axes

from ._base import ArrayMixinReduction as AMR


@register_for_all_backends(AMR, AMR.product)
def array_product(
    self: IShapedArray, axis: Optional[Axes] = None, keepdims: bool = False
) -> IShapedArray:
    out_shape, out = reduce_forward(
        self.scalars, self.shape, operator.mul, 1, as_axis_tuple(axis), keepdims
    )
    return self._new_array(out_shape, out)
