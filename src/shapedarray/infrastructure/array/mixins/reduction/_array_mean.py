"""
Control path for `mean` (backend-independent).

The mean is the `sum` over the same axes divided by the number of scalars
folded into each output cell, i.e. the product of the input sizes of the
reduced axes. A global reduction divides by the full scalar count.
"""

import warnings
from typing import List, Optional

from ..._array_builder import register_for_all_backends
from ....shape._shape_math import as_axis_tuple, normalize_axes, shape_size

from .....domain._scalar import SupportsTrueDivision
from .....domain._shaped_array import IShapedArray, Axes

from ._base import ArrayMixinReduction as AMR


@register_for_all_backends(AMR, AMR.mean)
def array_mean(
    self: IShapedArray, axis: Optional[Axes] = None, keepdims: bool = False
) -> IShapedArray:
    """
    Backend-independent control path for `mean`.

    Notes
    -----
    - Scalars must satisfy `SupportsTrueDivision` (true division by an
      ``int``).
    - A zero divisor (an empty reduced axis) emits `RuntimeWarning` and fills
      the result with ``nan`` instead of raising `ZeroDivisionError`.
    """
    axes = as_axis_tuple(axis)
    summed = self.sum(axes, keepdims)

    if axes:
        divisor = shape_size([self.shape[d] for d in normalize_axes(axes, self.rank)])
    else:
        divisor = self.scalar_count

    if divisor == 0:
        warnings.warn("Mean of empty slice.", RuntimeWarning, stacklevel=3)
        return self._new_array(summed.shape, [float("nan")] * summed.scalar_count)

    totals: List[SupportsTrueDivision] = summed.scalars
    return self._new_array(summed.shape, [s / divisor for s in totals])
