"""
Control paths for `copy`, `with_backend` and `to_numpy`.
"""

from typing import Any, Optional, Union

import numpy as np

from ..._array_builder import register_for_all_backends

from .....domain._shaped_array import IShapedArray
from .....domain.backend._backend import Backend

from ._base import ArrayMixinMemory as AMM


@register_for_all_backends(AMM, AMM.copy)
def array_copy(self: IShapedArray) -> IShapedArray:
    return self._new_array(self.shape, self.scalars)


@register_for_all_backends(AMM, AMM.with_backend)
def array_with_backend(self: IShapedArray, backend: Union[str, Backend]) -> IShapedArray:
    from ..._shaped_array import ShapedArray

    return ShapedArray(self.shape, self.scalars, backend=Backend(backend))


@register_for_all_backends(AMM, AMM.to_numpy)
def array_to_numpy(self: IShapedArray, dtype: Optional[Any] = None) -> np.ndarray:
    """
    Materialize the scalars as a NumPy array.

    Notes
    -----
    - Python ints and floats map to NumPy's default integer/float dtypes
      unless `dtype` is given.
    - The result never shares memory with the array buffer.
    """
    return np.array(self.scalars, dtype=dtype).reshape(self.shape)
