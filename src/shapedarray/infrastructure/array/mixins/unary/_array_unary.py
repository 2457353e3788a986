"""
Backend-specific control paths for the elementwise unary operations.

Each public method of `ArrayMixinUnary` is registered for both backends. A
control path copies the scalars into a source buffer, allocates a destination
buffer of the same length and lets the backend kernel fill it through the
flat-buffer contract ``unary_forward(op_name, dst, src, count)``.
"""

from typing import Any, Callable, List, Optional

from ..._array_builder import array_control_path_manager
from ....ops import vector_math_numpy, vector_math_python

from .....domain._shaped_array import IShapedArray
from .....domain.backend._backend import Backend

from ._base import ArrayMixinUnary as AMU

UnaryKernel = Callable[[str, List[Optional[Any]], List[Any], int], None]

_KERNELS = {
    Backend("python"): vector_math_python.unary_forward,
    Backend("numpy"): vector_math_numpy.unary_forward,
}


def _make_unary_path(kernel: UnaryKernel, op_name: str) -> Callable[[IShapedArray], IShapedArray]:
    def unary_path(self: IShapedArray) -> IShapedArray:
        src = self.scalars
        dst: List[Optional[Any]] = [None] * len(src)
        kernel(op_name, dst, src, len(src))
        return self._new_array(self.shape, dst)

    unary_path.__name__ = f"array_{op_name}"
    return unary_path


for _method, _op_name in (
    (AMU.sqrt, "sqrt"),
    (AMU.exp, "exp"),
    (AMU.log, "log"),
    (AMU.sin, "sin"),
    (AMU.cos, "cos"),
    (AMU.tanh, "tanh"),
    (AMU.abs, "abs"),
    (AMU.__neg__, "neg"),
):
    for _backend, _kernel in _KERNELS.items():
        array_control_path_manager(AMU, _method, _backend)(_make_unary_path(_kernel, _op_name))
