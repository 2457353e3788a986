"""
Backend-specific control paths for the arithmetic operators.

Each operator is registered once per backend:

- ``Backend("python")``: `vector_math_python.binary_forward` (builtin
  operators over the broadcast index mapping)
- ``Backend("numpy")``: `vector_math_numpy.binary_forward` (NumPy ufuncs with
  NumPy broadcasting)

Both kernels produce identical shapes. The NumPy kernel only vectorizes
operands that ``float64`` holds exactly and otherwise defers to the python
kernel, so results differ only in IEEE edge cases (e.g. division by zero).
"""

from typing import Any, Callable, List, Tuple

from ..._array_builder import array_control_path_manager
from ....ops import vector_math_numpy, vector_math_python

from .....domain._shaped_array import IShapedArray
from .....domain.backend._backend import Backend

from ._base import ArrayMixinArithmetic as AMA, as_operand

BinaryKernel = Callable[..., Tuple[Tuple[int, ...], List[Any]]]

_KERNELS = {
    Backend("python"): vector_math_python.binary_forward,
    Backend("numpy"): vector_math_numpy.binary_forward,
}


def _make_operator_path(
    kernel: BinaryKernel, op_name: str, reflected: bool
) -> Callable[[IShapedArray, Any], IShapedArray]:
    def operator_path(self: IShapedArray, other: Any) -> IShapedArray:
        other_shape, other_scalars = as_operand(other)
        if reflected:
            out_shape, out = kernel(op_name, other_scalars, other_shape, self.scalars, self.shape)
        else:
            out_shape, out = kernel(op_name, self.scalars, self.shape, other_scalars, other_shape)
        return self._new_array(out_shape, out)

    operator_path.__name__ = f"array_{op_name}_{'reflected' if reflected else 'forward'}"
    return operator_path


def _register(method: Callable, op_name: str, reflected: bool) -> None:
    for backend, kernel in _KERNELS.items():
        array_control_path_manager(AMA, method, backend)(
            _make_operator_path(kernel, op_name, reflected)
        )


_register(AMA.__add__, "add", reflected=False)
_register(AMA.__radd__, "add", reflected=True)
_register(AMA.__sub__, "sub", reflected=False)
_register(AMA.__rsub__, "sub", reflected=True)
_register(AMA.__mul__, "mul", reflected=False)
_register(AMA.__rmul__, "mul", reflected=True)
_register(AMA.__truediv__, "truediv", reflected=False)
_register(AMA.__rtruediv__, "truediv", reflected=True)
