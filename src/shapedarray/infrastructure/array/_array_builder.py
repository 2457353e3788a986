"""
Array control-path manager for backend-specific dispatch.

This module defines the shared control-path manager used to register and
resolve backend-specific implementations of shaped array methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"backend"``. Method dispatch is
therefore performed on the runtime value of ``self.backend``, which views
inherit from their base array.

Typical usage
-------------
Backend-specific implementations register themselves with this manager:

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, Backend("python"))
    def op_python(self, ...): ...

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, Backend("numpy"))
    def op_numpy(self, ...): ...

Operations whose semantics do not depend on the backend (shape transforms,
reductions) register one implementation for every backend through
`register_for_all_backends`.
"""

from typing import Callable, TypeVar

from ...domain.utils._control_path import create_path_builder
from ...domain.backend._backend import Backend, BackendType
from ...domain._errors import BackendNotSupportedError

F = TypeVar("F", bound=Callable)

# Control-path manager that dispatches array methods based on `self.backend`
array_control_path_manager = create_path_builder(
    "backend",
    on_missing=lambda method, backend: BackendNotSupportedError(method.__name__, str(backend)),
)


def register_for_all_backends(cls: type, method: Callable) -> Callable[[F], F]:
    """
    Register one implementation of `method` for every known backend.
    """

    def decorator(fn: F) -> F:
        for backend_type in BackendType:
            array_control_path_manager(cls, method, Backend(backend_type.value))(fn)
        return fn

    return decorator
