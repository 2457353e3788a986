from ._backend import Backend, BackendType, DEFAULT_BACKEND

__all__ = [
    Backend.__name__,
    BackendType.__name__,
    "DEFAULT_BACKEND",
]
