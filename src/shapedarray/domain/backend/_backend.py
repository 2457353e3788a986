"""
Backend abstraction utilities.

This module defines lightweight descriptors for the execution strategy used
by elementwise VectorMath kernels. It provides:

- `BackendType`: an enumeration of supported backend categories
- `Backend`: a concrete backend descriptor that validates and normalizes
  user-facing backend strings such as "python" or "numpy"

Backends only influence *how* flat buffers are transformed by elementwise
kernels. Shape math, slicing, reductions, shape transforms and broadcasting
are backend-independent and always run on the array's flat Python buffer.
"""

from enum import Enum


class BackendType(Enum):
    """
    Enumeration of supported backend categories.

    Attributes
    ----------
    PYTHON : BackendType
        Reference kernels written as plain loops over the `math` module.
    NUMPY : BackendType
        Vectorized kernels that round-trip the flat buffer through NumPy.
    """

    PYTHON = "python"
    NUMPY = "numpy"


class Backend:
    """
    Concrete backend descriptor.

    Parameters
    ----------
    backend : str
        Backend identifier string. Must be either "python" or "numpy"
        (case-insensitive, surrounding whitespace ignored).

    Raises
    ------
    ValueError
        If the provided backend string is not supported.

    Notes
    -----
    - Instances are immutable value objects: equal strings produce equal and
      equally-hashed descriptors, so they can key the control-path registry.
    - `__slots__` prevents dynamic attribute creation.
    """

    __slots__ = ("type",)

    def __init__(self, backend: str):
        """
        Initialize a Backend instance from a backend string.

        Parameters
        ----------
        backend : str
            Backend identifier string ("python" or "numpy").

        Raises
        ------
        ValueError
            If the backend string is invalid or unsupported.
        """
        if isinstance(backend, Backend):
            object.__setattr__(self, "type", backend.type)
            return
        key = str(backend).strip().lower()
        try:
            backend_type = BackendType(key)
        except ValueError:
            raise ValueError(
                f"Invalid backend '{backend}'. Expected one of "
                f"{[t.value for t in BackendType]}"
            ) from None
        object.__setattr__(self, "type", backend_type)

    def __setattr__(self, name, value):
        raise AttributeError("Backend is immutable")

    def __str__(self) -> str:
        """
        Return the canonical string representation of the backend.
        """
        return self.type.value

    def __repr__(self) -> str:
        return f"Backend('{self}')"

    def __eq__(self, other: object) -> bool:
        """
        Compare two Backend objects for semantic equality.

        Parameters
        ----------
        other : object
            Object to compare against.

        Returns
        -------
        bool
            True if both descriptors name the same backend type.
        """
        if not isinstance(other, Backend):
            return NotImplemented
        return self.type is other.type

    def __hash__(self) -> int:
        return hash(self.type)

    def is_python(self) -> bool:
        """
        Check whether this backend runs the pure-Python reference kernels.
        """
        return self.type is BackendType.PYTHON

    def is_numpy(self) -> bool:
        """
        Check whether this backend runs the NumPy-vectorized kernels.
        """
        return self.type is BackendType.NUMPY


DEFAULT_BACKEND = Backend("numpy")
"""Backend assigned to arrays constructed without an explicit backend."""
