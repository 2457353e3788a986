"""
Scalar capability protocols.

Shaped arrays store arbitrary Python objects. The operations only ask for the
capabilities they actually use, expressed as structural protocols rather than
base classes:

- `Numeric`: addition, multiplication and equality (sum, product, broadcasting
  arithmetic, element-wise comparison).
- `SupportsTrueDivision`: division by a Python ``int`` (mean).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Numeric(Protocol):
    """
    Scalar supporting ``+``, ``*`` and ``==``.
    """

    def __add__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __eq__(self, other: object) -> bool: ...


@runtime_checkable
class SupportsTrueDivision(Numeric, Protocol):
    """
    `Numeric` scalar that can also be divided by an ``int`` divisor.
    """

    def __truediv__(self, other: Any) -> Any: ...
