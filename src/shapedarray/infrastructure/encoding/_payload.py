"""
JSON-safe ``{shape, scalars}`` payloads.

This is the portable encoding of a shaped array: the shape as a list of ints
and the row-major scalars as a flat list. Decoding re-runs the construction
contract, so a payload whose scalar count does not match its shape is
rejected rather than silently reshaped.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Union

from ..array._shaped_array import ShapedArray
from ...domain._shaped_array import IShapedArray
from ...domain._errors import ConstructionError
from ...domain.backend._backend import Backend

BackendLike = Union[str, Backend]


def array_to_payload(array: IShapedArray) -> Dict[str, Any]:
    """
    Return ``{"shape": [...], "scalars": [...]}`` for an array or view.
    """
    return {
        "shape": list(array.shape),
        "scalars": array.scalars,
    }


def payload_to_array(
    payload: Dict[str, Any], backend: Optional[BackendLike] = None
) -> ShapedArray:
    """
    Rebuild a `ShapedArray` from a ``{shape, scalars}`` payload.

    Raises
    ------
    ConstructionError
        If the payload is not a mapping, a key is missing, or the scalar count
        does not match the shape.
    """
    if not isinstance(payload, dict):
        raise ConstructionError(f"payload must be a dict, got {type(payload).__name__}")
    try:
        shape = payload["shape"]
        scalars = payload["scalars"]
    except KeyError as e:
        raise ConstructionError(f"payload is missing key {e}") from None
    return ShapedArray(shape, scalars, backend=backend)


def dumps(array: IShapedArray, **json_kwargs: Any) -> str:
    """
    Serialize an array to JSON text. Extra keyword arguments go to
    `json.dumps`.
    """
    return json.dumps(array_to_payload(array), **json_kwargs)


def loads(text: str, backend: Optional[BackendLike] = None) -> ShapedArray:
    """
    Parse JSON text produced by `dumps`.

    Raises
    ------
    ConstructionError
        If the text is not valid JSON or the payload is invalid.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConstructionError(f"invalid JSON payload: {e}") from e
    return payload_to_array(payload, backend=backend)
