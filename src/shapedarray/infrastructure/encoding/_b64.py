"""
Compact base64 payloads for NumPy-representable shaped arrays.

The payload stores the raw C-order bytes of the array next to the NumPy dtype
string and the shape, so numeric arrays round-trip exactly without going
through per-scalar JSON numbers:

    {
      "b64": "<base64>",
      "dtype": "<numpy dtype str>",
      "shape": [...],
      "order": "C"
    }
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, Optional, Union

import numpy as np

from ..array._shaped_array import ShapedArray
from ...domain._shaped_array import IShapedArray
from ...domain._errors import ConstructionError
from ...domain.backend._backend import Backend


def bytes_to_b64_str(b: bytes) -> str:
    """
    Encode raw bytes into a base64 ASCII string (JSON-safe).
    """
    return base64.b64encode(b).decode("ascii")


def b64_str_to_bytes(s: str) -> bytes:
    """
    Decode a base64 ASCII string back into raw bytes.
    """
    return base64.b64decode(s.encode("ascii"), validate=True)


def array_to_b64_payload(array: IShapedArray) -> Dict[str, Any]:
    """
    Serialize a shaped array (or view) of numeric scalars into a base64
    payload.

    Raises
    ------
    TypeError
        If the scalars do not map to a fixed-size NumPy dtype (e.g. arbitrary
        Python objects).
    """
    a = np.ascontiguousarray(array.to_numpy())
    if a.dtype.hasobject:
        raise TypeError(
            "array scalars are not representable as a fixed-size NumPy dtype; "
            "use array_to_payload instead"
        )
    return {
        "b64": bytes_to_b64_str(a.tobytes(order="C")),
        "dtype": a.dtype.str,  # e.g. "<f8"
        "shape": list(a.shape),
        "order": "C",
    }


def b64_payload_to_array(
    payload: Dict[str, Any], backend: Optional[Union[str, Backend]] = None
) -> ShapedArray:
    """
    Deserialize a base64 payload back into a `ShapedArray`.

    Raises
    ------
    ConstructionError
        If a key is missing, the base64 text or dtype is malformed, or the
        byte length does not match the shape.
    """
    try:
        b = b64_str_to_bytes(str(payload["b64"]))
        dtype = np.dtype(str(payload["dtype"]))
        shape = tuple(int(x) for x in payload["shape"])
        order = str(payload.get("order", "C"))
    except KeyError as e:
        raise ConstructionError(f"payload is missing key {e}") from None
    except (binascii.Error, TypeError, ValueError) as e:
        raise ConstructionError(f"malformed payload: {e}") from e

    if order != "C":
        raise ConstructionError(f"unsupported payload order {order!r}")

    try:
        arr = np.frombuffer(b, dtype=dtype).reshape(shape)
    except ValueError as e:
        raise ConstructionError(f"payload bytes do not match shape {shape!r}: {e}") from e

    return ShapedArray.from_numpy(arr, backend=backend)
