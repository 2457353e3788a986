from ._payload import array_to_payload, payload_to_array, dumps, loads
from ._b64 import (
    bytes_to_b64_str,
    b64_str_to_bytes,
    array_to_b64_payload,
    b64_payload_to_array,
)

__all__ = [
    array_to_payload.__name__,
    payload_to_array.__name__,
    dumps.__name__,
    loads.__name__,
    bytes_to_b64_str.__name__,
    b64_str_to_bytes.__name__,
    array_to_b64_payload.__name__,
    b64_payload_to_array.__name__,
]
