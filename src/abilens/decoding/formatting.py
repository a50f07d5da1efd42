"""Display formatting for decoded values.

Values fall into a closed set of kinds, each with one rendering rule:

    ADDRESS -> EIP-55 checksummed hex
    BYTES   -> lowercase hex, no `0x` (callers add a prefix if they want one)
    TEXT    -> unchanged
    OTHER   -> str(value)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from eth_utils import is_address, to_checksum_address


class ValueKind(Enum):
    ADDRESS = "address"
    BYTES = "bytes"
    TEXT = "text"
    OTHER = "other"


def classify_value(value: Any, abi_type: str | None = None) -> ValueKind:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.BYTES
    if abi_type == "address" and isinstance(value, str) and is_address(value):
        return ValueKind.ADDRESS
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.OTHER


def format_value(value: Any, abi_type: str | None = None) -> Any:
    """Render one raw decoded value for display. Pure."""
    match classify_value(value, abi_type):
        case ValueKind.ADDRESS:
            return to_checksum_address(value)
        case ValueKind.BYTES:
            return bytes(value).hex()
        case ValueKind.TEXT:
            return value
        case ValueKind.OTHER:
            return str(value)
    raise RuntimeError("Unsupported value kind")
