"""Decoding utilities: input normalization for bytes / 0x-hex payloads and topics."""

from __future__ import annotations

import binascii
from collections.abc import Sequence

from eth_utils import decode_hex, encode_hex

from abilens.core.errors import DecodeError

HexOrBytes = bytes | bytearray | memoryview | str


def as_bytes(value: HexOrBytes) -> bytes:
    """Return raw bytes from bytes-like or hex input (with or without `0x`)."""
    if isinstance(value, str):
        try:
            return decode_hex(value)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"invalid hex input {value[:18]!r}: {e}") from e
    return bytes(value)


def as_topics(topics: Sequence[HexOrBytes]) -> list[bytes]:
    return [as_bytes(t) for t in topics]


def topic_hex(topic: bytes) -> str:
    """Render a raw topic word as lowercase `0x` hex."""
    return encode_hex(topic)
