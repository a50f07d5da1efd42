"""Payload decoding for matched methods and events.

Method inputs are decoded as one ABI tuple over the bytes after the selector.
Event fields come from two places:
- non-indexed inputs: one ABI tuple over the log data (all-or-nothing);
- indexed inputs: the raw 32-byte topics after topic0, in declaration order,
  kept as `0x` hex without typed decoding. Missing topics are omitted.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from eth_abi import decode
from eth_abi.exceptions import ABITypeError, DecodingError, ParseError

from abilens.abi.specs import Event, Method
from abilens.core.errors import DecodeError
from abilens.core.models import DecodedParameter
from abilens.decoding.formatting import format_value
from abilens.decoding.utils import topic_hex

# eth_abi raises these for truncated/malformed data and for types it cannot handle
_ABI_ERRORS = (DecodingError, ABITypeError, ParseError, ValueError, OverflowError)


def _decode_tuple(types: Sequence[str], data: bytes) -> tuple[Any, ...]:
    return tuple(decode(list(types), data))


def decode_method_inputs(method: Method, payload: bytes) -> tuple[Any, ...]:
    """Decode `payload` (call data minus selector) into one raw value per input."""
    try:
        values = _decode_tuple(method.input_types, payload)
    except _ABI_ERRORS as e:
        raise DecodeError(f"failed to unpack inputs: {e}") from e
    return values


def decode_event_fields(event: Event, topics: Sequence[bytes], data: bytes) -> dict[str, Any]:
    """Return raw event values keyed by parameter name."""
    fields: dict[str, Any] = {}

    data_inputs = event.data_inputs
    if data_inputs and data:
        try:
            values = _decode_tuple([p.type for p in data_inputs], data)
        except _ABI_ERRORS as e:
            raise DecodeError(f"failed to unpack event data: {e}") from e
        for param, value in zip(data_inputs, values):
            fields[param.name] = value

    topic_index = 1  # topic0 is the event hash
    for param in event.indexed_inputs:
        if topic_index >= len(topics):
            break
        fields[param.name] = topic_hex(topics[topic_index])
        topic_index += 1

    return fields


def assemble_method_parameters(method: Method, values: Sequence[Any]) -> tuple[DecodedParameter, ...]:
    return tuple(
        DecodedParameter(name=p.name, type=p.type, value=format_value(v, p.type))
        for p, v in zip(method.inputs, values)
    )


def assemble_event_parameters(event: Event, fields: dict[str, Any]) -> tuple[DecodedParameter, ...]:
    """Emit parameters in declaration order, skipping any absent from `fields`."""
    return tuple(
        DecodedParameter(
            name=p.name,
            type=p.type,
            value=format_value(fields[p.name], p.type),
            indexed=p.indexed,
        )
        for p in event.inputs
        if p.name in fields
    )
