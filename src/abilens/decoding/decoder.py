"""Decoder entry points.

This module turns raw call data / logs into `DecodedRecord` using a
`DescriptorRegistry`. Decode-time failures never propagate: they are embedded
in `DecodedRecord.error`. When a member matched but its parameters failed to
decode, the record still names the member (partial success).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from abilens.core.errors import DecodingFailure
from abilens.core.models import DecodedRecord
from abilens.decoding.payload import (
    assemble_event_parameters,
    assemble_method_parameters,
    decode_event_fields,
    decode_method_inputs,
)
from abilens.decoding.registry import DescriptorRegistry
from abilens.decoding.resolver import SELECTOR_SIZE, resolve_event, resolve_method
from abilens.decoding.utils import HexOrBytes, as_bytes, as_topics

logger = logging.getLogger(__name__)


def decode_transaction(data: HexOrBytes, *, registry: DescriptorRegistry) -> DecodedRecord:
    """Decode transaction call data (selector + ABI-encoded inputs)."""
    try:
        raw = as_bytes(data)
        method, descriptor = resolve_method(raw, registry)
    except DecodingFailure as e:
        return DecodedRecord.failure(e.describe())

    try:
        values = decode_method_inputs(method, raw[SELECTOR_SIZE:])
    except DecodingFailure as e:
        logger.warning("%s.%s matched but failed to decode: %s", descriptor.name, method.signature, e)
        return DecodedRecord.failure(
            e.describe(),
            method_name=method.name,
            method_signature=method.signature,
            contract=descriptor.name,
        )

    return DecodedRecord(
        method_name=method.name,
        method_signature=method.signature,
        contract=descriptor.name,
        parameters=assemble_method_parameters(method, values),
    )


def decode_log(
    topics: Sequence[HexOrBytes],
    data: HexOrBytes,
    *,
    registry: DescriptorRegistry,
) -> DecodedRecord:
    """Decode an event log (topics + data)."""
    try:
        raw_topics = as_topics(topics)
        event, descriptor = resolve_event(raw_topics, registry)
    except DecodingFailure as e:
        return DecodedRecord.failure(e.describe())

    try:
        fields = decode_event_fields(event, raw_topics, as_bytes(data))
    except DecodingFailure as e:
        logger.warning("%s.%s matched but failed to decode: %s", descriptor.name, event.signature, e)
        return DecodedRecord.failure(
            e.describe(),
            method_name=event.name,
            method_signature=event.signature,
            contract=descriptor.name,
        )

    return DecodedRecord(
        method_name=event.name,
        method_signature=event.signature,
        contract=descriptor.name,
        parameters=assemble_event_parameters(event, fields),
    )
