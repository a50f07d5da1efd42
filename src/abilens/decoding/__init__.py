"""Call-data and event-log decoding.

This package provides:
- Descriptor registry and loader (DescriptorRegistry, load_registry)
- Selector resolution over the registry (resolve_method, resolve_event)
- Payload decoding for matched members (decode_method_inputs, decode_event_fields)
- Display formatting of decoded values (format_value)
- Entry points producing DecodedRecord (decode_transaction, decode_log)
"""

from abilens.decoding.decoder import decode_log, decode_transaction
from abilens.decoding.formatting import ValueKind, classify_value, format_value
from abilens.decoding.payload import decode_event_fields, decode_method_inputs
from abilens.decoding.registry import (
    DescriptorRegistry,
    descriptor_from_abi,
    load_descriptor,
    load_registry,
)
from abilens.decoding.resolver import resolve_event, resolve_method

__all__ = [
    "decode_log",
    "decode_transaction",
    "ValueKind",
    "classify_value",
    "format_value",
    "decode_event_fields",
    "decode_method_inputs",
    "DescriptorRegistry",
    "descriptor_from_abi",
    "load_descriptor",
    "load_registry",
    "resolve_event",
    "resolve_method",
]
