from __future__ import annotations

from .abi.specs import Event, InterfaceDescriptor, Method, Parameter
from .core.config import ContractConfig, DecoderConfig, load_config
from .core.models import DecodedParameter, DecodedRecord
from .decoding.decoder import decode_log, decode_transaction
from .decoding.registry import DescriptorRegistry, descriptor_from_abi, load_descriptor, load_registry

__all__ = [
    "decode_log",
    "decode_transaction",
    "DescriptorRegistry",
    "descriptor_from_abi",
    "load_descriptor",
    "load_registry",
    "ContractConfig",
    "DecoderConfig",
    "load_config",
    "DecodedParameter",
    "DecodedRecord",
    "Event",
    "InterfaceDescriptor",
    "Method",
    "Parameter",
]
