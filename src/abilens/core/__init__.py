"""Core data models, configuration, and errors.

This package provides:
- Result models (DecodedRecord, DecodedParameter)
- Configuration classes (ContractConfig, DecoderConfig) and the YAML loader
- The error taxonomy
"""

from abilens.core.config import ContractConfig, DecoderConfig, load_config
from abilens.core.errors import (
    AbiLensError,
    ConfigError,
    DecodeError,
    DecodingFailure,
    DescriptorLoadError,
    MemberNotFound,
    NoTopics,
    PayloadTooShort,
)
from abilens.core.models import DecodedParameter, DecodedRecord

__all__ = [
    "ContractConfig",
    "DecoderConfig",
    "load_config",
    "AbiLensError",
    "ConfigError",
    "DecodeError",
    "DecodingFailure",
    "DescriptorLoadError",
    "MemberNotFound",
    "NoTopics",
    "PayloadTooShort",
    "DecodedParameter",
    "DecodedRecord",
]
