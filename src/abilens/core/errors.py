"""Error taxonomy.

Two families:
- load-time errors (`ConfigError`, `DescriptorLoadError`) are fatal and
  propagate to the caller building the registry;
- `DecodingFailure` subclasses are raised inside the resolver/decoder and
  turned into `DecodedRecord.error` strings by the facade.
"""

from __future__ import annotations


class AbiLensError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(AbiLensError):
    """Configuration file is missing or malformed."""


class DescriptorLoadError(AbiLensError):
    """An ABI descriptor could not be read or parsed."""


class DecodingFailure(AbiLensError):
    """Base class for failures embedded in a decode result."""

    def describe(self) -> str:
        return f"{type(self).__name__}: {self}"


class PayloadTooShort(DecodingFailure):
    """Call data is shorter than a 4-byte selector."""


class NoTopics(DecodingFailure):
    """Log carries no topics."""


class MemberNotFound(DecodingFailure):
    """No loaded descriptor has a method/event for the selector or topic."""


class DecodeError(DecodingFailure):
    """Binary decoding of a matched member's parameters failed."""
