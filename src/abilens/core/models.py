"""Decode result models.

`DecodedRecord` is what the presentation layer receives; `to_dict` produces
the JSON-ready shape (empty `parameters` / `error` omitted, `indexed` only
emitted when true).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class DecodedParameter:
    """One decoded, display-ready parameter."""

    name: str
    type: str
    value: Any
    indexed: bool = False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "type": self.type, "value": self.value}
        if self.indexed:
            out["indexed"] = True
        return out


@dataclass(slots=True, frozen=True)
class DecodedRecord:
    """Result of decoding call data or a log.

    Either `parameters` or `error` is populated, never both. When a member was
    matched but its parameters failed to decode, `method_name`,
    `method_signature` and `contract` are still set alongside `error`.
    """

    method_name: str = ""
    method_signature: str = ""
    contract: str = ""
    parameters: tuple[DecodedParameter, ...] = field(default_factory=tuple)
    error: str = ""

    def __post_init__(self) -> None:
        if self.error and self.parameters:
            raise ValueError("DecodedRecord cannot carry both parameters and an error")

    @property
    def ok(self) -> bool:
        return not self.error

    @property
    def matched(self) -> bool:
        """True when a method/event was identified, even if decoding failed."""
        return bool(self.method_name)

    @classmethod
    def failure(
        cls,
        error: str,
        *,
        method_name: str = "",
        method_signature: str = "",
        contract: str = "",
    ) -> DecodedRecord:
        return cls(
            method_name=method_name,
            method_signature=method_signature,
            contract=contract,
            error=error,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "method_name": self.method_name,
            "method_signature": self.method_signature,
            "contract": self.contract,
        }
        if self.parameters:
            out["parameters"] = [p.to_dict() for p in self.parameters]
        if self.error:
            out["error"] = self.error
        return out
