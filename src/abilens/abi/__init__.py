import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Literal, Optional

from eth_utils.abi import event_signature_to_log_topic, function_signature_to_4byte_selector
from pydantic import BaseModel, ConfigDict

from abilens.abi.specs import Event, InterfaceDescriptor, Method, Parameter


class AbiParameter(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    type: str
    internalType: Optional[str] = None
    indexed: bool = False
    components: Optional[Sequence["AbiParameter"]] = None


AbiParameter.model_rebuild()


class AbiFunction(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    inputs: Optional[Sequence[AbiParameter]] = ()
    type: Literal["function"] = "function"


class AbiEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    inputs: Optional[Sequence[AbiParameter]] = ()
    anonymous: bool = False
    type: Literal["event"]


def get_canonical_type(param: AbiParameter) -> str:
    """Expand tuple types into `(t1,t2,...)`, keeping any array suffix."""
    if not param.type.startswith("tuple"):
        return param.type
    suffix = param.type[len("tuple"):]
    inner = ",".join(get_canonical_type(c) for c in param.components or ())
    return f"({inner}){suffix}"


def get_signature(entry: AbiFunction | AbiEvent) -> str:
    return f"{entry.name}({','.join(get_canonical_type(p) for p in entry.inputs or ())})"


def get_parameters(inputs: Sequence[AbiParameter]) -> tuple[Parameter, ...]:
    # unnamed inputs fall back to their position
    return tuple(
        Parameter(p.name or f"arg{i}", get_canonical_type(p), p.indexed)
        for i, p in enumerate(inputs)
    )


def get_method(function: AbiFunction) -> Method:
    signature = get_signature(function)
    return Method(
        name=function.name,
        signature=signature,
        selector=bytes(function_signature_to_4byte_selector(signature)),
        inputs=get_parameters(function.inputs or ()),
    )


def get_event(event: AbiEvent) -> Event:
    signature = get_signature(event)
    return Event(
        name=event.name,
        signature=signature,
        topic=bytes(event_signature_to_log_topic(signature)),
        inputs=get_parameters(event.inputs or ()),
        anonymous=event.anonymous,
    )


AbiJson = Iterable[dict[str, Any]]
AbiSpec = AbiJson | Path | str


def _load_abi(abi: AbiSpec) -> list[dict[str, Any]]:
    if isinstance(abi, Path):
        abi = abi.read_text()
    if isinstance(abi, str):
        abi = json.loads(abi)
    # Truffle/Hardhat artifacts wrap the ABI array
    if isinstance(abi, dict) and "abi" in abi:
        abi = abi["abi"]
    if not isinstance(abi, (list, tuple)):
        raise ValueError("ABI must be a JSON array of entries")
    return list(abi)


def get_entries_from_abi(abi: AbiSpec) -> tuple[list[AbiFunction], list[AbiEvent]]:
    functions: list[AbiFunction] = []
    events: list[AbiEvent] = []
    for position, entry in enumerate(_load_abi(abi)):
        if not isinstance(entry, dict):
            raise ValueError(f"ABI entry #{position} is not an object")
        kind = entry.get("type", "function")  # legacy ABIs omit the type for functions
        if kind == "function":
            functions.append(AbiFunction.model_validate({**entry, "type": "function"}))
        elif kind == "event":
            events.append(AbiEvent.model_validate(entry))
        # constructor / fallback / receive / error entries carry no selector we decode
    return functions, events


def make_descriptor_from_abi(abi: AbiSpec, name: str) -> InterfaceDescriptor:
    functions, events = get_entries_from_abi(abi)
    return InterfaceDescriptor(
        name=name,
        methods=tuple(get_method(f) for f in functions),
        events=tuple(get_event(e) for e in events),
    )


__all__ = [
    "AbiParameter",
    "AbiFunction",
    "AbiEvent",
    "AbiSpec",
    "Event",
    "InterfaceDescriptor",
    "Method",
    "Parameter",
    "get_canonical_type",
    "get_signature",
    "get_method",
    "get_event",
    "get_entries_from_abi",
    "make_descriptor_from_abi",
]
