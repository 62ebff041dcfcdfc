"""Shape classification for values met while walking a path."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import fields, is_dataclass
from typing import Any, Literal

from pydantic import BaseModel as PydanticBaseModel

from ..errors import MISSING

NodeKind = Literal["mapping", "sequence", "record", "scalar", "absent"]


def is_sequence(value: object) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence)


def is_record(value: object) -> bool:
    if isinstance(value, type):
        return False
    return is_dataclass(value) or isinstance(value, PydanticBaseModel)


def record_fields(value: object) -> tuple[str, ...]:
    """Public field names of a dataclass or pydantic model instance."""

    if isinstance(value, PydanticBaseModel):
        names = [*type(value).model_fields, *(value.model_extra or {})]
    else:
        names = [f.name for f in fields(value)]  # type: ignore[arg-type]
    return tuple(name for name in names if not name.startswith("_"))


def node_kind(value: object) -> NodeKind:
    if value is None or value is MISSING:
        return "absent"
    if isinstance(value, Mapping):
        return "mapping"
    if is_sequence(value):
        return "sequence"
    if is_record(value):
        return "record"
    return "scalar"


def as_index(key: str) -> int | None:
    if key.isdigit() and key.isascii():
        return int(key)
    return None


def lookup_key(node: object, key: str) -> Any:
    """Return ``node[key]`` or ``MISSING`` without descending into sequences.

    Sequences are indexed only by numeric keys; fan-out over their elements is
    the reader's job.
    """

    match node_kind(node):
        case "mapping":
            mapping: Mapping[Any, Any] = node  # type: ignore[assignment]
            if key in mapping:
                return mapping[key]
            index = as_index(key)
            if index is not None and index in mapping:
                return mapping[index]
            return MISSING
        case "sequence":
            index = as_index(key)
            sequence: Sequence[Any] = node  # type: ignore[assignment]
            if index is None or index >= len(sequence):
                return MISSING
            return sequence[index]
        case "record":
            if key not in record_fields(node):
                return MISSING
            return getattr(node, key, MISSING)
        case _:
            return MISSING


def store_key(node: object, key: str) -> bool:
    """Return whether ``node`` has a writable slot addressed by ``key``."""

    match node_kind(node):
        case "mapping":
            return isinstance(node, MutableMapping)
        case "sequence":
            index = as_index(key)
            return (
                isinstance(node, MutableSequence)
                and index is not None
                and index < len(node)
            )
        case "record":
            return key in record_fields(node)
        case _:
            return False


def assign_key(node: object, key: str, value: Any) -> None:
    match node_kind(node):
        case "mapping":
            mapping: MutableMapping[Any, Any] = node  # type: ignore[assignment]
            index = as_index(key)
            if key not in mapping and index is not None and index in mapping:
                mapping[index] = value
            else:
                mapping[key] = value
        case "sequence":
            sequence: MutableSequence[Any] = node  # type: ignore[assignment]
            sequence[int(key)] = value
        case "record":
            setattr(node, key, value)
        case kind:
            raise TypeError(f"cannot assign into {kind} node {type(node).__name__}")


__all__ = [
    "NodeKind",
    "as_index",
    "assign_key",
    "is_record",
    "is_sequence",
    "lookup_key",
    "node_kind",
    "record_fields",
    "store_key",
]
