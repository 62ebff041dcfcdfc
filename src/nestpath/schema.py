"""Path checking against declared types.

These helpers look only at annotations. ``read`` and ``write`` never consult
them, so an unknown path still falls back at runtime; use
``validate_path`` where a typo should fail early, e.g. for paths kept in
config files.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Iterator, Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import fields, is_dataclass
from typing import Annotated, Any, get_args, get_origin, get_type_hints, is_typeddict

from pydantic import BaseModel as PydanticBaseModel

from .errors import PathSyntaxError, PathValidationError
from .path.nodes import as_index
from .path.segments import split_path

_SEQUENCE_ORIGINS = (list, tuple, Sequence, MutableSequence)
_MAPPING_ORIGINS = (dict, Mapping, MutableMapping)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


def _members(tp: Any) -> list[Any]:
    """Flatten ``Annotated``, ``Optional`` and unions into member annotations."""

    origin = get_origin(tp)
    if origin is Annotated:
        return _members(get_args(tp)[0])
    if origin in (typing.Union, types.UnionType):
        members: list[Any] = []
        for arg in get_args(tp):
            if arg is type(None):
                continue
            members.extend(_members(arg))
        return members
    return [tp]


def _fields_of(tp: Any) -> dict[str, Any] | None:
    origin = get_origin(tp)
    if origin is not None:
        if not (isinstance(origin, type) and is_dataclass(origin)):
            return None
        tp = origin
    if not isinstance(tp, type):
        return None
    if issubclass(tp, PydanticBaseModel):
        return {name: info.annotation for name, info in tp.model_fields.items()}
    if is_dataclass(tp):
        hints = get_type_hints(tp, include_extras=True)
        return {
            f.name: hints.get(f.name, f.type)
            for f in fields(tp)
            if not f.name.startswith("_")
        }
    if is_typeddict(tp):
        return dict(get_type_hints(tp, include_extras=True))
    return None


def _item_type(tp: Any) -> Any | None:
    origin = get_origin(tp)
    if tp in (list, tuple) or origin is None and tp in (Sequence, MutableSequence):
        return Any
    if origin not in _SEQUENCE_ORIGINS:
        return None
    args = get_args(tp)
    if not args:
        return Any
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return typing.Union[args]
    return args[0]


def _value_type(tp: Any) -> Any | None:
    origin = get_origin(tp)
    if tp is dict or origin is None and tp in (Mapping, MutableMapping):
        return Any
    if origin not in _MAPPING_ORIGINS:
        return None
    args = get_args(tp)
    return args[1] if len(args) == 2 else Any


def _step_type(tp: Any, key: str) -> list[Any]:
    found: list[Any] = []
    for member in _members(tp):
        if member is Any:
            found.append(Any)
            continue
        field_types = _fields_of(member)
        if field_types is not None:
            if key in field_types:
                found.append(field_types[key])
            continue
        item = _item_type(member)
        if item is not None:
            if as_index(key) is not None:
                found.append(item)
            else:
                found.extend(_step_type(item, key))
            continue
        value = _value_type(member)
        if value is not None:
            found.append(value)
    return found


def _combine(found: list[Any]) -> Any:
    unique: list[Any] = []
    for tp in found:
        if tp not in unique:
            unique.append(tp)
    if len(unique) == 1:
        return unique[0]
    return typing.Union[tuple(unique)]


def path_type(tp: Any, path: str) -> Any:
    """Return the annotation reached by following ``path`` through ``tp``.

    Non-numeric segments on a sequence type step into the item type, the
    same way ``read`` fans out over list elements at runtime. Raises
    ``PathValidationError`` for segments the type does not declare.
    """

    try:
        segments = split_path(path)
    except PathSyntaxError as exc:
        raise PathValidationError(str(exc)) from exc

    current = tp
    for key in segments:
        found = _step_type(current, key)
        if not found:
            raise PathValidationError(
                f"{_type_name(tp)} has no path {path!r}: "
                f"segment {key!r} is not declared on {_type_name(current)}"
            )
        current = _combine(found)
    return current


def validate_path(tp: Any, path: str) -> str:
    path_type(tp, path)
    return path


def _structured(tp: Any) -> list[Any]:
    result: list[Any] = []
    for member in _members(tp):
        if _fields_of(member) is not None:
            result.append(member)
            continue
        item = _item_type(member)
        if item is not None and item is not Any:
            result.extend(_structured(item))
    return result


def _iter_paths(tp: Any, prefix: str, stack: tuple[Any, ...]) -> Iterator[str]:
    field_types = _fields_of(tp) or {}
    for name, annotation in field_types.items():
        path = f"{prefix}.{name}" if prefix else name
        yield path
        for child in _structured(annotation):
            if child in stack:
                continue
            yield from _iter_paths(child, path, (*stack, child))


def iter_paths(tp: Any) -> Iterator[str]:
    """Yield every dotted path declared by ``tp``, in field order.

    Sequence fields contribute the sub-paths of their item type without an
    index, matching how ``read`` collects a field across list elements.
    """

    seen: set[str] = set()
    for root in _structured(tp):
        for path in _iter_paths(root, "", (root,)):
            if path not in seen:
                seen.add(path)
                yield path


__all__ = ["iter_paths", "path_type", "validate_path"]
