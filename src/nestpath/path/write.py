"""Path writing with on-demand container creation."""

from __future__ import annotations

from typing import Any

from ..config import NESTPATH_CONFIG, CreateMissingMode
from ..errors import MISSING, PathSyntaxError, PathWriteError
from ..runtime.logging import get_logger
from .nodes import assign_key, lookup_key, node_kind, store_key
from .segments import split_path

logger = get_logger()


def _needs_container(existing: Any, mode: CreateMissingMode) -> bool:
    if existing is MISSING or existing is None:
        return True
    if mode == "falsy":
        return not existing
    return False


def _check_slot(node: Any, key: str, path: str) -> None:
    if store_key(node, key):
        return
    kind = node_kind(node)
    if kind == "sequence":
        reason = "sequences accept only in-range indices on mutable sequences"
    elif kind == "record":
        reason = f"{type(node).__name__} has no field {key!r}"
    elif kind == "mapping":
        reason = f"{type(node).__name__} is read-only"
    else:
        reason = f"cannot descend into {kind} value of type {type(node).__name__}"
    raise PathWriteError(path, key, reason)


def _assign(node: Any, key: str, value: Any, path: str) -> None:
    try:
        assign_key(node, key, value)
    except (AttributeError, TypeError, ValueError) as exc:
        raise PathWriteError(path, key, str(exc)) from exc


def write(root: Any, path: str, value: Any) -> None:
    """Assign ``value`` at ``path`` inside ``root``, mutating it in place.

    Intermediate slots that are missing (or empty, depending on
    ``NESTPATH_CONFIG.create_missing``) receive a new ``dict``. Sequences are
    only indexed, never created or extended. Writing through a scalar raises
    ``PathWriteError``.
    """

    segments = split_path(path)
    if not segments:
        raise PathSyntaxError(path, "cannot write to the root path")

    mode = NESTPATH_CONFIG.create_missing
    current = root
    for key in segments[:-1]:
        _check_slot(current, key, path)
        existing = lookup_key(current, key)
        if _needs_container(existing, mode):
            created: dict[str, Any] = {}
            _assign(current, key, created, path)
            logger.debug("created container at %r in path %r", key, path)
            existing = lookup_key(current, key)
        current = existing

    last = segments[-1]
    _check_slot(current, last, path)
    _assign(current, last, value, path)


__all__ = ["write"]
