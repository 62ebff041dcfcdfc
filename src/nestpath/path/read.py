"""Path reading with fan-out through sequences."""

from __future__ import annotations

from typing import Any

from ..errors import MISSING
from ..runtime.logging import get_logger
from .nodes import as_index, is_sequence, lookup_key
from .segments import split_path

logger = get_logger()


def _fan_out(sequence: Any, key: str, found: list[Any]) -> None:
    for item in sequence:
        if is_sequence(item):
            _fan_out(item, key, found)
            continue
        value = lookup_key(item, key)
        if value is not MISSING:
            found.append(value)


def _step(candidates: list[Any], key: str) -> tuple[list[Any], bool]:
    found: list[Any] = []
    fanned = False
    for candidate in candidates:
        if is_sequence(candidate) and as_index(key) is None:
            _fan_out(candidate, key, found)
            fanned = True
            continue
        value = lookup_key(candidate, key)
        if value is not MISSING:
            found.append(value)
    return found, fanned


def resolve(root: Any, path: str) -> Any:
    """Resolve ``path`` against ``root`` and return the raw result.

    Returns ``MISSING`` when nothing resolves. Without fan-out the single
    stored value is returned as-is; after a fan-out, one surviving value is
    unwrapped (a lone ``None`` counts as missing) and several are returned as
    a list in sequence order.
    """

    segments = split_path(path)
    if not segments:
        return MISSING if root is None else root

    candidates: list[Any] = [root]
    fanned = False
    for position, key in enumerate(segments):
        candidates, stepped_wide = _step(candidates, key)
        fanned = fanned or stepped_wide
        if not candidates:
            logger.debug(
                "path %r unresolved at segment %r (position %d)", path, key, position
            )
            return MISSING

    if not fanned:
        return candidates[0]
    if len(candidates) == 1:
        return MISSING if candidates[0] is None else candidates[0]
    logger.debug("path %r fanned out to %d values", path, len(candidates))
    return candidates


def read(root: Any, path: str, fallback: Any = None) -> Any:
    """Read the value at ``path`` inside ``root``.

    A segment that meets a sequence is looked up on every element and the
    hits are gathered in order; ``None`` elements and misses are dropped.
    Missing keys, out-of-range indices and lookups on scalars never raise:
    ``fallback`` is returned instead.

    >>> read({"user": {"profiles": [{"city": "A"}, {"city": "B"}]}}, "user.profiles.city")
    ['A', 'B']
    >>> read({"user": {}}, "user.profile.city", "unknown")
    'unknown'
    """

    value = resolve(root, path)
    if value is MISSING:
        return fallback
    return value


__all__ = ["read", "resolve"]
