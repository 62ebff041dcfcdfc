"""Dotted path parsing.

``"user.addresses[2].street"`` splits into ``("user", "addresses", "2",
"street")``; bracket indices become their own segment, so ``a[2]`` and
``a.2`` are interchangeable once parsed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import lru_cache

from ..config import NESTPATH_CONFIG
from ..errors import PathSyntaxError
from ..runtime.logging import get_logger

Segments = tuple[str, ...]

_RESERVED = frozenset(".[]")

_split_cached: Callable[[str], Segments] | None = None
_split_cache_size: int | None = None


def _parse_segment(segment: str, path: str) -> list[str]:
    if not segment:
        raise PathSyntaxError(path, "empty segment")
    name_chars: list[str] = []
    keys: list[str] = []
    index = 0
    length = len(segment)
    while index < length and segment[index] != "[":
        if segment[index] == "]":
            raise PathSyntaxError(path, f"unmatched ']' in segment {segment!r}")
        name_chars.append(segment[index])
        index += 1
    name = "".join(name_chars)
    if not name:
        raise PathSyntaxError(path, f"segment {segment!r} has no name before '['")
    while index < length:
        if segment[index] != "[":
            raise PathSyntaxError(
                path, f"unexpected {segment[index]!r} after index in {segment!r}"
            )
        close = segment.find("]", index + 1)
        if close == -1:
            raise PathSyntaxError(path, f"unterminated index in segment {segment!r}")
        token = segment[index + 1 : close]
        if not token:
            raise PathSyntaxError(path, f"empty index in segment {segment!r}")
        if not (token.isdigit() and token.isascii()):
            raise PathSyntaxError(
                path, f"index {token!r} in segment {segment!r} is not a non-negative integer"
            )
        keys.append(token)
        index = close + 1
    return [name, *keys]


def _split_uncached(path: str) -> Segments:
    if not path:
        return ()
    segments: list[str] = []
    for segment in path.split("."):
        segments.extend(_parse_segment(segment, path))
    return tuple(segments)


def _splitter() -> Callable[[str], Segments]:
    global _split_cached, _split_cache_size

    size = NESTPATH_CONFIG.segment_cache_size
    if _split_cached is None or _split_cache_size != size:
        if _split_cached is not None:
            get_logger().debug(
                "segment cache resized from %s to %s", _split_cache_size, size
            )
        _split_cached = lru_cache(maxsize=size)(_split_uncached)
        _split_cache_size = size
    return _split_cached


def split_path(path: str) -> Segments:
    """Split ``path`` into its ordered segment keys.

    The empty string is the root path and yields ``()``. Malformed paths raise
    ``PathSyntaxError``.
    """

    if not isinstance(path, str):
        raise PathSyntaxError(path, f"path must be a str, got {type(path).__name__}")
    return _splitter()(path)


def join_path(segments: Iterable[str | int]) -> str:
    """Render segment keys back into dotted form.

    Numeric segments are written with dots (``a.0.b``), which ``split_path``
    reads back to the same tuple.
    """

    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, bool):
            raise PathSyntaxError(segment, "segments must be str or int")
        if isinstance(segment, int):
            if segment < 0:
                raise PathSyntaxError(segment, "negative indices are not supported")
            parts.append(str(segment))
            continue
        if not isinstance(segment, str):
            raise PathSyntaxError(segment, "segments must be str or int")
        if not segment:
            raise PathSyntaxError(segment, "empty segment")
        if _RESERVED.intersection(segment):
            raise PathSyntaxError(segment, "segment may not contain '.', '[' or ']'")
        parts.append(segment)
    return ".".join(parts)


def clear_segment_cache() -> None:
    global _split_cached, _split_cache_size

    _split_cached = None
    _split_cache_size = None


__all__ = ["Segments", "clear_segment_cache", "join_path", "split_path"]
