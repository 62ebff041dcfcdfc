from __future__ import annotations


class _NestpathMissing:
    """Sentinel for values that were not found while resolving a path."""

    _instance: _NestpathMissing | None = None

    def __new__(cls) -> _NestpathMissing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "nestpath.MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _NestpathMissing:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> _NestpathMissing:
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _NestpathMissing()


class NestpathError(Exception):
    """Base class for all nestpath errors."""


class PathSyntaxError(NestpathError, ValueError):
    """Raised when a path string does not follow the dotted path grammar."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid path {path!r}: {reason}")


class PathWriteError(NestpathError, TypeError):
    """Raised when a write cannot reach or assign its target slot."""

    def __init__(self, path: str, segment: str, reason: str) -> None:
        self.path = path
        self.segment = segment
        self.reason = reason
        super().__init__(f"cannot write {path!r} at segment {segment!r}: {reason}")


class PathValidationError(NestpathError, ValueError):
    """Raised when a path does not exist on a declared type."""


class ConfigError(NestpathError, ValueError):
    """Raised for invalid nestpath configuration values."""


__all__ = [
    "ConfigError",
    "MISSING",
    "NestpathError",
    "PathSyntaxError",
    "PathValidationError",
    "PathWriteError",
]
