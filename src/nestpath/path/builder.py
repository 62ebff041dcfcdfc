from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .read import read
from .segments import join_path, split_path
from .write import write


@dataclass(frozen=True)
class PathRef:
    """Attribute-style path construction: ``P.user.tags[0].path == "user.tags.0"``.

    Keys that collide with ``PathRef``'s own members (``path``, ``segments``,
    ``read``, ``write``) are reached with item syntax: ``P.config["read"]``.
    """

    path: str = ""

    def _child(self, segment: str | int) -> PathRef:
        rendered = join_path([segment])
        if not self.path:
            return PathRef(path=rendered)
        return PathRef(path=f"{self.path}.{rendered}")

    def __getattr__(self, segment: str) -> PathRef:
        if segment.startswith("_"):
            raise AttributeError(segment)
        return self._child(segment)

    def __getitem__(self, key: int | str) -> PathRef:
        if isinstance(key, bool):
            raise TypeError("path keys must be str or int, not bool")
        if isinstance(key, int):
            if key < 0:
                raise ValueError("negative indices are not supported in paths")
            return self._child(key)
        if not isinstance(key, str):
            raise TypeError(f"path keys must be str or int, got {type(key).__name__}")
        if not key:
            raise ValueError("string keys in paths cannot be empty")
        if "." in key or "[" in key or "]" in key:
            raise ValueError("string keys in paths may not contain '.', '[' or ']'")
        return self._child(key)

    @property
    def segments(self) -> tuple[str, ...]:
        return split_path(self.path)

    def read(self, root: Any, fallback: Any = None) -> Any:
        return read(root, self.path, fallback)

    def write(self, root: Any, value: Any) -> None:
        write(root, self.path, value)

    def __str__(self) -> str:
        return self.path


P = PathRef()

__all__ = ["P", "PathRef"]
