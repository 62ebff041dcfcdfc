from .builder import P, PathRef
from .read import read, resolve
from .segments import Segments, clear_segment_cache, join_path, split_path
from .write import write

__all__ = [
    "P",
    "PathRef",
    "Segments",
    "clear_segment_cache",
    "join_path",
    "read",
    "resolve",
    "split_path",
    "write",
]
