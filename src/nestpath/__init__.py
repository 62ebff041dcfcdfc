"""
nestpath: read and write nested values by dotted path.

This package uses a src-layout. Import the package as `nestpath`.
"""

from importlib.metadata import version

__version__ = version("nestpath")

from .config import NESTPATH_CONFIG, NestpathConfig
from .errors import (
    MISSING,
    ConfigError,
    NestpathError,
    PathSyntaxError,
    PathValidationError,
    PathWriteError,
)
from .path import (
    P,
    PathRef,
    clear_segment_cache,
    join_path,
    read,
    resolve,
    split_path,
    write,
)
from .runtime import configure_logging, get_logger
from .schema import iter_paths, path_type, validate_path

__all__ = [
    "__version__",
    "ConfigError",
    "MISSING",
    "NESTPATH_CONFIG",
    "NestpathConfig",
    "NestpathError",
    "P",
    "PathRef",
    "PathSyntaxError",
    "PathValidationError",
    "PathWriteError",
    "clear_segment_cache",
    "configure_logging",
    "get_logger",
    "iter_paths",
    "join_path",
    "path_type",
    "read",
    "resolve",
    "split_path",
    "validate_path",
    "write",
]
