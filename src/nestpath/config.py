from __future__ import annotations

import logging
import os
from typing import Literal, cast, get_args

from .errors import ConfigError

CreateMissingMode = Literal["absent", "falsy"]

_DEFAULT_CREATE_MISSING: CreateMissingMode = "absent"
_DEFAULT_SEGMENT_CACHE_SIZE = 1024
_DEFAULT_LOG_LEVEL = "WARNING"


def _parse_create_missing(raw: str) -> CreateMissingMode:
    value = raw.strip().lower()
    if value not in get_args(CreateMissingMode):
        raise ConfigError(
            f"create_missing must be one of {get_args(CreateMissingMode)}, got {raw!r}"
        )
    return cast(CreateMissingMode, value)


def _parse_cache_size(raw: str | int) -> int:
    if isinstance(raw, bool):
        raise ConfigError(f"segment_cache_size must be an integer, got {raw!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"segment_cache_size must be an integer, got {raw!r}"
        ) from exc
    if value < 0:
        raise ConfigError(f"segment_cache_size must be >= 0, got {value}")
    return value


def _parse_log_level(raw: str | int) -> str:
    if isinstance(raw, int) and not isinstance(raw, bool):
        name = logging.getLevelName(raw)
        if not isinstance(name, str) or name.startswith("Level "):
            raise ConfigError(f"unknown log level {raw!r}")
        return name
    if not isinstance(raw, str):
        raise ConfigError(f"log level must be a string or int, got {type(raw)}")
    name = raw.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigError(f"unknown log level {raw!r}")
    return name


class NestpathConfig:
    """Process-wide nestpath settings.

    Values are read from ``NESTPATH_*`` environment variables on construction
    and validated again whenever an attribute is assigned.
    """

    def __init__(self) -> None:
        self._create_missing: CreateMissingMode = _parse_create_missing(
            os.getenv("NESTPATH_CREATE_MISSING", _DEFAULT_CREATE_MISSING)
        )
        self._segment_cache_size = _parse_cache_size(
            os.getenv("NESTPATH_SEGMENT_CACHE_SIZE", str(_DEFAULT_SEGMENT_CACHE_SIZE))
        )
        self._log_level = _parse_log_level(
            os.getenv("NESTPATH_LOG_LEVEL", _DEFAULT_LOG_LEVEL)
        )

    @property
    def create_missing(self) -> CreateMissingMode:
        return self._create_missing

    @create_missing.setter
    def create_missing(self, value: str) -> None:
        if not isinstance(value, str):
            raise ConfigError(f"create_missing must be a string, got {type(value)}")
        self._create_missing = _parse_create_missing(value)

    @property
    def segment_cache_size(self) -> int:
        return self._segment_cache_size

    @segment_cache_size.setter
    def segment_cache_size(self, value: int) -> None:
        self._segment_cache_size = _parse_cache_size(value)

    @property
    def log_level(self) -> str:
        return self._log_level

    @log_level.setter
    def log_level(self, value: str | int) -> None:
        self._log_level = _parse_log_level(value)

    def __repr__(self) -> str:
        return (
            f"NestpathConfig(create_missing={self._create_missing!r}, "
            f"segment_cache_size={self._segment_cache_size}, "
            f"log_level={self._log_level!r})"
        )


NESTPATH_CONFIG = NestpathConfig()
