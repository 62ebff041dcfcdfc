from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import NESTPATH_CONFIG, CreateMissingMode, NestpathConfig
from .path.segments import clear_segment_cache

_CONFIG_FIELDS = ("create_missing", "segment_cache_size", "log_level")


@dataclass(frozen=True)
class _NestpathConfigSnapshot:
    create_missing: CreateMissingMode
    segment_cache_size: int
    log_level: str

    @classmethod
    def capture(cls) -> "_NestpathConfigSnapshot":
        return cls(
            create_missing=NESTPATH_CONFIG.create_missing,
            segment_cache_size=NESTPATH_CONFIG.segment_cache_size,
            log_level=NESTPATH_CONFIG.log_level,
        )

    def restore(self) -> None:
        NESTPATH_CONFIG.create_missing = self.create_missing
        NESTPATH_CONFIG.segment_cache_size = self.segment_cache_size
        NESTPATH_CONFIG.log_level = self.log_level


@contextmanager
def nestpath_test_env(**overrides: object) -> Generator[None, None, None]:
    """Apply config overrides for the duration of the block.

    The previous configuration is restored and the segment cache cleared on
    exit, even if the block raises.
    """
    unknown = set(overrides) - set(_CONFIG_FIELDS)
    if unknown:
        raise TypeError(f"unknown nestpath config fields: {sorted(unknown)}")
    snapshot = _NestpathConfigSnapshot.capture()
    try:
        for name, value in overrides.items():
            setattr(NESTPATH_CONFIG, name, value)
        yield
    finally:
        snapshot.restore()
        clear_segment_cache()


@pytest.fixture()
def nestpath_config() -> Generator[NestpathConfig, None, None]:
    """Yield the live config; any changes are undone after the test."""
    with nestpath_test_env():
        yield NESTPATH_CONFIG
