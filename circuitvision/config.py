"""
Settings loaded from the environment (.env supported)
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_TARGET_PLATFORM = "ESP32"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_SOURCE_CHARS = 500_000


@dataclass(frozen=True)
class Settings:
    target_platform: str = DEFAULT_TARGET_PLATFORM
    log_level: str = DEFAULT_LOG_LEVEL
    max_source_chars: int = DEFAULT_MAX_SOURCE_CHARS

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.WARNING)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def get_settings(load_env_file: bool = True) -> Settings:
    """Read CIRCUITVISION_* variables, loading a .env file first if present."""
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        target_platform=os.getenv("CIRCUITVISION_TARGET_PLATFORM") or DEFAULT_TARGET_PLATFORM,
        log_level=os.getenv("CIRCUITVISION_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        max_source_chars=_int_env("CIRCUITVISION_MAX_SOURCE_CHARS", DEFAULT_MAX_SOURCE_CHARS),
    )
