"""
Engine exception classes.

Only configuration misuse is surfaced to callers; lookup misses and
tokenization problems are absorbed inside the engine.
"""

import math
from typing import Optional


class GlossError(Exception):
    """Base exception class for sign engine errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(GlossError):
    """Raised when a caller supplies an invalid playback configuration."""

    def __init__(self, message: str, config_key: Optional[str] = None, value: Optional[object] = None, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)
        self.config_key = config_key
        self.value = value


class DictionaryError(GlossError):
    """Raised when a dictionary provider cannot build its tables."""

    def __init__(self, message: str, table: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="DICTIONARY_ERROR", **kwargs)
        self.table = table


def require_positive_speed(speed: float) -> float:
    try:
        value = float(speed)
    except (TypeError, ValueError):
        raise ConfigurationError(f"speed must be a number, got {speed!r}", config_key="speed", value=speed)
    if not math.isfinite(value) or not value > 0:
        raise ConfigurationError(f"speed must be a finite number > 0, got {speed!r}", config_key="speed", value=speed)
    return value
