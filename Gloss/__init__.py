"""Text-to-sign engine: normalize, segment into sign units, and schedule playback."""

from .normalize import normalize
from .resolve import DEFAULT_DESCRIPTOR, resolve
from .tokenize import tokenize

__version__ = "0.1.0"

__all__ = ["DEFAULT_DESCRIPTOR", "normalize", "resolve", "tokenize"]
