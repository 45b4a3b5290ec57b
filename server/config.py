from __future__ import annotations

import os

from Gloss.playback.timing import Timing


def _b(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    v2 = v.strip().lower()
    return v2 in ("1", "true", "yes", "on", "y")


def _f(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except Exception:
        return default


def _i(name: str, default: int) -> int:
    try:
        return int(float(os.getenv(name, str(default))))
    except Exception:
        return default


# Playback timing (milliseconds at speed 1.0)
BASE_DURATION_MS: float = _f("SIGN_BASE_DURATION_MS", 1500.0)
PHRASE_FACTOR: float = _f("SIGN_PHRASE_FACTOR", 1.3)
WORD_PAUSE_MS: float = _f("SIGN_WORD_PAUSE_MS", 500.0)
PHRASE_PAUSE_MS: float = _f("SIGN_PHRASE_PAUSE_MS", 600.0)
TICK_INTERVAL_MS: float = _f("SIGN_TICK_INTERVAL_MS", 16.0)

# Speed range exposed to clients; the engine itself only needs speed > 0
SPEED_MIN: float = _f("SIGN_SPEED_MIN", 0.5)
SPEED_MAX: float = _f("SIGN_SPEED_MAX", 2.0)

# Write the built-in dictionary to the cache table after the first build
CACHE_SYNC: bool = _b("SIGN_CACHE_SYNC", True)

# Upper bound on units accepted per request
MAX_UNITS: int = _i("SIGN_MAX_UNITS", 500)


def get_timing() -> Timing:
    return Timing(
        base_duration_ms=BASE_DURATION_MS,
        phrase_factor=PHRASE_FACTOR,
        word_pause_ms=WORD_PAUSE_MS,
        phrase_pause_ms=PHRASE_PAUSE_MS,
        tick_interval_ms=TICK_INTERVAL_MS,
    )


def clamp_speed(speed: float) -> float:
    return min(max(float(speed), SPEED_MIN), SPEED_MAX)
