from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from Gloss.dicts.provider import Descriptor, DictionaryProvider
from Gloss.errors import require_positive_speed
from Gloss.normalize import normalize
from Gloss.resolve import resolve
from Gloss.tokenize.base import SignUnit, is_phrase
from Gloss.tokenize.phrases import tokenize


@dataclass(frozen=True)
class Timing:
    base_duration_ms: float = 1500.0
    phrase_factor: float = 1.3
    word_pause_ms: float = 500.0
    phrase_pause_ms: float = 600.0
    tick_interval_ms: float = 16.0


DEFAULT_TIMING = Timing()


@dataclass(frozen=True)
class PlaybackItem:
    """One unit as it is about to play."""

    unit: SignUnit
    descriptor: Descriptor
    duration_ms: float
    pause_ms: float
    is_phrase: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unit": self.unit,
            "kind": self.descriptor.kind,
            "color": self.descriptor.color,
            "glyph": self.descriptor.glyph,
            "is_phrase": self.is_phrase,
            "duration_ms": self.duration_ms,
            "pause_ms": self.pause_ms,
        }


def unit_duration_ms(phrase: bool, speed: float, timing: Timing = DEFAULT_TIMING) -> float:
    speed = require_positive_speed(speed)
    base = timing.base_duration_ms * (timing.phrase_factor if phrase else 1.0)
    return base / speed


def pause_duration_ms(phrase: bool, speed: float, timing: Timing = DEFAULT_TIMING) -> float:
    speed = require_positive_speed(speed)
    return (timing.phrase_pause_ms if phrase else timing.word_pause_ms) / speed


def make_item(
    unit: SignUnit,
    provider: DictionaryProvider,
    speed: float,
    timing: Timing = DEFAULT_TIMING,
) -> PlaybackItem:
    phrase = is_phrase(unit)
    return PlaybackItem(
        unit=unit,
        descriptor=resolve(unit, provider),
        duration_ms=unit_duration_ms(phrase, speed, timing),
        pause_ms=pause_duration_ms(phrase, speed, timing),
        is_phrase=phrase,
    )


def plan_playback(
    text: str,
    provider: DictionaryProvider,
    speed: float = 1.0,
    timing: Optional[Timing] = None,
) -> List[PlaybackItem]:
    """Static preview of the schedule a scheduler would play for ``text``."""
    timing = timing or DEFAULT_TIMING
    require_positive_speed(speed)
    units = tokenize(normalize(text), provider.lookup_phrase)
    return [make_item(u, provider, speed, timing) for u in units]


def total_duration_ms(items: List[PlaybackItem]) -> float:
    return sum(it.duration_ms + it.pause_ms for it in items)
