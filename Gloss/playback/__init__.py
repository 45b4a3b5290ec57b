from __future__ import annotations

from .hosts import AsyncioHost
from .render import Renderer, frame_payload, glyph_scale, shape_radius
from .scheduler import Host, PlaybackScheduler, ScheduleState, SchedulerState
from .timing import (
    DEFAULT_TIMING,
    PlaybackItem,
    Timing,
    make_item,
    pause_duration_ms,
    plan_playback,
    total_duration_ms,
    unit_duration_ms,
)

__all__ = [
    "AsyncioHost",
    "DEFAULT_TIMING",
    "Host",
    "PlaybackItem",
    "PlaybackScheduler",
    "Renderer",
    "ScheduleState",
    "SchedulerState",
    "Timing",
    "frame_payload",
    "glyph_scale",
    "make_item",
    "pause_duration_ms",
    "plan_playback",
    "shape_radius",
    "total_duration_ms",
    "unit_duration_ms",
]
