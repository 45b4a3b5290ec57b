"""Render contract between the scheduler and whatever paints frames.

The scheduler only computes ``progress``; these helpers pin down how a
renderer is expected to turn it into size so every backend animates the
same way.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from Gloss.dicts.provider import Descriptor


GLYPH_BASE_SCALE = 0.5
SHAPE_BASE_RADIUS = 30.0
SHAPE_RADIUS_GROWTH = 20.0


class Renderer(Protocol):
    def render(self, descriptor: Descriptor, progress: float, unit: str) -> None:
        ...

    def render_idle(self) -> None:
        ...


def glyph_scale(progress: float) -> float:
    """Glyph scale factor: half size at 0, full size at 1."""
    return GLYPH_BASE_SCALE + (1.0 - GLYPH_BASE_SCALE) * progress


def shape_radius(progress: float) -> float:
    """Radius of the fallback shape drawn for glyph-less descriptors."""
    return SHAPE_BASE_RADIUS + SHAPE_RADIUS_GROWTH * progress


def frame_payload(descriptor: Descriptor, progress: float, unit: Optional[str] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "unit": unit,
        "kind": descriptor.kind,
        "color": descriptor.color,
        "glyph": descriptor.glyph,
        "progress": round(progress, 4),
    }
    if descriptor.glyph:
        payload["glyph_scale"] = round(glyph_scale(progress), 4)
    else:
        payload["shape_radius"] = round(shape_radius(progress), 4)
    return payload
