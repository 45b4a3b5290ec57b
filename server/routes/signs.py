from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from Gloss.dicts import TableProvider
from Gloss.errors import require_positive_speed
from Gloss.normalize import normalize
from Gloss.playback import make_item, total_duration_ms
from Gloss.resolve import resolve
from Gloss.tokenize import PhraseTokenizer, SignUnit, is_phrase

from .. import config
from ..schemas import (
    DescriptorOut,
    LookupResponse,
    PlanItem,
    PlanRequest,
    PlanResponse,
    RefreshResponse,
)
from ..services.dictionary_service import get_dictionary_provider
from ..services.playback_stream import SSE_HEADERS, stream_playback
from ..settings import get_settings


router = APIRouter(prefix="/api/signs", tags=["signs"])
logger = logging.getLogger(__name__)


def _speed(speed: float) -> float:
    # Non-positive speeds pass through so the engine rejects them
    return config.clamp_speed(speed) if speed > 0 else speed


def _units(text: str, provider: TableProvider) -> List[SignUnit]:
    """Tokenize and enforce the per-request unit limit before anything is resolved."""
    units = PhraseTokenizer(provider).tokenize_text(text)
    if len(units) > config.MAX_UNITS:
        raise HTTPException(status_code=413, detail=f"too many sign units (max {config.MAX_UNITS})")
    return units


@router.post("/plan", response_model=PlanResponse)
def plan(req: PlanRequest, provider: TableProvider = Depends(get_dictionary_provider)) -> PlanResponse:
    speed = require_positive_speed(_speed(req.speed))
    timing = config.get_timing()
    units = _units(req.text, provider)
    items = [make_item(u, provider, speed, timing) for u in units]
    logger.debug(f"[SIGNS] Planned {len(items)} unit(s) at speed={speed}")
    return PlanResponse(
        normalized=normalize(req.text),
        speed=speed,
        units=units,
        items=[PlanItem(**it.to_dict()) for it in items],
        total_ms=total_duration_ms(items),
    )


@router.get("/lookup", response_model=LookupResponse)
def lookup(
    unit: str = Query(..., min_length=1, max_length=200),
    provider: TableProvider = Depends(get_dictionary_provider),
) -> LookupResponse:
    key = normalize(unit)
    if not key:
        raise HTTPException(status_code=400, detail="unit is empty after normalization")
    desc = resolve(key, provider)
    return LookupResponse(
        unit=unit,
        normalized=key,
        is_phrase=is_phrase(key),
        descriptor=DescriptorOut(**desc.to_dict()),
    )


@router.get("/stream")
async def stream(
    text: str = Query("", max_length=10_000),
    speed: float = Query(1.0),
    provider: TableProvider = Depends(get_dictionary_provider),
) -> StreamingResponse:
    # Validate before the response starts so misuse is a plain 4xx
    speed = require_positive_speed(_speed(speed))
    _units(text, provider)
    timing = config.get_timing()
    return StreamingResponse(
        content=stream_playback(text, speed, provider, timing, get_settings().STREAM_MAX_SEC),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.post("/dictionary/refresh", response_model=RefreshResponse)
def refresh_dictionary(provider: TableProvider = Depends(get_dictionary_provider)) -> RefreshResponse:
    provider.refresh()
    words, phrases = provider.snapshot()
    return RefreshResponse(words=len(words), phrases=len(phrases))
