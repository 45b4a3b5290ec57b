"""Request/response schemas for the sign API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    status: str = Field("error", description="Always 'error' for errors")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Additional error details (optional)"
    )


class DescriptorOut(BaseModel):
    kind: str
    color: str
    glyph: Optional[str] = None


class PlanRequest(BaseModel):
    text: str = Field(..., max_length=10_000, description="Raw text to sign")
    speed: float = Field(1.0, description="Speed multiplier; clamped to the supported range")


class PlanItem(BaseModel):
    unit: str
    kind: str
    color: str
    glyph: Optional[str] = None
    is_phrase: bool
    duration_ms: float
    pause_ms: float


class PlanResponse(BaseModel):
    normalized: str
    speed: float
    units: List[str]
    items: List[PlanItem]
    total_ms: float


class LookupResponse(BaseModel):
    unit: str
    normalized: str
    is_phrase: bool
    descriptor: DescriptorOut


class RefreshResponse(BaseModel):
    status: str = "ok"
    words: int
    phrases: int
