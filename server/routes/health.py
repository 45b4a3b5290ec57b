from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from Gloss.dicts import TableProvider

from ..db import check_db_health
from ..services.dictionary_service import dictionary_status, get_dictionary_provider


router = APIRouter(tags=["system"])


@router.get("/health")
def health(provider: TableProvider = Depends(get_dictionary_provider)) -> Dict[str, Any]:
    return {
        "status": "ok",
        "database": "ok" if check_db_health() else "unavailable",
        **dictionary_status(provider),
    }
