from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class _Settings:
    DB_URL: str = os.getenv("SIGN_DB_URL", "sqlite:///data/signs.db")
    STREAM_MAX_SEC: float = float(os.getenv("SIGN_STREAM_MAX_SEC", "120"))
    LOG_LEVEL: str = os.getenv("SIGN_LOG_LEVEL", "INFO")


_SETTINGS = _Settings()


def get_settings() -> _Settings:
    return _SETTINGS
