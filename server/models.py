"""Persistent cache of the sign dictionary."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlalchemy import String, Integer, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from server.db import Base


class DictionaryTable(str, Enum):
    """Which lookup table an entry belongs to."""
    WORD = "word"
    PHRASE = "phrase"


class SignDictionaryEntry(Base):
    """One word or phrase entry of the cached sign dictionary."""
    __tablename__ = "sign_dictionary"
    __table_args__ = (
        Index("ix_sign_dictionary_table_position", "table", "position"),
    )

    # Normalized lookup key, e.g. 'hello' or 'thank you'
    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    table: Mapped[str] = mapped_column(String(16), primary_key=True)
    kind: Mapped[str] = mapped_column(String(64))
    color: Mapped[str] = mapped_column(String(16))
    glyph: Mapped[Optional[str]] = mapped_column(String(32), default=None, nullable=True)
    # Order within its table; partial matching depends on it
    position: Mapped[int] = mapped_column(Integer, default=0)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
