"""
Dictionary provider singleton and its persistent cache.

The provider is built once per process. Its loader prefers the cached
tables in the database and falls back to the built-in vocabulary; a build
from built-in data is written back to the cache on a background thread so
lookups never wait on I/O.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from Gloss.dicts import TableProvider, load_builtin_tables
from Gloss.dicts.provider import Descriptor, Tables

from .. import config
from ..db import global_session
from ..models import DictionaryTable, SignDictionaryEntry
from ..utils.exceptions import CacheError, DatabaseError, GlossError, handle_error

logger = logging.getLogger(__name__)


def store_sign_dictionary(db: Session, words: Dict[str, Descriptor], phrases: Dict[str, Descriptor]) -> int:
    """Upsert every entry of both tables, keeping table order. Returns the entry count."""
    now = datetime.now(timezone.utc)
    count = 0
    try:
        for table, entries in ((DictionaryTable.WORD, words), (DictionaryTable.PHRASE, phrases)):
            for position, (key, desc) in enumerate(entries.items()):
                db.merge(
                    SignDictionaryEntry(
                        key=key,
                        table=table.value,
                        kind=desc.kind,
                        color=desc.color,
                        glyph=desc.glyph,
                        position=position,
                        last_updated=now,
                    )
                )
                count += 1
        db.commit()
    except Exception as e:
        db.rollback()
        raise CacheError(f"Failed to store sign dictionary: {e}", operation="store") from e
    logger.info(f"[CACHE] Synced {count} sign dictionary entries")
    return count


def load_sign_dictionary(db: Session) -> Optional[Tuple[Dict[str, Dict[str, Any]], Dict[str, Dict[str, Any]]]]:
    """Return cached ``(words, phrases)`` in stored order, or None when the cache is empty."""
    try:
        rows = (
            db.query(SignDictionaryEntry)
            .order_by(SignDictionaryEntry.table, SignDictionaryEntry.position)
            .all()
        )
    except SQLAlchemyError as e:
        raise DatabaseError(f"Failed to load sign dictionary: {e}", operation="load") from e
    except Exception as e:
        raise CacheError(f"Failed to load sign dictionary: {e}", operation="load") from e
    if not rows:
        return None
    words: Dict[str, Dict[str, Any]] = {}
    phrases: Dict[str, Dict[str, Any]] = {}
    for row in rows:
        target = phrases if row.table == DictionaryTable.PHRASE.value else words
        target[row.key] = {"kind": row.kind, "color": row.color, "glyph": row.glyph}
    logger.info(f"[CACHE] Loaded {len(rows)} sign dictionary entries")
    return words, phrases


def has_cached_dictionary(db: Session) -> bool:
    try:
        return db.query(SignDictionaryEntry.key).first() is not None
    except Exception:
        return False


class CachedDictionaryLoader:
    """Loader for :class:`TableProvider` that reads the cache before built-in data."""

    def __init__(self, session_factory=global_session) -> None:
        self.session_factory = session_factory
        self.source: Optional[str] = None
        # Classified failure of the last cache read, if it fell back
        self.last_error: Optional[GlossError] = None

    def __call__(self):
        try:
            with self.session_factory() as db:
                cached = load_sign_dictionary(db)
            self.last_error = None
            if cached is not None:
                self.source = "cache"
                return cached
        except Exception as e:
            self.last_error = handle_error(e, "[CACHE] Falling back to built-in dictionary", logger)
        self.source = "builtin"
        return load_builtin_tables()


def _sync_in_background(provider: TableProvider, tables: Tables, session_factory) -> None:
    def _run():
        try:
            with session_factory() as db:
                store_sign_dictionary(db, *tables)
        except Exception as e:
            logger.error(f"[CACHE] Background sync failed: {e}")

    threading.Thread(target=_run, name="sign-dictionary-sync", daemon=True).start()


def create_dictionary_provider(session_factory=global_session, sync: Optional[bool] = None) -> TableProvider:
    loader = CachedDictionaryLoader(session_factory)
    do_sync = config.CACHE_SYNC if sync is None else sync

    def _on_built(provider: TableProvider) -> None:
        if do_sync and loader.source == "builtin":
            _sync_in_background(provider, provider.snapshot(), session_factory)

    provider = TableProvider(loader, on_built=_on_built, name="sign-dictionary")
    return provider


# Singleton instance
_provider_instance: Optional[TableProvider] = None
_provider_lock = threading.Lock()


def get_dictionary_provider() -> TableProvider:
    """Get or create the process-wide dictionary provider."""
    global _provider_instance
    if _provider_instance is None:
        with _provider_lock:
            if _provider_instance is None:
                _provider_instance = create_dictionary_provider()
    return _provider_instance


def refresh_dictionary_provider() -> TableProvider:
    provider = get_dictionary_provider()
    provider.refresh()
    return provider


def reset_dictionary_provider() -> None:
    global _provider_instance
    with _provider_lock:
        _provider_instance = None


def dictionary_status(provider: TableProvider) -> Dict[str, Any]:
    """Where the provider's tables came from and why, for health reporting."""
    loader = provider.loader
    last_error = getattr(loader, "last_error", None)
    return {
        "dictionary_built": provider.is_built,
        "dictionary_source": getattr(loader, "source", None),
        "dictionary_error": last_error.error_code if last_error is not None else None,
    }
