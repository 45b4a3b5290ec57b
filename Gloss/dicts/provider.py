from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple

from Gloss.errors import DictionaryError
from Gloss.normalize import strip_punctuation
from Gloss.tokenize.base import MAX_PHRASE_WORDS, MIN_PHRASE_WORDS, word_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Descriptor:
    """Resolved visual identity of a sign unit."""

    kind: str
    color: str
    glyph: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_value(cls, value: Any) -> "Descriptor":
        if isinstance(value, Descriptor):
            return value
        if isinstance(value, Mapping):
            # "type"/"emoji" are the field names used by exported dictionaries
            kind = value.get("kind", value.get("type"))
            glyph = value.get("glyph", value.get("emoji"))
            if not kind or not value.get("color"):
                raise ValueError(f"descriptor needs kind and color: {dict(value)!r}")
            return cls(kind=str(kind), color=str(value["color"]), glyph=glyph or None)
        raise TypeError(f"cannot build Descriptor from {type(value).__name__}")


Table = Dict[str, Descriptor]
Tables = Tuple[Table, Table]


def _key(s: str) -> str:
    return " ".join(s.lower().split())


def build_tables(words: Mapping[str, Any], phrases: Mapping[str, Any]) -> Tables:
    """Convert raw word/phrase mappings into lookup tables.

    Keys are normalized (lowercase, single spaces). Word keys must be one
    word and phrase keys 2-5 words; anything else is skipped. Insertion
    order of the source mappings is preserved.
    """
    word_table: Table = {}
    phrase_table: Table = {}
    for raw, value in words.items():
        k = _key(raw)
        if word_count(k) != 1:
            logger.warning(f"[DICT] Skipping word entry {raw!r}: not a single word")
            continue
        word_table.setdefault(k, Descriptor.from_value(value))
    for raw, value in phrases.items():
        k = _key(raw)
        if not MIN_PHRASE_WORDS <= word_count(k) <= MAX_PHRASE_WORDS:
            logger.warning(f"[DICT] Skipping phrase entry {raw!r}: needs {MIN_PHRASE_WORDS}-{MAX_PHRASE_WORDS} words")
            continue
        phrase_table.setdefault(k, Descriptor.from_value(value))
    return word_table, phrase_table


class DictionaryProvider:
    def lookup_word(self, key: str) -> Optional[Descriptor]:
        raise NotImplementedError

    def lookup_phrase(self, key: str) -> Optional[Descriptor]:
        raise NotImplementedError

    def iter_words(self) -> Iterator[Tuple[str, Descriptor]]:
        raise NotImplementedError


class TableProvider(DictionaryProvider):
    """In-memory word and phrase tables, built lazily once.

    ``loader`` returns raw ``(words, phrases)`` mappings. The first lookup
    builds the tables under a lock so that every engine sharing this
    provider observes a single build; afterwards the tables are read-only
    until :meth:`refresh` is called. ``on_built`` runs after each build and
    is the place to hang an out-of-band cache sync.
    """

    def __init__(
        self,
        loader: Callable[[], Tuple[Mapping[str, Any], Mapping[str, Any]]],
        on_built: Optional[Callable[["TableProvider"], None]] = None,
        name: str = "tables",
    ) -> None:
        self._loader = loader
        self._on_built = on_built
        self.name = name
        self._lock = threading.Lock()
        self._tables: Optional[Tables] = None
        self.build_count = 0

    @classmethod
    def from_mappings(cls, words: Mapping[str, Any], phrases: Mapping[str, Any], **kwargs) -> "TableProvider":
        return cls(lambda: (words, phrases), **kwargs)

    @property
    def loader(self) -> Callable[[], Tuple[Mapping[str, Any], Mapping[str, Any]]]:
        return self._loader

    @property
    def is_built(self) -> bool:
        return self._tables is not None

    def _ensure(self) -> Tables:
        tables = self._tables
        if tables is not None:
            return tables
        with self._lock:
            if self._tables is None:
                self._tables = self._build()
                built = True
            else:
                built = False
            tables = self._tables
        if built:
            self._notify()
        return tables

    def _build(self) -> Tables:
        try:
            words, phrases = self._loader()
            tables = build_tables(words, phrases)
        except Exception as e:
            raise DictionaryError(f"Failed to build {self.name}: {e}", details={"provider": self.name}) from e
        self.build_count += 1
        logger.info(f"[DICT] Built {self.name}: {len(tables[0])} words, {len(tables[1])} phrases")
        return tables

    def _notify(self) -> None:
        if self._on_built is None:
            return
        try:
            self._on_built(self)
        except Exception as e:
            logger.error(f"[DICT] on_built hook failed for {self.name}: {e}", exc_info=True)

    def refresh(self) -> None:
        """Rebuild the tables from the loader."""
        with self._lock:
            self._tables = self._build()
        self._notify()

    def snapshot(self) -> Tables:
        words, phrases = self._ensure()
        return dict(words), dict(phrases)

    def lookup_word(self, key: str) -> Optional[Descriptor]:
        words, _ = self._ensure()
        return words.get(key)

    def lookup_phrase(self, key: str) -> Optional[Descriptor]:
        _, phrases = self._ensure()
        k = _key(key)
        found = phrases.get(k)
        if found is None:
            bare = _key(strip_punctuation(k))
            if bare != k:
                found = phrases.get(bare)
        return found

    def iter_words(self) -> Iterator[Tuple[str, Descriptor]]:
        words, _ = self._ensure()
        return iter(words.items())
