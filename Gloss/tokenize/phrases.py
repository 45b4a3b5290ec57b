from __future__ import annotations

import logging
from typing import List, Optional, TYPE_CHECKING

from Gloss.normalize import normalize
from .base import MAX_PHRASE_WORDS, MIN_PHRASE_WORDS, PhraseLookup, SignUnit, Tokenizer

if TYPE_CHECKING:
    from Gloss.dicts.provider import DictionaryProvider

logger = logging.getLogger(__name__)


def _phrase_known(lookup: PhraseLookup, candidate: str) -> bool:
    try:
        return lookup(candidate) is not None
    except Exception as e:
        logger.debug(f"[TOKENIZE] phrase lookup failed for {candidate!r}: {e}")
        return False


def tokenize(
    normalized: str,
    phrase_lookup: PhraseLookup,
    max_phrase_words: int = MAX_PHRASE_WORDS,
) -> List[SignUnit]:
    """Forward maximum matching of registered phrases over normalized text.

    At each position the longest window (``max_phrase_words`` down to 2
    words) accepted by ``phrase_lookup`` becomes one unit; otherwise the
    single word does. Units partition the word list exactly, in order.
    """
    if not normalized:
        return []
    words = normalized.split(" ")
    n = len(words)
    out: List[SignUnit] = []
    i = 0
    while i < n:
        L = min(max_phrase_words, n - i)
        found: Optional[str] = None
        while L >= MIN_PHRASE_WORDS:
            cand = " ".join(words[i : i + L])
            if _phrase_known(phrase_lookup, cand):
                found = cand
                break
            L -= 1
        if found is None:
            found = words[i]
            L = 1
        out.append(found)
        i += L
    return out


class PhraseTokenizer(Tokenizer):
    """Tokenizer bound to a dictionary provider's phrase table."""

    def __init__(self, provider: "DictionaryProvider", max_phrase_words: int = MAX_PHRASE_WORDS) -> None:
        self.provider = provider
        self.max_phrase_words = max(MIN_PHRASE_WORDS, min(max_phrase_words, MAX_PHRASE_WORDS))

    def tokenize(self, text: str) -> List[SignUnit]:
        return tokenize(text, self.provider.lookup_phrase, self.max_phrase_words)

    def tokenize_text(self, raw: str) -> List[SignUnit]:
        return self.tokenize(normalize(raw))
