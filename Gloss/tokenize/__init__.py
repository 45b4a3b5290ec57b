from __future__ import annotations

from .base import MAX_PHRASE_WORDS, SignUnit, Tokenizer, is_phrase, word_count
from .phrases import PhraseTokenizer, tokenize

__all__ = [
    "MAX_PHRASE_WORDS",
    "PhraseTokenizer",
    "SignUnit",
    "Tokenizer",
    "is_phrase",
    "tokenize",
    "word_count",
]
