from __future__ import annotations

from typing import Optional

import regex as re


# Sentence punctuation that separates words; apostrophes and hyphens are kept
_PUNCT_RUN_RE = re.compile(r"[.,!?;:]+")
_SPACE_RUN_RE = re.compile(r"\s+", re.UNICODE)


def normalize(text: Optional[str]) -> str:
    """Lowercase, drop sentence punctuation and collapse whitespace.

    Runs of ``. , ! ? ; :`` become a single space, any whitespace run
    becomes a single space, and the result is trimmed. Input that is empty
    or made only of whitespace/punctuation normalizes to ``""``.

    >>> normalize("  Hello,   how are you?! ")
    'hello how are you'
    """
    if not text:
        return ""
    s = text.lower()
    s = _PUNCT_RUN_RE.sub(" ", s)
    s = _SPACE_RUN_RE.sub(" ", s)
    return s.strip()


def strip_punctuation(text: str) -> str:
    """Remove sentence punctuation without inserting separators."""
    return _PUNCT_RUN_RE.sub("", text)
