from __future__ import annotations

import logging
from typing import Optional

from Gloss.dicts.provider import Descriptor, DictionaryProvider
from Gloss.tokenize.base import SignUnit, is_phrase

logger = logging.getLogger(__name__)


DEFAULT_DESCRIPTOR = Descriptor(kind="default", color="#607D8B", glyph="👋")


def _partial_match(unit: str, provider: DictionaryProvider) -> Optional[Descriptor]:
    # First hit in table insertion order wins; containment in either direction
    for key, desc in provider.iter_words():
        if key in unit or unit in key:
            return desc
    return None


def resolve(unit: SignUnit, provider: DictionaryProvider) -> Descriptor:
    """Resolve the descriptor for one sign unit.

    Tries, in order: phrase lookup (multi-word units only), exact word
    lookup, partial containment against the word table, and finally
    :data:`DEFAULT_DESCRIPTOR`. Never raises: provider failures are logged
    and degrade to the default.
    """
    if not unit:
        return DEFAULT_DESCRIPTOR
    try:
        if is_phrase(unit):
            found = provider.lookup_phrase(unit)
            if found is not None:
                return found
        found = provider.lookup_word(unit)
        if found is not None:
            return found
        found = _partial_match(unit, provider)
        if found is not None:
            return found
    except Exception as e:
        logger.warning(f"[RESOLVE] Dictionary unavailable for {unit!r}, using default: {e}")
    return DEFAULT_DESCRIPTOR


class Resolver:
    """Descriptor resolver bound to one dictionary provider."""

    def __init__(self, provider: DictionaryProvider) -> None:
        self.provider = provider

    def __call__(self, unit: SignUnit) -> Descriptor:
        return resolve(unit, self.provider)
