from __future__ import annotations

from typing import Callable, List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from Gloss.dicts.provider import Descriptor


# A sign unit is a normalized word or a 2-5 word phrase joined by single spaces
SignUnit = str

PhraseLookup = Callable[[str], Optional["Descriptor"]]

MIN_PHRASE_WORDS = 2
MAX_PHRASE_WORDS = 5


def word_count(unit: SignUnit) -> int:
    return len(unit.split(" ")) if unit else 0


def is_phrase(unit: SignUnit) -> bool:
    return word_count(unit) >= MIN_PHRASE_WORDS


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> List[SignUnit]:
        ...
