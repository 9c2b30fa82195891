from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Union

from .intern import Interner
from .scanner import Term


@dataclass(frozen=True, order=True)
class FoldedWord:
    """Case-insensitive count key.

    Equality, hashing and ordering use ``folded`` only; ``display`` is the
    first spelling recorded for the key and is what the report prints.
    """
    folded: str
    display: str = field(compare=False)

    def __str__(self) -> str:
        return self.display


CountKey = Union[str, FoldedWord]


def display_of(key: CountKey) -> str:
    return key.display if isinstance(key, FoldedWord) else key


class Aggregator:
    def __init__(self, case_sensitive: bool = False, interner: Optional[Interner] = None) -> None:
        self.case_sensitive = case_sensitive
        self.interner = interner if interner is not None else Interner()
        self._counts: Dict[CountKey, int] = {}
        self._folded: Dict[str, FoldedWord] = {}

    def _key(self, word: str) -> CountKey:
        if self.case_sensitive:
            return word
        folded = word.casefold()
        key = self._folded.get(folded)
        if key is None:
            key = self._folded[folded] = FoldedWord(folded, word)
        return key

    def record(self, word: str) -> None:
        """Count one occurrence of an interned word."""
        key = self._key(word)
        self._counts[key] = self._counts.get(key, 0) + 1

    def record_terms(self, terms: Iterable[Term]) -> int:
        """Intern and record every word term; symbol terms are dropped.

        Returns the number of words recorded.
        """
        n = 0
        for term in terms:
            if term.is_word:
                self.record(self.interner.intern(term.text))
                n += 1
        return n

    @property
    def table(self) -> Mapping[CountKey, int]:
        return MappingProxyType(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)
