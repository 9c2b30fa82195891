from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Iterator, NamedTuple, Optional

import regex

from .errors import ConfigError


class TermKind(Enum):
    WORD = "word"
    SYMBOL = "symbol"


class Term(NamedTuple):
    kind: TermKind
    text: str
    start: int
    end: int

    @property
    def is_word(self) -> bool:
        return self.kind is TermKind.WORD


# Unicode Alphabetic or Numeric; covers vowel signs (Devanagari, Thai, ...)
_ALNUM = regex.compile(r"[\p{Alphabetic}\p{N}]")
_WORD_CHAR = regex.compile(r"[\p{Alphabetic}\p{N}_']")


def is_word_char(c: str) -> bool:
    """Alphanumeric, underscore or apostrophe."""
    return _WORD_CHAR.match(c) is not None


class TermScanner:
    """Split a buffer into alternating runs of word and symbol characters.

    Iterates once; the spans cover the (optionally trimmed) text with no gaps,
    so joining every ``term.text`` gives back ``scanner.text``.
    """

    def __init__(self, text: str, trim: bool = False) -> None:
        self.text = text.strip() if trim else text
        self._pos = 0

    def __iter__(self) -> "TermScanner":
        return self

    def __next__(self) -> Term:
        text, start = self.text, self._pos
        n = len(text)
        if start >= n:
            raise StopIteration
        wordy = is_word_char(text[start])
        end = start + 1
        while end < n and is_word_char(text[end]) == wordy:
            end += 1
        self._pos = end
        return Term(TermKind.WORD if wordy else TermKind.SYMBOL, text[start:end], start, end)


# ---------------- unicode word boundaries (UAX #29) ----------------

# one segment per match: shortest run ending on a default word boundary
_SEGMENT = regex.compile(r".+?(?:\b|\Z)", regex.WORD | regex.DOTALL)


def _is_word_segment(seg: str) -> bool:
    return _ALNUM.search(seg) is not None


def unicode_terms(text: str, trim: bool = False) -> Iterator[Term]:
    """Tokenize on Unicode default word boundaries.

    A segment holding at least one alphanumeric character is a word; runs of
    other segments are merged into a single symbol term. Two words may be
    adjacent (e.g. consecutive ideographs are separate words).
    """
    if trim:
        text = text.strip()
    pending: Optional[int] = None
    for m in _SEGMENT.finditer(text):
        seg_start, seg_end = m.span()
        if _is_word_segment(m.group()):
            if pending is not None:
                yield Term(TermKind.SYMBOL, text[pending:seg_start], pending, seg_start)
                pending = None
            yield Term(TermKind.WORD, m.group(), seg_start, seg_end)
        elif pending is None:
            pending = seg_start
    if pending is not None:
        yield Term(TermKind.SYMBOL, text[pending:], pending, len(text))


_POLICIES: Dict[str, Callable[..., Iterator[Term]]] = {
    "simple": TermScanner,
    "unicode": unicode_terms,
}


def get_scanner(policy: str) -> Callable[..., Iterator[Term]]:
    try:
        return _POLICIES[policy]
    except KeyError:
        raise ConfigError(f"Unknown tokenizer {policy!r}") from None


def scan(text: str, policy: str = "simple", trim: bool = False) -> Iterator[Term]:
    return iter(get_scanner(policy)(text, trim=trim))
