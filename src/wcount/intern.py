from __future__ import annotations
from typing import Dict, Iterator


class Interner:
    """Map each distinct spelling to one canonical ``str`` object.

    Repeated spellings, from any buffer, come back as the very same object,
    so memory grows with the number of distinct words rather than with the
    number of occurrences. Entries are never evicted; the map owns them for as
    long as the interner is alive.
    """

    def __init__(self) -> None:
        self._table: Dict[str, str] = {}

    def intern(self, spelling: str) -> str:
        canon = self._table.get(spelling)
        if canon is None:
            canon = self._table[spelling] = spelling
        return canon

    def __contains__(self, spelling: object) -> bool:
        return spelling in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)
