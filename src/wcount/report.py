from __future__ import annotations
import sys
from typing import List, Mapping, NamedTuple, Optional, TextIO

from rich.cells import cell_len

from .aggregate import CountKey, display_of


class ReportRow(NamedTuple):
    word: str
    count: int


def report_rows(table: Mapping[CountKey, int], by_frequency: bool = False) -> List[ReportRow]:
    """Order the counting table.

    Lexicographic by key by default; with ``by_frequency`` the highest counts
    come first and equal counts fall back to key order.
    """
    if by_frequency:
        items = sorted(table.items(), key=lambda kv: (-kv[1], kv[0]))
    else:
        items = sorted(table.items(), key=lambda kv: kv[0])
    return [ReportRow(display_of(k), c) for k, c in items]


def render(rows: List[ReportRow]) -> List[str]:
    if not rows:
        return []
    # terminal cells, so wide (CJK) characters count double
    width = max(cell_len(r.word) for r in rows)
    return [f"{' ' * (width - cell_len(r.word))}{r.word}: {r.count}" for r in rows]


def write_report(rows: List[ReportRow], stream: Optional[TextIO] = None) -> int:
    out = sys.stdout if stream is None else stream
    lines = render(rows)
    for line in lines:
        out.write(line + "\n")
    return len(lines)
