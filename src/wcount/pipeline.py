from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Union

from .aggregate import Aggregator
from .config import Config
from .errors import UndecodableFileError
from .intern import Interner
from .reader import FileReader
from .report import ReportRow, report_rows
from .scanner import get_scanner
from .walk import walk_files

logger = logging.getLogger(__name__)


class WordCounter:
    """One counting run: owns the interner, the counting table and the read buffer.

    Files are processed one at a time (read, scan, intern, record). A file that
    can't be read or decoded is logged and skipped; whatever it would have
    contributed is simply missing from the totals.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self.interner = Interner()
        self.aggregator = Aggregator(case_sensitive=self.config.case_sensitive, interner=self.interner)
        self.reader = FileReader()
        self._scanner = get_scanner(self.config.tokenizer)
        self.files_read = 0
        self.skipped: List[Path] = []

    def count_text(self, text: str) -> int:
        """Tokenize one buffer and record its words. Returns the word count."""
        return self.aggregator.record_terms(self._scanner(text))

    def count_file(self, path: Union[str, Path]) -> bool:
        path = Path(path)
        try:
            text = self.reader.read_text(path)
        except UndecodableFileError as e:
            logger.warning("Skipping %s: not utf8 (%s)", path, e.cause or e)
            self.skipped.append(path)
            return False
        except OSError as e:
            logger.warning("Couldn't read %s: %s", path, e)
            self.skipped.append(path)
            return False
        n = self.count_text(text)
        self.files_read += 1
        logger.debug("%s: %d words", path, n)
        return True

    def run(self, root: Union[str, Path] = ".") -> "WordCounter":
        """Count every readable file under ``root``.

        Raises:
            RootNotADirectoryError: ``root`` is not a directory.
        """
        for path in walk_files(root):
            self.count_file(path)
        logger.info(
            "Read %d files (%d skipped), %d words, %d distinct",
            self.files_read, len(self.skipped), self.aggregator.total, len(self.aggregator),
        )
        return self

    def rows(self) -> List[ReportRow]:
        return report_rows(self.aggregator.table, by_frequency=self.config.by_frequency)
