from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import ENV_LOG_LEVEL, ENV_TOKENIZER, Config
from .errors import ConfigError, RootNotADirectoryError
from .pipeline import WordCounter
from .report import write_report

logger = logging.getLogger("wcount")

# diagnostics only; the report itself goes to stdout
err_console = Console(stderr=True)


def _setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )
    logger.setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="wcount",
        description="Count the distinct words in every readable file under a directory.",
        epilog=f"Environment: {ENV_TOKENIZER}=simple|unicode, {ENV_LOG_LEVEL}=WARNING|INFO|DEBUG",
    )
    ap.add_argument("root", nargs="?", default=".", help="Directory to scan (default: current directory)")
    ap.add_argument("--print-by-frequency", dest="by_frequency", action="store_true",
                    help="Most frequent words first; ties in word order")
    ap.add_argument("--case-sensitive", action="store_true",
                    help="Count 'Foo' and 'foo' separately (default folds case)")
    args = ap.parse_args(argv)

    try:
        cfg = Config.from_env(case_sensitive=args.case_sensitive, by_frequency=args.by_frequency)
    except ConfigError as e:
        _setup_logging(logging.WARNING)
        logger.error("%s", e)
        return 2
    _setup_logging(cfg.level)

    counter = WordCounter(cfg)
    try:
        counter.run(args.root)
    except RootNotADirectoryError as e:
        logger.error("%s", e)
        return 2

    write_report(counter.rows())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
