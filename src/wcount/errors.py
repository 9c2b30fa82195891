from __future__ import annotations
from pathlib import Path
from typing import Optional


class WcountError(Exception):
    """Base class for errors raised by wcount."""


class RootNotADirectoryError(WcountError, NotADirectoryError):
    """The enumeration root is missing or is not a directory. Fatal."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Root {root} is not a directory")
        self.root = root


class UndecodableFileError(WcountError, ValueError):
    """A file's bytes are not valid UTF-8. The file is skipped."""

    def __init__(self, path: Path, cause: Optional[UnicodeDecodeError] = None) -> None:
        where = f" (byte {cause.start})" if cause is not None else ""
        super().__init__(f"{path} is not utf8{where}")
        self.path = path
        self.cause = cause


class ConfigError(WcountError, ValueError):
    """Invalid configuration value (unknown tokenizer, bad log level, ...)."""
