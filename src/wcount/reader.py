from __future__ import annotations
from pathlib import Path
from typing import Union

from .errors import UndecodableFileError

CHUNK_SIZE = 1024 * 1024


class FileReader:
    """Read whole files into one byte buffer that is reused across calls.

    The buffer is never shrunk: each read overwrites it from the start and
    tracks how many bytes are filled, so its size settles at the largest file
    seen.
    """

    def __init__(self, chunk_size: int = CHUNK_SIZE) -> None:
        self.chunk_size = chunk_size
        self._buf = bytearray()

    def _grow(self) -> None:
        self._buf.extend(bytes(max(self.chunk_size, len(self._buf))))

    def read_text(self, path: Union[str, Path]) -> str:
        """Return the file's contents decoded as UTF-8.

        Raises:
            OSError: the file can't be opened or read.
            UndecodableFileError: the contents are not valid UTF-8.
        """
        path = Path(path)
        n = 0
        with path.open("rb") as f:
            while True:
                if n == len(self._buf):
                    self._grow()
                with memoryview(self._buf)[n:] as free:
                    got = f.readinto(free)
                if not got:
                    break
                n += got
        with memoryview(self._buf)[:n] as data:
            try:
                return str(data, "utf-8")
            except UnicodeDecodeError as e:
                raise UndecodableFileError(path, e) from e
