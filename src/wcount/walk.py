from __future__ import annotations
import logging
import os
import stat
from collections import deque
from pathlib import Path
from typing import Deque, Iterator, Union

from .errors import RootNotADirectoryError

logger = logging.getLogger(__name__)


def walk_files(root: Union[str, Path]) -> Iterator[Path]:
    """Yield every regular file reachable from ``root``, breadth first.

    Directories are queued rather than recursed into. Symlinks are followed
    to whatever they point at: a directory is walked, a file is yielded.
    Entries that can't be read or resolved, and anything that is neither a
    file nor a directory, are logged and skipped.

    Symlink cycles are not detected; a looping link will walk forever.

    Raises:
        RootNotADirectoryError: ``root`` is not a directory (checked before
            anything is yielded).
    """
    root = Path(root)
    if not root.is_dir():
        raise RootNotADirectoryError(root)
    return _walk(root)


def _walk(root: Path) -> Iterator[Path]:
    queue: Deque[Path] = deque([root])
    while queue:
        d = queue.popleft()
        try:
            it = os.scandir(d)
        except OSError as e:
            logger.warning("Can't read directory %s: %s", d, e)
            continue
        with it:
            for entry in _entries(d, it):
                path = Path(entry.path)
                try:
                    is_link = entry.is_symlink()
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError as e:
                    logger.warning("Can't get file type of %s: %s", path, e)
                    continue
                if is_dir:
                    queue.append(path)
                elif is_file:
                    yield path
                elif is_link:
                    target = _resolve_link(path)
                    if target == "dir":
                        queue.append(path)
                    elif target == "file":
                        yield path
                else:
                    logger.warning("Skipping %s: not a file, directory, or symlink", path)


def _entries(d: Path, it) -> Iterator[os.DirEntry]:
    while True:
        try:
            entry = next(it)
        except StopIteration:
            return
        except OSError as e:
            logger.warning("Error reading entry in %s: %s", d, e)
            return
        yield entry


def _resolve_link(path: Path) -> str:
    try:
        st = path.stat()
    except OSError as e:
        logger.warning("Can't get metadata for symlink %s: %s", path, e)
        return ""
    if stat.S_ISDIR(st.st_mode):
        return "dir"
    if stat.S_ISREG(st.st_mode):
        return "file"
    logger.warning("Found symlink %s but it's not a file or a directory", path)
    return ""
