"""Utility helpers for walking directory trees."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Callable, Iterator, Tuple

ErrorHandler = Callable[[Path, OSError], None]


def _ignore(path: Path, error: OSError) -> None:
    pass


def iter_regular_files(root: Path, on_error: ErrorHandler = _ignore) -> Iterator[Tuple[Path, int]]:
    """Yield ``(path, size)`` for every regular file under ``root``.

    Symbolic links below the root are neither followed nor reported. The root
    itself is followed, and a root that is a regular file is yielded as is.
    Entries in each directory are visited in sorted name order. Any OSError is
    passed to ``on_error`` and the offending entry is skipped.
    """
    try:
        root_stat = root.stat()
    except OSError as exc:
        on_error(root, exc)
        return

    if stat.S_ISREG(root_stat.st_mode):
        yield root, root_stat.st_size
        return

    def _on_walk_error(exc: OSError) -> None:
        on_error(Path(exc.filename) if exc.filename else root, exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            try:
                st = path.lstat()
            except OSError as exc:
                on_error(path, exc)
                continue
            if stat.S_ISREG(st.st_mode):
                yield path, st.st_size
