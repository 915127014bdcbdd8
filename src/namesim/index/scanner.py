"""Filesystem scanning into tokenized file records."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from namesim.models import FileRecord, TraversalWarning
from namesim.utils.files import iter_regular_files
from namesim.utils.text import tokenize, validate_trie_len

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanResult:
    records: list[FileRecord] = field(default_factory=list)
    warnings: list[TraversalWarning] = field(default_factory=list)

    def skip(self, path: Path, error: OSError) -> None:
        LOGGER.debug("Skipping %s: %s", path, error)
        self.warnings.append(TraversalWarning(path=path, reason=str(error)))


class Scanner:
    """Collects the files whose base name matches ``pattern``."""

    def __init__(self, pattern: re.Pattern[str], *, trie_len: int = 2) -> None:
        self.pattern = pattern
        self.trie_len = validate_trie_len(trie_len)

    def scan(self, roots: Sequence[Path]) -> ScanResult:
        """Scan every root in order and return the records in discovery order."""
        result = ScanResult()
        for root in roots:
            self._scan_root(Path(root), result)
        return result

    def _scan_root(self, root: Path, result: ScanResult) -> None:
        LOGGER.info("Getting file listing from: %s", root)
        for path, size in iter_regular_files(root, on_error=result.skip):
            LOGGER.debug("Found %s", path)
            if not self.pattern.search(path.name):
                continue
            result.records.append(
                FileRecord(path=path, size=size, tokens=tokenize(path.name, self.trie_len))
            )
