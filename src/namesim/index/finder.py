"""End-to-end lookup of files with similar names."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from namesim.config import ScanConfig
from namesim.index.scanner import Scanner
from namesim.index.similarity import compare_all, rank_pairs
from namesim.models import CandidatePair, TraversalWarning


@dataclass(slots=True)
class FindResult:
    pairs: list[CandidatePair] = field(default_factory=list)
    scanned: int = 0
    warnings: list[TraversalWarning] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.pairs)


def find_similar(roots: Sequence[Path], config: ScanConfig | None = None) -> FindResult:
    """Scan ``roots`` and return the ranked pairs above the configured threshold."""
    config = config if config is not None else ScanConfig()
    scanner = Scanner(config.pattern, trie_len=config.trie_len)
    scan = scanner.scan(roots)
    pairs: List[CandidatePair] = compare_all(scan.records, config.threshold)
    return FindResult(
        pairs=rank_pairs(pairs, reverse=config.reverse),
        scanned=len(scan.records),
        warnings=scan.warnings,
    )
