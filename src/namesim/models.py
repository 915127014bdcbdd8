"""Core namesim data models."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet


SCORE_SCALE = 10000


def quantize_score(score: float) -> int:
    """Integer sort key of a cosine score: floor(score * 10000)."""
    return math.floor(score * SCORE_SCALE)


class ConfigurationError(ValueError):
    """Raised when scan settings are invalid, before any directory is read."""


@dataclass(frozen=True, slots=True)
class FileRecord:
    """A scanned file together with the features derived from its name."""

    path: Path
    size: int
    tokens: FrozenSet[str]


@dataclass(frozen=True, slots=True)
class TraversalWarning:
    """An entry the scanner skipped because the filesystem refused it."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class CandidatePair:
    """Two files whose filename similarity exceeded the threshold.

    ``file_a`` is the file discovered later, ``file_b`` the earlier one.
    """

    score: float
    file_a: FileRecord
    file_b: FileRecord

    @property
    def path_a(self) -> Path:
        return self.file_a.path

    @property
    def path_b(self) -> Path:
        return self.file_b.path

    @property
    def combined_size(self) -> int:
        return self.file_a.size + self.file_b.size

    @property
    def quantized_score(self) -> int:
        return quantize_score(self.score)

    def as_tuple(self) -> tuple[float, Path, Path, int]:
        """Return ``(score, path_a, path_b, combined_size)``."""
        return (self.score, self.path_a, self.path_b, self.combined_size)
