"""Scan configuration defaults."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from namesim.models import ConfigurationError
from namesim.utils.text import validate_trie_len

DEFAULT_THRESHOLD = 0.6
DEFAULT_TRIE_LEN = 2
DEFAULT_PATTERN = ".*"


def compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(f"Invalid filename pattern {pattern!r}: {exc}") from exc


@dataclass(slots=True)
class ScanConfig:
    threshold: float = DEFAULT_THRESHOLD
    reverse: bool = False
    trie_len: int = DEFAULT_TRIE_LEN
    filename_pattern: str = DEFAULT_PATTERN
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_trie_len(self.trie_len)
        if math.isnan(self.threshold) or not 0.0 <= self.threshold <= 1.0:
            raise ConfigurationError(f"threshold must be within [0, 1], got {self.threshold}")
        self.pattern = compile_pattern(self.filename_pattern)
