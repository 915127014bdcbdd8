"""Filename tokenization into word n-gram features."""

from __future__ import annotations

import re
from typing import FrozenSet, List

from namesim.models import ConfigurationError

SUPPORTED_TRIE_LENS = (1, 2, 3, 4)

# Runs of letters and digits; everything else is a word boundary.
_WORD_RE = re.compile(r"[^\W_]+")


def validate_trie_len(trie_len: int) -> int:
    """Return ``trie_len`` unchanged or raise ConfigurationError."""
    if (
        not isinstance(trie_len, int)
        or isinstance(trie_len, bool)
        or trie_len not in SUPPORTED_TRIE_LENS
    ):
        raise ConfigurationError(
            f"trie length must be one of {', '.join(map(str, SUPPORTED_TRIE_LENS))}, got {trie_len!r}"
        )
    return trie_len


def split_words(name: str) -> List[str]:
    """Split a filename into lower-cased alphanumeric words, in order.

    ``"My-Report_v2.final.pdf"`` becomes ``["my", "report", "v2", "final", "pdf"]``.
    """
    return [word.lower() for word in _WORD_RE.findall(name)]


def tokenize(name: str, trie_len: int = 2) -> FrozenSet[str]:
    """Build the feature set of a filename.

    With ``trie_len == 1`` the features are the words themselves. Wider values
    join every window of ``trie_len`` consecutive words with ``"."``. Names with
    fewer words than the window produce an empty set.
    """
    validate_trie_len(trie_len)
    words = split_words(name)
    if trie_len == 1:
        return frozenset(words)
    return frozenset(
        ".".join(words[start : start + trie_len])
        for start in range(len(words) - trie_len + 1)
    )
