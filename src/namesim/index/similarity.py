"""Pairwise filename similarity and ranking."""

from __future__ import annotations

import logging
import math
from typing import AbstractSet, Dict, List, Sequence

import numpy as np

from namesim.models import CandidatePair, FileRecord

LOGGER = logging.getLogger(__name__)


def cosine_similarity(words_a: AbstractSet[str], words_b: AbstractSet[str]) -> float:
    """Set cosine: ``|A & B| / sqrt(|A| * |B|)``, 0.0 when either set is empty.

    Scalar definition of the score. :func:`compare_all` computes whole rows with
    :func:`cosine_row` and must agree with this function bit for bit.
    """
    if not words_a or not words_b:
        return 0.0
    return len(words_a & words_b) / math.sqrt(len(words_a) * len(words_b))


def cosine_row(shared: np.ndarray, size: float, sizes: np.ndarray) -> np.ndarray:
    """Vectorised :func:`cosine_similarity` of one set against many.

    ``shared[j]`` is the intersection size with the ``j``-th set and ``sizes[j]``
    its cardinality. Zero denominators score 0.0.
    """
    denom = np.sqrt(size * sizes)
    return np.divide(shared, denom, out=np.zeros_like(denom), where=denom > 0)


def compare_all(records: Sequence[FileRecord], threshold: float) -> List[CandidatePair]:
    """Return every pair of distinct records whose cosine is strictly above ``threshold``.

    Each record is scored against all records discovered before it, so each
    unordered pair is evaluated exactly once. Pairs come out in evaluation order.
    """
    LOGGER.info("Generating similarity between %d entries", len(records))
    pairs: List[CandidatePair] = []
    if len(records) < 2:
        return pairs

    sizes = np.fromiter((len(r.tokens) for r in records), dtype=np.float64, count=len(records))
    postings: Dict[str, List[int]] = {}

    for i, record in enumerate(records):
        if i:
            hits = [j for token in record.tokens for j in postings.get(token, ())]
            shared = np.bincount(np.asarray(hits, dtype=np.intp), minlength=i)
            scores = cosine_row(shared, sizes[i], sizes[:i])
            for j in np.flatnonzero(scores > threshold):
                other = records[j]
                score = float(scores[j])
                LOGGER.debug("Duplicate %s ~ %s (%.4f)", record.path, other.path, score)
                pairs.append(CandidatePair(score=score, file_a=record, file_b=other))
        for token in record.tokens:
            postings.setdefault(token, []).append(i)

    return pairs


def rank_pairs(pairs: Sequence[CandidatePair], *, reverse: bool = False) -> List[CandidatePair]:
    """Order pairs by quantized score, ties broken by combined size.

    The list is sorted by combined size first and then stably by quantized
    score. ``reverse`` flips the final list, tie-break included.
    """
    ranked = sorted(pairs, key=lambda pair: pair.combined_size)
    ranked.sort(key=lambda pair: pair.quantized_score)
    if reverse:
        ranked.reverse()
    return ranked
