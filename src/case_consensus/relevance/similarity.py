"""Cosine similarity and oracle-driven relevance weights."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

import numpy as np

from ..case_aggregation.thresholds import RelevanceStats, compute_stats
from ..domain.ports import SimilarityOracle
from ..shared.logging_utils import get_logger
from .text import relevance_text

logger = get_logger(__name__)


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """Cosine similarity over the common prefix of two vectors.

    Empty, missing or zero vectors score 0.
    """
    if vec_a is None or vec_b is None:
        return 0.0
    a = np.asarray(vec_a, dtype=float).ravel()
    b = np.asarray(vec_b, dtype=float).ravel()
    if a.size == 0 or b.size == 0:
        return 0.0
    n = min(a.size, b.size)
    a, b = a[:n], b[:n]
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a, b) / (norm_a * norm_b))


def score_records(
    records: Sequence[Any], query: str, oracle: SimilarityOracle, is_case: bool = True
) -> List[float]:
    """One relevance weight per record; a failing oracle call scores 0."""
    scores: List[float] = []
    for index, record in enumerate(records):
        try:
            scores.append(float(oracle.similarity(query, relevance_text(record, is_case))))
        except Exception:
            logger.exception(f"Error calculating relevance score for record {index}")
            scores.append(0.0)
    return scores


def compute_relevance_stats(
    records: Sequence[Any], query: str, oracle: SimilarityOracle
) -> Tuple[RelevanceStats, List[float]]:
    """Score every case record and summarise the weight distribution.

    Raises:
        EmptyInputError: if ``records`` is empty
    """
    weights = score_records(records, query, oracle)
    stats = compute_stats(weights)
    logger.info(f"Relevance score stats: {stats}")
    return stats, weights
