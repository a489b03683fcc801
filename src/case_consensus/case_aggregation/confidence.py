"""Consensus confidence scores.

A category whose distinct values mostly fail the threshold has strong
consensus: few values carry most of the weight. The score is
``(total - kept) / (total - 1)``, 1 for one or zero distinct values.
"""

from __future__ import annotations

from typing import Iterable, Tuple


def confidence_score(kept: int, total: int) -> float:
    """Confidence in [0, 1] from kept and total distinct-value counts."""
    if total <= 1:
        return 1.0
    # kept == 0 would exceed 1 and kept > total would go negative
    return max(0.0, min(1.0, (total - kept) / (total - 1)))


def overall_confidence(categories: Iterable[Tuple[int, int]]) -> float:
    """Score over summed ``(kept, total)`` counts, not an average of scores."""
    kept = 0
    total = 0
    for category_kept, category_total in categories:
        kept += category_kept
        total += category_total
    return confidence_score(kept, total)
