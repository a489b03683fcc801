"""Precedent ranking by cumulative citation weight."""

from __future__ import annotations

from typing import List, Sequence

from ..domain.value_items import ValueItem
from ..types.schemas.models import Citation, PrecedentEntry
from .frequency import (
    FrequencyMap,
    freeze_value,
    item_value,
    rank_by_weight,
    weighted_frequency_map,
)

DEFAULT_TOP_PRECEDENTS = 10


def rank_precedents(
    precedents: Sequence[ValueItem],
    top_k: int = DEFAULT_TOP_PRECEDENTS,
    frequency: FrequencyMap | None = None,
) -> List[PrecedentEntry]:
    """Rank precedents by total weight and attach every citation context.

    Args:
        precedents: Precedent items keyed by precedent name
        top_k: Number of precedents kept after sorting by total weight
        frequency: Precomputed frequency map of ``precedents``, if available

    Returns:
        At most ``top_k`` entries, heaviest first. Each entry lists all items
        citing that name, not only the heaviest one.
    """
    if frequency is None:
        frequency = weighted_frequency_map(precedents)

    ranked = []
    for name, total_weight in rank_by_weight(frequency)[:top_k]:
        key = freeze_value(name)
        citations = [
            Citation(
                summary=item.summary,
                related_reasoning=item.related_reasoning,
                weight=item.weight,
            )
            for item in precedents
            if item_value(item) == key
        ]
        ranked.append(PrecedentEntry(name=name, total_weight=total_weight, citations=citations))
    return ranked
