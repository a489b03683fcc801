"""Keyword variant of the aggregator.

Keyword holders come from upstream keyword generation:
``{"possibleKeywords": [...], "yearAfter": int, "yearBefore": int,
"specifiedYear": int}``. Each keyword carries its own relevance weight.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

from loguru import logger

from ..config import EngineSettings, load_config
from ..types.schemas.models import KeywordSummary
from .engine import align_weights
from .frequency import item_weight, select_aggregated, weighted_frequency_map


def flatten_keywords(holders: Sequence[Any]) -> List[Any]:
    """All ``possibleKeywords`` of every holder, in order."""
    keywords: List[Any] = []
    for holder in holders:
        if isinstance(holder, Mapping) and isinstance(holder.get("possibleKeywords"), list):
            keywords.extend(holder["possibleKeywords"])
    return keywords


def _year(holder: Any, key: str) -> Any:
    if not isinstance(holder, Mapping) or holder.get(key) is None:
        return 0
    return holder[key]


def aggregate_keywords(
    holders: Union[Mapping[str, Any], Sequence[Any]],
    weights: Optional[Sequence[Any]] = None,
    threshold: Optional[float] = None,
    settings: Optional[EngineSettings] = None,
) -> KeywordSummary:
    """Select the most relevant search keywords.

    Args:
        holders: One keyword holder or a list of them
        weights: One relevance weight per flattened keyword
        threshold: Minimum cumulative weight; zero or ``None`` means 1
        settings: Engine settings; ``keyword_limit`` caps the keywords
            returned, in first-seen order

    Returns:
        KeywordSummary with the year window of the first holder
    """
    settings = settings or load_config()
    if isinstance(holders, Mapping):
        holders = [holders]
    holders = list(holders)

    keywords = flatten_keywords(holders)
    logger.info(f"Aggregating {len(keywords)} keywords from {len(holders)} holders")
    items = [
        {"value": keyword, "weight": weight}
        for keyword, weight in zip(keywords, align_weights(weights, len(keywords)))
    ]

    # A zero weight counts as 1 here, unlike the case categories
    frequency = weighted_frequency_map(items, lambda item: item_weight(item) or 1)
    aggregated = select_aggregated(frequency, threshold or 1.0)[: settings.keyword_limit]

    first = holders[0] if holders else None
    return KeywordSummary(
        aggregated_keywords=aggregated,
        year_after=_year(first, "yearAfter"),
        year_before=_year(first, "yearBefore"),
        specified_year=_year(first, "specifiedYear"),
    )
