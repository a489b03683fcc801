"""Timeline and jurisdiction analysis."""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..domain.value_items import TimelinePoint, ValueItem
from ..types.schemas.models import JurisdictionShare, TimelineAnalysis, TimelineCase, YearlyTrend
from .frequency import FrequencyMap, rank_by_weight, weighted_frequency_map


def _to_case(point: TimelinePoint) -> TimelineCase:
    return TimelineCase(
        date=point.date,
        case_title=point.case_title,
        relevance_score=point.relevance_score,
    )


def analyze_timeline(points: Sequence[TimelinePoint]) -> TimelineAnalysis:
    """Order judgments chronologically and bucket them by calendar year.

    Points whose judgment date could not be parsed are dropped before sorting.
    The per-year average relevance is the plain mean of that year's case
    relevance scores.
    """
    ordered = sorted((p for p in points if p.is_valid), key=lambda p: p.date)
    if not ordered:
        return TimelineAnalysis()

    by_year: Dict[int, List[TimelinePoint]] = {}
    for point in ordered:
        by_year.setdefault(point.date.year, []).append(point)

    trends = [
        YearlyTrend(
            year=year,
            case_count=len(cases),
            average_relevance=sum(c.relevance_score for c in cases) / len(cases),
            cases=[c.case_title for c in cases],
        )
        for year, cases in by_year.items()
    ]
    return TimelineAnalysis(
        earliest_case=_to_case(ordered[0]),
        latest_case=_to_case(ordered[-1]),
        yearly_trends=trends,
    )


def analyze_jurisdiction(
    courts: Sequence[ValueItem], frequency: FrequencyMap | None = None
) -> List[JurisdictionShare]:
    """Courts sorted by cumulative relevance weight, heaviest first."""
    if frequency is None:
        frequency = weighted_frequency_map(courts)
    return [
        JurisdictionShare(jurisdiction=court, count=weight)
        for court, weight in rank_by_weight(frequency)
    ]
