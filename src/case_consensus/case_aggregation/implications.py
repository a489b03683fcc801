"""Issue classification and implications ranking."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..domain.value_items import ValueItem
from ..types.schemas.models import ImplicationsAnalysis, IssueClassification
from .frequency import freeze_value, resolve_weight

DEFAULT_IMPLICATION_CAPS = {
    "legal": 5,
    "practical": 5,
    "further_inquiry": 3,
    "dissenting_opinions": 3,
}


def _heaviest_first(items: Iterable[ValueItem]) -> List[ValueItem]:
    return sorted(items, key=lambda item: resolve_weight(item.weight), reverse=True)


def _distinct_values(items: Iterable[ValueItem]) -> List:
    seen = set()
    values = []
    for item in items:
        key = freeze_value(item.value)
        if key not in seen:
            seen.add(key)
            values.append(item.value)
    return values


def classify_issues(issues: Sequence[ValueItem], threshold: float) -> IssueClassification:
    """Split issues into primary and secondary, heaviest first.

    The threshold applies to each mention's own weight rather than to the
    cumulative weight; repeated issues are listed once.
    """
    kept = _heaviest_first(item for item in issues if resolve_weight(item.weight) >= threshold)
    return IssueClassification(
        primary_issues=_distinct_values(item for item in kept if item.is_primary),
        secondary_issues=_distinct_values(item for item in kept if not item.is_primary),
    )


def analyze_implications(
    implications: Sequence[ValueItem], caps: dict = DEFAULT_IMPLICATION_CAPS
) -> ImplicationsAnalysis:
    """Top implications per kind, ordered by relevance weight."""

    def top(kind: str) -> List:
        ranked = _heaviest_first(item for item in implications if item.kind == kind)
        return [item.value for item in ranked][: caps.get(kind, 0)]

    return ImplicationsAnalysis(
        legal_implications=top("legal"),
        practical_implications=top("practical"),
        areas_for_further_inquiry=top("further_inquiry"),
        dissenting_opinions=top("dissenting_opinions"),
    )
