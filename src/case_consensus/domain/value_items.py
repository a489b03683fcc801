"""Canonical intermediate types produced by the record normalizer.

Every downstream stage consumes these types only; raw, irregular records never
travel past :mod:`case_consensus.case_aggregation.normalizer`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class ValueItem:
    """One normalized (value, weight, context) unit fed to the aggregator.

    ``value`` is the dedup key and must be hashable. ``weight`` is the owning
    record's relevance weight, or ``None`` when the record had none. The
    remaining attributes are category-specific context kept for enrichment
    after filtering.
    """

    value: Any
    weight: Optional[float] = None
    case_id: Optional[str] = None
    party: Optional[str] = None
    kind: Optional[str] = None
    is_primary: bool = False
    related_issue: Optional[str] = None
    related_reasoning: Any = None
    summary: Optional[str] = None
    case_title: Optional[str] = None


@dataclass(frozen=True)
class TimelinePoint:
    """Judgment date of one case; ``date is None`` marks an unparseable date."""

    date: Optional[datetime]
    case_title: str
    relevance_score: float

    @property
    def is_valid(self) -> bool:
        return self.date is not None


@dataclass(frozen=True)
class NormalizedCase:
    """Flat, typed value streams extracted from one record."""

    case_id: str
    issues: Tuple[ValueItem, ...] = ()
    statutes: Tuple[ValueItem, ...] = ()
    plaintiff_arguments: Tuple[ValueItem, ...] = ()
    defendant_arguments: Tuple[ValueItem, ...] = ()
    evidence: Tuple[ValueItem, ...] = ()
    reasonings: Tuple[ValueItem, ...] = ()
    orders: Tuple[ValueItem, ...] = ()
    precedents: Tuple[ValueItem, ...] = ()
    implications: Tuple[ValueItem, ...] = ()
    disposition: Optional[ValueItem] = None
    jurisdiction: Optional[ValueItem] = None
    timeline_point: Optional[TimelinePoint] = None
    case_url: Optional[ValueItem] = None
    source_url: Optional[ValueItem] = None

    @property
    def arguments(self) -> Tuple[ValueItem, ...]:
        """Plaintiff then defendant arguments, each tagged with its party."""
        return self.plaintiff_arguments + self.defendant_arguments
