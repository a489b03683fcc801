"""
Pydantic models for the aggregation output contract.

These models define the JSON-shaped summary handed to downstream consumers.
Attribute names are snake_case; serialisation uses the camelCase keys the
consumers expect (``aggregatedLegalIssues``, ``confidenceScores``, ...).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

import orjson
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# --------------------------------------------------------------------------- #
# Base Types                                                                  #
# --------------------------------------------------------------------------- #


class ContractBase(BaseModel):
    """Immutable output model serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-shaped dict with camelCase keys; datetimes become ISO strings."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self) -> bytes:
        """Serialised summary as indented JSON bytes."""
        return orjson.dumps(self.to_dict(), option=orjson.OPT_INDENT_2, default=str)


# --------------------------------------------------------------------------- #
# Ranking Types                                                               #
# --------------------------------------------------------------------------- #


class Citation(ContractBase):
    """One citing case's context for a precedent."""

    summary: Any = None
    related_reasoning: Any = None
    weight: Any = None


class PrecedentEntry(ContractBase):
    """A distinct precedent with its cumulative weight and every citation."""

    name: Any
    total_weight: float
    citations: List[Citation] = Field(default_factory=list)


class JurisdictionShare(ContractBase):
    """Cumulative relevance weight of one court.

    ``count`` holds a weight sum, not a case count; the key name is kept for
    compatibility with existing consumers.
    """

    jurisdiction: Any
    count: float


# --------------------------------------------------------------------------- #
# Timeline Types                                                              #
# --------------------------------------------------------------------------- #


class TimelineCase(ContractBase):
    date: datetime
    case_title: Any
    relevance_score: float


class YearlyTrend(ContractBase):
    year: int
    case_count: int
    average_relevance: float
    cases: List[Any] = Field(default_factory=list)


class TimelineAnalysis(ContractBase):
    earliest_case: Optional[TimelineCase] = None
    latest_case: Optional[TimelineCase] = None
    yearly_trends: List[YearlyTrend] = Field(default_factory=list)


# --------------------------------------------------------------------------- #
# Enhanced Analysis Types                                                     #
# --------------------------------------------------------------------------- #


class IssueClassification(ContractBase):
    primary_issues: List[Any] = Field(default_factory=list)
    secondary_issues: List[Any] = Field(default_factory=list)


class ImplicationsAnalysis(ContractBase):
    legal_implications: List[Any] = Field(default_factory=list)
    practical_implications: List[Any] = Field(default_factory=list)
    areas_for_further_inquiry: List[Any] = Field(default_factory=list)
    dissenting_opinions: List[Any] = Field(default_factory=list)


class CounterArgumentCounts(ContractBase):
    plaintiff: int = 0
    defendant: int = 0


class CounterArgumentAnalysis(ContractBase):
    """Arguments credited to the party each case's disposition favoured."""

    successful_plaintiff_arguments: List[Any] = Field(default_factory=list)
    successful_defendant_arguments: List[Any] = Field(default_factory=list)
    counts: CounterArgumentCounts = Field(default_factory=CounterArgumentCounts)


class PrecedentAnalysis(ContractBase):
    key_precedents: List[PrecedentEntry] = Field(default_factory=list)


class EnhancedAnalysis(ContractBase):
    issue_classification: IssueClassification
    jurisdiction_distribution: List[JurisdictionShare]
    timeline_analysis: TimelineAnalysis
    precedent_analysis: PrecedentAnalysis
    implications_analysis: ImplicationsAnalysis
    counter_arguments: CounterArgumentAnalysis


# --------------------------------------------------------------------------- #
# Summary Types                                                               #
# --------------------------------------------------------------------------- #


class ConfidenceScores(ContractBase):
    """Consensus scores in [0, 1]; higher means fewer distinct values survived."""

    legal_issues: float
    statutes: float
    disposition: float
    precedents: float
    overall: float


class CaseCounts(ContractBase):
    """Distinct-value cardinality per category plus the record count."""

    legal_issues: int
    statutes: int
    arguments: int
    evidence: int
    court_reasonings: int
    final_orders: int
    dispositions: int
    total_cases: int
    jurisdictions: int
    precedents: int


class CaseSummary(ContractBase):
    """Representative summary of a batch of case records."""

    aggregated_legal_issues: List[Any]
    aggregated_statutes: List[Any]
    aggregated_arguments: List[Any]
    aggregated_plaintiffs: List[Any]
    aggregated_defendants: List[Any]
    aggregated_evidence: List[Any]
    aggregated_court_reasonings: List[Any]
    aggregated_final_orders: List[Any]
    aggregated_final_case_urls: List[Any] = Field(alias="aggregatedFinalCaseURLs")
    aggregated_source_file_urls: List[Any] = Field(alias="aggregatedSourceFileURLs")
    most_likely_disposition: Optional[str] = None
    confidence_scores: ConfidenceScores
    enhanced_analysis: EnhancedAnalysis
    counts: CaseCounts


class KeywordSummary(ContractBase):
    """Aggregated search keywords and the year window requested upstream."""

    aggregated_keywords: List[Any]
    year_after: Any = 0
    year_before: Any = 0
    specified_year: Any = 0
