from .models import (
    CaseCounts,
    CaseSummary,
    Citation,
    ConfidenceScores,
    CounterArgumentAnalysis,
    CounterArgumentCounts,
    EnhancedAnalysis,
    ImplicationsAnalysis,
    IssueClassification,
    JurisdictionShare,
    KeywordSummary,
    PrecedentAnalysis,
    PrecedentEntry,
    TimelineAnalysis,
    TimelineCase,
    YearlyTrend,
)

__all__ = [
    "CaseCounts",
    "CaseSummary",
    "Citation",
    "ConfidenceScores",
    "CounterArgumentAnalysis",
    "CounterArgumentCounts",
    "EnhancedAnalysis",
    "ImplicationsAnalysis",
    "IssueClassification",
    "JurisdictionShare",
    "KeywordSummary",
    "PrecedentAnalysis",
    "PrecedentEntry",
    "TimelineAnalysis",
    "TimelineCase",
    "YearlyTrend",
]
