"""Case aggregation package.

Relevance-weighted consolidation of extracted case records.

Modules:
- frequency: Weighted frequency maps and threshold filtering.
- thresholds: Relevance statistics and adaptive per-category cutoffs.
- normalizer: Canonical value streams from irregular records.
- precedents: Top-K precedent ranking with citation context.
- timeline: Chronological trends and jurisdiction distribution.
- outcomes: Disposition-driven argument correlation.
- confidence: Consensus confidence scores.
- implications: Issue classification and implications ranking.
- engine: End-to-end case aggregation.
- keywords: Keyword variant.
"""

__all__ = [
    "frequency",
    "thresholds",
    "normalizer",
    "precedents",
    "timeline",
    "outcomes",
    "confidence",
    "implications",
    "engine",
    "keywords",
]
