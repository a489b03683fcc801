"""Case aggregation engine.

Consolidates a batch of extracted case records into one representative
summary, weighted by each record's relevance to the user's query.

Flow:
1. Normalize every record once into a NormalizedCase
2. Build one weighted frequency map per category
3. Keep values whose cumulative weight reaches the category threshold
4. Derive rankings, timeline, correlations and confidence from the maps and
   the normalized streams; raw records are not touched again

Every call allocates fresh maps and returns a new summary; nothing is cached
across calls.
"""

from __future__ import annotations

from itertools import chain
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from loguru import logger

from ..config import EngineSettings, ThresholdOptions, load_config
from ..domain.value_items import NormalizedCase, ValueItem
from ..types.schemas.models import (
    CaseCounts,
    CaseSummary,
    ConfidenceScores,
    EnhancedAnalysis,
    PrecedentAnalysis,
)
from .confidence import confidence_score, overall_confidence
from .frequency import FrequencyMap, select_aggregated, weighted_frequency_map
from .implications import analyze_implications, classify_issues
from .normalizer import normalize
from .outcomes import correlate_arguments
from .precedents import rank_precedents
from .thresholds import (
    DEFAULT_THRESHOLD_SPECS,
    ThresholdSpec,
    build_dynamic_thresholds,
    compute_stats,
)
from .timeline import analyze_jurisdiction, analyze_timeline

ThresholdInput = Union[ThresholdOptions, Mapping[str, Any], None]


def align_weights(weights: Optional[Sequence[Any]], n_records: int) -> List[Any]:
    """One weight slot per record; missing slots are ``None`` (weight 1)."""
    if weights is None:
        return [None] * n_records
    weights = list(weights)
    if len(weights) != n_records:
        logger.warning(
            f"Got {len(weights)} relevance weights for {n_records} records; "
            "unmatched records default to weight 1"
        )
    return (weights + [None] * n_records)[:n_records]


def most_likely_disposition(frequency: FrequencyMap) -> Optional[str]:
    """Disposition with the strictly highest positive weight; first seen wins ties."""
    best = None
    highest = 0.0
    for disposition, weight in frequency.items():
        if weight > highest:
            highest = weight
            best = disposition
    return best


def _stream(cases: Iterable[NormalizedCase], attribute: str) -> List[ValueItem]:
    return list(chain.from_iterable(getattr(case, attribute) for case in cases))


def _present(cases: Iterable[NormalizedCase], attribute: str) -> List[Any]:
    return [getattr(case, attribute) for case in cases if getattr(case, attribute) is not None]


def _as_thresholds(thresholds: ThresholdInput) -> ThresholdOptions:
    if isinstance(thresholds, ThresholdOptions):
        return thresholds
    return ThresholdOptions.model_validate(dict(thresholds or {}))


def aggregate_cases(
    records: Sequence[Any],
    weights: Optional[Sequence[Any]] = None,
    thresholds: ThresholdInput = None,
    settings: Optional[EngineSettings] = None,
) -> CaseSummary:
    """Aggregate case records into a relevance-weighted summary.

    Args:
        records: Raw case records (envelopes or parsed cases); read only
        weights: Relevance weight per record, aligned by index. ``None`` means
            every record weighs 1
        thresholds: Per-category cutoffs, as ThresholdOptions or an options
            dict; omitted categories default to 1
        settings: Engine settings; defaults are loaded from the environment

    Returns:
        CaseSummary with the aggregated lists, most likely disposition,
        enhanced analysis, confidence scores and counts
    """
    records = list(records)
    settings = settings or load_config()
    cutoffs = _as_thresholds(thresholds)
    logger.info(f"Processing {len(records)} cases...")

    cases = []
    for index, (record, weight) in enumerate(zip(records, align_weights(weights, len(records)))):
        logger.debug(f"Record {index} relevance weight: {weight}")
        cases.append(normalize(record, weight, settings.source_url_sentinels))

    issues = _stream(cases, "issues")
    statutes = _stream(cases, "statutes")
    plaintiffs = _stream(cases, "plaintiff_arguments")
    defendants = _stream(cases, "defendant_arguments")
    arguments = _stream(cases, "arguments")
    evidence = _stream(cases, "evidence")
    reasonings = _stream(cases, "reasonings")
    orders = _stream(cases, "orders")
    precedents = _stream(cases, "precedents")
    implications = _stream(cases, "implications")
    dispositions = _present(cases, "disposition")
    courts = _present(cases, "jurisdiction")
    timeline_points = _present(cases, "timeline_point")

    issues_freq = weighted_frequency_map(issues)
    statutes_freq = weighted_frequency_map(statutes)
    arguments_freq = weighted_frequency_map(arguments)
    plaintiffs_freq = weighted_frequency_map(plaintiffs)
    defendants_freq = weighted_frequency_map(defendants)
    evidence_freq = weighted_frequency_map(evidence)
    reasonings_freq = weighted_frequency_map(reasonings)
    orders_freq = weighted_frequency_map(orders)
    dispositions_freq = weighted_frequency_map(dispositions)
    courts_freq = weighted_frequency_map(courts)
    precedents_freq = weighted_frequency_map(precedents)
    case_urls_freq = weighted_frequency_map(_present(cases, "case_url"))
    source_urls_freq = weighted_frequency_map(_present(cases, "source_url"))

    aggregated_issues = select_aggregated(issues_freq, cutoffs.issues)
    aggregated_statutes = select_aggregated(statutes_freq, cutoffs.statutes)
    key_precedents = rank_precedents(precedents, settings.top_precedents, precedents_freq)

    disposition_kept = min(1, len(dispositions_freq))
    confidence = ConfidenceScores(
        legal_issues=confidence_score(len(aggregated_issues), len(issues_freq)),
        statutes=confidence_score(len(aggregated_statutes), len(statutes_freq)),
        disposition=confidence_score(disposition_kept, len(dispositions_freq)),
        precedents=confidence_score(len(key_precedents), len(precedents_freq)),
        overall=overall_confidence(
            [
                (len(aggregated_issues), len(issues_freq)),
                (len(aggregated_statutes), len(statutes_freq)),
                (disposition_kept, len(dispositions_freq)),
            ]
        ),
    )

    enhanced = EnhancedAnalysis(
        issue_classification=classify_issues(issues, cutoffs.issues),
        jurisdiction_distribution=analyze_jurisdiction(courts, courts_freq),
        timeline_analysis=analyze_timeline(timeline_points),
        precedent_analysis=PrecedentAnalysis(key_precedents=key_precedents),
        implications_analysis=analyze_implications(
            implications,
            {
                "legal": settings.legal_implications_cap,
                "practical": settings.practical_implications_cap,
                "further_inquiry": settings.further_inquiry_cap,
                "dissenting_opinions": settings.dissenting_opinions_cap,
            },
        ),
        counter_arguments=correlate_arguments(arguments, dispositions),
    )

    return CaseSummary(
        aggregated_legal_issues=aggregated_issues,
        aggregated_statutes=aggregated_statutes,
        aggregated_arguments=select_aggregated(arguments_freq, cutoffs.arguments),
        aggregated_plaintiffs=select_aggregated(plaintiffs_freq, cutoffs.plaintiffs),
        aggregated_defendants=select_aggregated(defendants_freq, cutoffs.defendants),
        aggregated_evidence=select_aggregated(evidence_freq, cutoffs.evidence),
        aggregated_court_reasonings=select_aggregated(reasonings_freq, cutoffs.court_reasoning),
        aggregated_final_orders=select_aggregated(orders_freq, cutoffs.final_orders),
        aggregated_final_case_urls=select_aggregated(case_urls_freq, cutoffs.case_urls),
        aggregated_source_file_urls=select_aggregated(source_urls_freq, cutoffs.source_file_urls),
        most_likely_disposition=most_likely_disposition(dispositions_freq),
        confidence_scores=confidence,
        enhanced_analysis=enhanced,
        counts=CaseCounts(
            legal_issues=len(issues_freq),
            statutes=len(statutes_freq),
            arguments=len(arguments_freq),
            evidence=len(evidence_freq),
            court_reasonings=len(reasonings_freq),
            final_orders=len(orders_freq),
            dispositions=len(dispositions_freq),
            total_cases=len(records),
            jurisdictions=len(courts_freq),
            precedents=len(precedents_freq),
        ),
    )


def aggregate_with_adaptive_thresholds(
    records: Sequence[Any],
    weights: Sequence[float],
    specs: Mapping[str, ThresholdSpec] = DEFAULT_THRESHOLD_SPECS,
    settings: Optional[EngineSettings] = None,
) -> CaseSummary:
    """Scale every category threshold to the weight distribution, then aggregate.

    Raises:
        EmptyInputError: if ``weights`` is empty
    """
    stats = compute_stats(weights)
    logger.info(
        f"Relevance score stats: mean={stats.mean:.4f} median={stats.median:.4f} "
        f"std_dev={stats.std_dev:.4f}"
    )
    thresholds = build_dynamic_thresholds(stats, dict(specs))
    logger.debug(f"Dynamic thresholds: {thresholds.model_dump()}")
    return aggregate_cases(records, weights, thresholds, settings)
