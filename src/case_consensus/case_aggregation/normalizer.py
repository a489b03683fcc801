"""Record normalizer.

Extracts flat, typed value streams from one irregular case record. Records
come out of generative extraction, so any field may be missing, ``None``, a
string where a list was expected, or the other way round. Every lookup here is
optional-chained: absent or wrong-typed substructure contributes nothing and
never raises.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

import orjson
from dateutil import parser as dateparser
from loguru import logger

from ..domain.value_items import NormalizedCase, TimelinePoint, ValueItem
from ..types.ids import case_id
from .frequency import resolve_weight

DEFAULT_SOURCE_URL_SENTINELS: Tuple[str, ...] = ("not visible", "No available download link")
UNKNOWN_CASE_TITLE = "Unknown case"

# analysisAndImplications field -> implication kind
IMPLICATION_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("legalImplications", "legal"),
    ("practicalImplications", "practical"),
    ("areasForFurtherInquiry", "further_inquiry"),
    ("dissentingOrConcurringOpinions", "dissenting_opinions"),
)


def unwrap_record(record: Any) -> Mapping[str, Any]:
    """Return the parsed case body of a record.

    Records are either ``{"parsedOutput": <dict or JSON string>, ...}``
    envelopes or the parsed case itself. Undecodable payloads yield ``{}``.
    """
    if not isinstance(record, Mapping):
        return {}
    parsed = record.get("parsedOutput")
    if isinstance(parsed, (str, bytes)):
        try:
            parsed = orjson.loads(parsed)
        except orjson.JSONDecodeError:
            logger.warning("Skipping undecodable parsedOutput payload")
            return {}
        return parsed if isinstance(parsed, Mapping) else {}
    if isinstance(parsed, Mapping):
        return parsed
    return record


def record_id(record: Any, case: Mapping[str, Any]) -> str:
    """Explicit ``id`` of the envelope or the parsed case, else the envelope's fingerprint."""
    envelope_id = record.get("id") if isinstance(record, Mapping) else None
    if envelope_id in (None, "") and case.get("id") not in (None, ""):
        return str(case["id"])
    return case_id(record)


def dig(obj: Any, *path: str) -> Any:
    """Walk nested mappings, returning ``None`` as soon as a step is missing."""
    for key in path:
        if not isinstance(obj, Mapping):
            return None
        obj = obj.get(key)
    return obj


def as_values(value: Any) -> List[Any]:
    """A single truthy string, or the truthy members of a list."""
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, list):
        return [v for v in value if v]
    return []


def argument_values(value: Any) -> List[Any]:
    """Argument claims from a string, a list, or a ``{"claims": [...]}`` object."""
    if isinstance(value, Mapping):
        return as_values(value.get("claims"))
    return as_values(value)


def parse_judgment_date(raw: Any) -> Optional[datetime]:
    """Parse a judgment date; ``None`` stands for an unparseable date."""
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        parsed = dateparser.parse(raw)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None
    return parsed


def _issue_streams(
    issues: Any, weight: Optional[float], cid: str
) -> Tuple[List[ValueItem], List[ValueItem]]:
    issue_items: List[ValueItem] = []
    statute_items: List[ValueItem] = []
    if not isinstance(issues, list):
        return issue_items, statute_items
    for issue in issues:
        if not isinstance(issue, Mapping) or not issue.get("issue"):
            continue
        issue_items.append(
            ValueItem(
                value=issue["issue"],
                weight=weight,
                case_id=cid,
                is_primary=issue.get("type") == "primary",
                summary=issue.get("description"),
            )
        )
        statutes = issue.get("relevantStatutes")
        if isinstance(statutes, list):
            statute_items.extend(
                ValueItem(value=statute, weight=weight, case_id=cid, related_issue=issue["issue"])
                for statute in statutes
                if statute
            )
    return issue_items, statute_items


def _party_streams(
    arguments: Any, party: str, weight: Optional[float], cid: str
) -> Tuple[List[ValueItem], List[ValueItem]]:
    raw = dig(arguments, f"{party}Arguments")
    claims = [
        ValueItem(value=claim, weight=weight, case_id=cid, party=party)
        for claim in argument_values(raw)
    ]
    statutes = [
        ValueItem(value=statute, weight=weight, case_id=cid, party=party)
        for statute in as_values(dig(raw, "supportingStatutes"))
    ]
    return claims, statutes


def _simple_items(values: Iterable[Any], weight: Optional[float], cid: str) -> Tuple[ValueItem, ...]:
    return tuple(ValueItem(value=v, weight=weight, case_id=cid) for v in values)


def normalize(
    record: Any,
    weight: Optional[float] = None,
    source_url_sentinels: Sequence[str] = DEFAULT_SOURCE_URL_SENTINELS,
) -> NormalizedCase:
    """Extract every value stream from one record.

    Args:
        record: Raw record (envelope or parsed case); never mutated
        weight: The record's relevance weight, ``None`` when absent
        source_url_sentinels: Placeholder source URLs that are never emitted

    Returns:
        The canonical NormalizedCase for the record
    """
    case = unwrap_record(record)
    cid = record_id(record, case)
    info = dig(case, "caseInformation")
    title = dig(info, "caseTitle")

    issues, statutes = _issue_streams(case.get("legalIssues"), weight, cid)
    for top_level in ("relevantStatutes", "statutes"):
        statutes.extend(_simple_items(as_values(case.get(top_level)), weight, cid))

    arguments = case.get("arguments")
    plaintiff_arguments, plaintiff_statutes = _party_streams(arguments, "plaintiff", weight, cid)
    defendant_arguments, defendant_statutes = _party_streams(arguments, "defendant", weight, cid)
    statutes.extend(plaintiff_statutes)
    statutes.extend(defendant_statutes)

    reasoning = dig(case, "courtAnalysis", "courtReasoning")
    precedents = []
    cited = dig(case, "courtAnalysis", "keyPrecedentsCited")
    if isinstance(cited, list):
        precedents = [
            ValueItem(
                value=precedent["precedentName"],
                weight=weight,
                case_id=cid,
                related_reasoning=reasoning,
                summary=precedent.get("precedentSummary"),
            )
            for precedent in cited
            if isinstance(precedent, Mapping) and precedent.get("precedentName")
        ]

    disposition = dig(case, "finalRulingAndOrders", "disposition")
    court = dig(info, "court")

    timeline_point = None
    judgment_date = dig(info, "dateOfJudgment")
    if judgment_date:
        timeline_point = TimelinePoint(
            date=parse_judgment_date(judgment_date),
            case_title=title or UNKNOWN_CASE_TITLE,
            relevance_score=resolve_weight(weight),
        )

    analysis = case.get("analysisAndImplications")
    implications = tuple(
        ValueItem(value=analysis[field], weight=weight, case_id=cid, kind=kind, case_title=title)
        for field, kind in IMPLICATION_FIELDS
        if isinstance(analysis, Mapping) and analysis.get(field)
    )

    case_url = dig(info, "caseURL")
    source_url = dig(info, "originalSourceFileURL")

    return NormalizedCase(
        case_id=cid,
        issues=tuple(issues),
        statutes=tuple(statutes),
        plaintiff_arguments=tuple(plaintiff_arguments),
        defendant_arguments=tuple(defendant_arguments),
        evidence=_simple_items(as_values(dig(case, "evidence", "keyEvidencePresented")), weight, cid),
        reasonings=_simple_items(as_values(reasoning), weight, cid),
        orders=_simple_items(as_values(dig(case, "finalRulingAndOrders", "specificOrders")), weight, cid),
        precedents=tuple(precedents),
        implications=implications,
        disposition=(
            ValueItem(value=disposition, weight=weight, case_id=cid)
            if isinstance(disposition, str) and disposition
            else None
        ),
        jurisdiction=ValueItem(value=court, weight=weight, case_id=cid) if court else None,
        timeline_point=timeline_point,
        case_url=ValueItem(value=case_url, weight=weight, case_id=cid) if case_url else None,
        source_url=(
            ValueItem(value=source_url, weight=weight, case_id=cid)
            if source_url and source_url not in source_url_sentinels
            else None
        ),
    )
