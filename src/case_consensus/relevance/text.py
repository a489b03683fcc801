"""Text blobs describing a record for similarity scoring."""

from __future__ import annotations

from typing import Any, List, Mapping

import orjson

from ..case_aggregation.normalizer import dig, unwrap_record


def _join(parts: List[Any], sep: str = ". ") -> str:
    return sep.join(str(part) for part in parts if part)


def _text(value: Any) -> str:
    """Flatten a string, list of strings or ``{"claims": [...]}`` into text."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return _join(value)
    if isinstance(value, Mapping):
        return _text(value.get("claims"))
    return ""


def _field_of_each(items: Any, field: str) -> str:
    if not isinstance(items, list):
        return ""
    return _join([item.get(field) for item in items if isinstance(item, Mapping)])


def case_text(record: Any) -> str:
    """Title, tags, facts, issues, reasoning, implications, arguments,
    evidence and property descriptions of a case, separated by blank lines."""
    case = unwrap_record(record)
    parts = [
        _text(dig(case, "caseInformation", "caseTitle")),
        _text(case.get("tags")),
        _field_of_each(case.get("factualBackground"), "fact"),
        _field_of_each(case.get("factualBackground"), "description"),
        _field_of_each(case.get("legalIssues"), "issue"),
        _field_of_each(case.get("legalIssues"), "description"),
        _text(dig(case, "courtAnalysis", "courtReasoning")),
        _text(dig(case, "analysisAndImplications", "legalImplications")),
        _text(dig(case, "analysisAndImplications", "practicalImplications")),
        _text(dig(case, "arguments", "plaintiffArguments")),
        _text(dig(case, "arguments", "defendantArguments")),
        _text(dig(case, "evidence", "keyEvidencePresented")),
        _field_of_each(case.get("propertyDetails"), "propertyDescription"),
    ]
    return "\n\n".join(part for part in parts if part)


def relevance_text(data: Any, is_case: bool = True) -> str:
    """Text for a case record, or for a keyword (any other JSON value)."""
    if is_case:
        return case_text(data)
    if isinstance(data, str):
        return data
    return orjson.dumps(data, default=str).decode("utf-8")
