"""
Tests for the aggregation output models.
"""

from datetime import datetime

import orjson
import pytest
from pydantic import ValidationError

from case_consensus.types.schemas.models import (
    CaseCounts,
    Citation,
    ConfidenceScores,
    JurisdictionShare,
    KeywordSummary,
    PrecedentEntry,
    TimelineAnalysis,
    TimelineCase,
    YearlyTrend,
)


class TestContractBase:
    """Test behaviour shared by every output model."""

    def test_populate_by_field_name_or_alias(self):
        """Test that models accept snake_case and camelCase input."""
        by_name = JurisdictionShare(jurisdiction="High Court", count=0.3)
        by_alias = JurisdictionShare.model_validate({"jurisdiction": "High Court", "count": 0.3})
        assert by_name == by_alias

        trend = YearlyTrend.model_validate({"year": 2021, "caseCount": 1, "averageRelevance": 0.6})
        assert trend.case_count == 1

    def test_frozen(self):
        """Test that output models are immutable."""
        share = JurisdictionShare(jurisdiction="High Court", count=0.3)
        with pytest.raises(ValidationError):
            share.count = 1.0

    def test_extra_fields_forbidden(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Citation(summary="s", unexpected=True)


class TestCitation:
    """Test Citation model."""

    def test_defaults(self):
        """Test that every citation field is optional."""
        assert Citation().to_dict() == {"summary": None, "relatedReasoning": None, "weight": None}

    def test_raw_weight_preserved(self):
        """Test that the citing record's raw weight is kept."""
        assert Citation(weight="high").weight == "high"


class TestPrecedentEntry:
    """Test PrecedentEntry model."""

    def test_to_dict(self):
        """Test camelCase serialisation with nested citations."""
        entry = PrecedentEntry(
            name="Hubert L. Martin v Margaret Kamar",
            total_weight=1.5,
            citations=[Citation(summary="Innocent purchaser doctrine", weight=0.9)],
        )
        assert entry.to_dict()["totalWeight"] == 1.5
        assert entry.to_dict()["citations"][0]["summary"] == "Innocent purchaser doctrine"


class TestTimelineModels:
    """Test timeline models."""

    def test_empty_timeline(self):
        """Test that an empty timeline has no endpoints."""
        assert TimelineAnalysis().to_dict() == {
            "earliestCase": None,
            "latestCase": None,
            "yearlyTrends": [],
        }

    def test_to_json_dates(self):
        """Test that dates serialise as ISO strings."""
        case = TimelineCase(date=datetime(2021, 3, 2), case_title="Kamau v Njoroge", relevance_score=0.6)
        analysis = TimelineAnalysis(earliest_case=case, latest_case=case)

        payload = orjson.loads(analysis.to_json())

        assert payload["earliestCase"]["date"] == "2021-03-02T00:00:00"
        assert payload["latestCase"]["caseTitle"] == "Kamau v Njoroge"

    def test_to_dict_is_json_shaped(self):
        """Test that to_dict already holds only JSON types."""
        case = TimelineCase(date=datetime(2021, 3, 2), case_title="Kamau v Njoroge", relevance_score=0.6)

        data = TimelineAnalysis(earliest_case=case).to_dict()

        assert data["earliestCase"]["date"] == "2021-03-02T00:00:00"
        assert orjson.loads(orjson.dumps(data)) == data


class TestSummaryModels:
    """Test confidence, counts and keyword models."""

    def test_confidence_scores_keys(self):
        """Test ConfidenceScores serialisation."""
        scores = ConfidenceScores(legal_issues=1.0, statutes=0.5, disposition=1.0, precedents=0.0, overall=0.6)
        assert list(scores.to_dict()) == ["legalIssues", "statutes", "disposition", "precedents", "overall"]

    def test_counts_require_every_field(self):
        """Test that CaseCounts has no defaults."""
        with pytest.raises(ValidationError):
            CaseCounts(legal_issues=1)

    def test_keyword_summary_defaults(self):
        """Test that the year window defaults to zero."""
        summary = KeywordSummary(aggregated_keywords=["land fraud"])
        assert (summary.year_after, summary.year_before, summary.specified_year) == (0, 0, 0)
