"""Unit tests for relevance text, cosine similarity and oracle scoring."""

import numpy as np
import pytest

from case_consensus import EmptyInputError
from case_consensus.domain.ports import SimilarityOracle
from case_consensus.relevance import (
    case_text,
    compute_relevance_stats,
    cosine_similarity,
    relevance_text,
    score_records,
)


class KeywordOracle(SimilarityOracle):
    """Scores 1.0 when the query occurs in the text, 0.25 otherwise."""

    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.texts = []

    def similarity(self, query, text):
        self.texts.append(text)
        if self.fail_on and self.fail_on in text:
            raise RuntimeError("embedding service unavailable")
        return 1.0 if query in text else 0.25


class TestCosineSimilarity:
    def test_identical_orthogonal_opposite(self):
        assert cosine_similarity([1, 2, 3], [1, 2, 3]) == pytest.approx(1.0)
        assert cosine_similarity([1, 0], [0, 1]) == pytest.approx(0.0)
        assert cosine_similarity([1, 1], [-1, -1]) == pytest.approx(-1.0)

    def test_degenerate_vectors_score_zero(self):
        assert cosine_similarity([0, 0], [1, 1]) == 0.0
        assert cosine_similarity([], [1]) == 0.0
        assert cosine_similarity(None, [1]) == 0.0

    def test_common_prefix(self):
        assert cosine_similarity([1, 0, 5], [1, 0]) == pytest.approx(1.0)

    def test_numpy_input(self):
        assert isinstance(cosine_similarity(np.array([0.3, 0.4]), np.array([0.4, 0.3])), float)


class TestRelevanceText:
    def test_case_text_sections(self, land_cases):
        text = case_text(land_cases[0])

        assert text.startswith("Mwangi v Otieno\n\n")
        assert "Fraudulent land transfer. Compensation claims" in text
        assert "Original title deed. Forensic report" in text
        assert "Registry records are rebuttable" in text

    def test_case_text_from_json_payload(self, land_cases):
        assert "Kamau v Njoroge" in case_text(land_cases[1])

    def test_structured_claims(self):
        record = {"arguments": {"plaintiffArguments": {"claims": ["No consent", "Forgery"]}}}
        assert case_text(record) == "No consent. Forgery"

    def test_empty_case(self):
        assert case_text({}) == ""

    def test_keyword_text(self):
        assert relevance_text("land fraud", is_case=False) == "land fraud"
        assert relevance_text({"keyword": "eviction"}, is_case=False) == '{"keyword":"eviction"}'


class TestScoreRecords:
    def test_one_score_per_record(self, land_cases):
        assert score_records(land_cases, "fraud", KeywordOracle()) == [1.0, 1.0, 0.25]

    def test_failing_oracle_scores_zero(self, land_cases):
        scores = score_records(land_cases, "fraud", KeywordOracle(fail_on="Kamau"))
        assert scores == [1.0, 0.0, 0.25]

    def test_keywords(self):
        oracle = KeywordOracle()

        scores = score_records(["land fraud", "eviction"], "fraud", oracle, is_case=False)

        assert scores == [1.0, 0.25]
        assert oracle.texts == ["land fraud", "eviction"]

    def test_compute_relevance_stats(self, land_cases):
        stats, weights = compute_relevance_stats(land_cases, "fraud", KeywordOracle())

        assert weights == [1.0, 1.0, 0.25]
        assert stats.mean == pytest.approx(0.75)
        assert stats.median == pytest.approx(1.0)

    def test_compute_relevance_stats_empty(self):
        with pytest.raises(EmptyInputError):
            compute_relevance_stats([], "fraud", KeywordOracle())


class TestSentenceTransformerOracle:
    def test_scores_encoded_pair(self):
        pytest.importorskip("sentence_transformers")
        from case_consensus.relevance.sentence_oracle import SentenceTransformerOracle

        class FakeModel:
            def encode(self, texts):
                assert texts == ["land fraud", "Title was obtained by fraud"]
                return np.array([[1.0, 0.0], [1.0, 0.0]])

        oracle = SentenceTransformerOracle(model=FakeModel())

        assert oracle.similarity("land fraud", "Title was obtained by fraud") == pytest.approx(1.0)
