"""Unit tests for consensus confidence scores."""

import pytest

from case_consensus.case_aggregation.confidence import confidence_score, overall_confidence


class TestConfidenceScore:
    """Test the per-category score."""

    @pytest.mark.parametrize("kept", [0, 1, 5])
    @pytest.mark.parametrize("total", [0, 1])
    def test_at_most_one_distinct_value_is_full_confidence(self, kept, total):
        assert confidence_score(kept, total) == 1.0

    def test_formula(self):
        assert confidence_score(1, 3) == pytest.approx(1.0)
        assert confidence_score(2, 3) == pytest.approx(0.5)
        assert confidence_score(3, 3) == pytest.approx(0.0)

    def test_non_increasing_in_kept(self):
        scores = [confidence_score(kept, 6) for kept in range(7)]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.parametrize("kept,total", [(0, 4), (9, 4), (0, 2)])
    def test_bounded(self, kept, total):
        assert 0.0 <= confidence_score(kept, total) <= 1.0


class TestOverallConfidence:
    """Test the summed-count overall score."""

    def test_sums_counts_before_scoring(self):
        categories = [(1, 3), (1, 2), (1, 2)]

        overall = overall_confidence(categories)

        # (7 - 3) / (7 - 1), not the mean of the three per-category scores
        assert overall == pytest.approx(4 / 6)
        assert overall != pytest.approx(
            sum(confidence_score(k, t) for k, t in categories) / len(categories)
        )

    def test_no_categories(self):
        assert overall_confidence([]) == 1.0
