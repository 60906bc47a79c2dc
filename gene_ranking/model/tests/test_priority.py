"""
Tests for priority results and gene match evidence.
"""

import pytest

from gene_ranking.model.priority import GeneMatch, PriorityResult, PriorityType


class TestPriorityResult:
    """Tests for PriorityResult."""

    def test_creation(self):
        match = GeneMatch(query_gene_id=2263, match_gene_id=14183, score=0.8,
                          best_match_models=["MGI:95523"])
        result = PriorityResult(PriorityType.HIPHIVE_PRIORITY, 2263, "FGFR2", 0.8, match)

        assert result.score == 0.8
        assert result.evidence.best_match_models == ("MGI:95523",)

    @pytest.mark.parametrize("score", [-0.01, 1.01])
    def test_score_out_of_range(self, score):
        with pytest.raises(ValueError):
            PriorityResult(PriorityType.OMIM_PRIORITY, 1, "GENE", score)

    def test_to_dict(self):
        result = PriorityResult(PriorityType.OMIM_PRIORITY, 1, "GENE", 1.0)
        assert result.to_dict() == {
            "priority_type": "OMIM_PRIORITY",
            "gene_id": 1,
            "gene_symbol": "GENE",
            "score": 1.0,
        }

    def test_from_string(self):
        assert PriorityType.from_string("hiphive") == PriorityType.HIPHIVE_PRIORITY
        assert PriorityType.from_string("OMIM_PRIORITY") == PriorityType.OMIM_PRIORITY
        with pytest.raises(ValueError):
            PriorityType.from_string("astrology")


class TestGeneMatch:
    """Tests for GeneMatch."""

    def test_no_hit(self):
        assert GeneMatch.NO_HIT.score == 0.0
        assert GeneMatch.NO_HIT.best_match_models == ()
        assert GeneMatch.NO_HIT == GeneMatch()
