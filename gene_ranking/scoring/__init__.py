"""
Gene Scoring

Scores genes from their filtered variants and prioritizer results under a
mode of inheritance, and ranks them by combined score.
"""

from .gene_scorer import GeneScore, GeneScorer, PriorityCombination, ScorerConfig
from .ranking import RankedGene, RankingResult, rank_genes, rank_order

__all__ = [
    # Scorer
    "GeneScore",
    "GeneScorer",
    "PriorityCombination",
    "ScorerConfig",
    # Ranking
    "RankedGene",
    "RankingResult",
    "rank_genes",
    "rank_order",
]
