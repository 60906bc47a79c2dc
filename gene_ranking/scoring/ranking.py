"""
Gene Ranking

Orders scored genes by combined score, best first, with input position as an
explicit tie-break.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

import numpy as np

from ..model.gene import Gene
from ..model.inheritance import ModeOfInheritance

if TYPE_CHECKING:
    from .gene_scorer import GeneScore


def rank_order(combined_scores: Sequence[float]) -> List[int]:
    """
    Indices that order scores descending, ties by ascending input index.

    Args:
        combined_scores: One score per item, in input order

    Returns:
        Input indices in ranked order
    """
    scores = np.asarray(combined_scores, dtype=float)
    if scores.size == 0:
        return []
    # lexsort uses the last key as the primary key
    return [int(i) for i in np.lexsort((np.arange(scores.size), -scores))]


def rank_genes(genes: Sequence[Gene]) -> List[Gene]:
    """Return a new list of already scored genes in ranked order."""
    genes = list(genes)
    return [genes[i] for i in rank_order([g.combined_score for g in genes])]


@dataclass(frozen=True)
class RankedGene:
    """A gene, its computed scores and its 1-based position in a ranking."""

    rank: int
    gene: Gene
    score: "GeneScore"

    @property
    def gene_symbol(self) -> str:
        return self.gene.gene_symbol

    @property
    def combined_score(self) -> float:
        return self.score.combined_score

    def summary(self) -> str:
        return (
            f"[{self.rank}] {self.gene.gene_symbol}: {self.score.combined_score:.3f} "
            f"(filter {self.score.filter_score:.3f}, "
            f"priority {self.score.priority_score:.3f})"
        )


@dataclass
class RankingResult:
    """
    Result of ranking a set of genes.

    Attributes:
        ranked_genes: Genes with their scores, best first
        mode_of_inheritance: Mode the genes were scored under
        timestamp: When the ranking was produced
        metadata: Additional result information
    """

    ranked_genes: List[RankedGene]
    mode_of_inheritance: ModeOfInheritance
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.ranked_genes)

    @property
    def genes(self) -> List[Gene]:
        return [r.gene for r in self.ranked_genes]

    @property
    def scores(self) -> np.ndarray:
        """Combined scores in ranked order."""
        return np.array([r.combined_score for r in self.ranked_genes], dtype=float)

    def top_genes(self, n: int = 10) -> List[RankedGene]:
        return self.ranked_genes[:n]

    def rank_of(self, gene_symbol: str) -> Optional[int]:
        """1-based rank of a gene symbol, or None when absent."""
        for ranked in self.ranked_genes:
            if ranked.gene_symbol == gene_symbol:
                return ranked.rank
        return None

    def to_dataframe(self):
        """
        Convert to pandas DataFrame.

        Returns:
            DataFrame with one row per gene in ranked order
        """
        import pandas as pd
        return pd.DataFrame(
            [
                {
                    "rank": r.rank,
                    "gene_symbol": r.gene.gene_symbol,
                    "gene_id": r.gene.gene_id,
                    "combined_score": r.score.combined_score,
                    "filter_score": r.score.filter_score,
                    "priority_score": r.score.priority_score,
                    "n_contributing_variants": len(r.score.contributing_variants),
                }
                for r in self.ranked_genes
            ],
            columns=[
                "rank",
                "gene_symbol",
                "gene_id",
                "combined_score",
                "filter_score",
                "priority_score",
                "n_contributing_variants",
            ],
        )

    def summary(self, n: int = 10) -> str:
        """Get summary of ranking results."""
        lines = [
            "=== Gene Ranking ===",
            f"Mode of inheritance: {self.mode_of_inheritance.name}",
            f"Genes ranked: {len(self.ranked_genes)}",
            "",
            "Top Genes:",
        ]
        for ranked in self.top_genes(n):
            lines.append(f"  {ranked.summary()}")
        return "\n".join(lines)
