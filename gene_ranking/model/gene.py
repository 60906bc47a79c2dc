"""
Gene Aggregate

Collects the variant evaluations and priority results observed for one gene,
and holds the scores assigned to it by the gene scorer.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .priority import PriorityResult, PriorityType
from .variant import VariantEvaluation

if TYPE_CHECKING:
    from ..scoring.gene_scorer import GeneScore


@dataclass(eq=False)
class Gene:
    """
    One candidate gene in an analysis.

    Variants and priority results are added by the filter and prioritizer
    stages. The three scores stay at 0.0 until the gene scorer applies a
    score; nothing else writes them.

    Attributes:
        gene_symbol: HGNC symbol
        gene_id: Numeric (Entrez) gene identifier
    """

    gene_symbol: str
    gene_id: int
    variant_evaluations: List[VariantEvaluation] = field(default_factory=list)
    priority_results: Dict[PriorityType, PriorityResult] = field(default_factory=dict)
    filter_score: float = field(default=0.0, init=False)
    priority_score: float = field(default=0.0, init=False)
    combined_score: float = field(default=0.0, init=False)

    def add_variant(self, variant_evaluation: VariantEvaluation) -> None:
        self.variant_evaluations.append(variant_evaluation)

    def add_priority_result(self, priority_result: PriorityResult) -> None:
        """Store a result, replacing any earlier one from the same prioritizer."""
        self.priority_results[priority_result.priority_type] = priority_result

    def get_priority_result(self, priority_type: PriorityType) -> Optional[PriorityResult]:
        return self.priority_results.get(priority_type)

    @property
    def passed_variant_evaluations(self) -> List[VariantEvaluation]:
        return [v for v in self.variant_evaluations if v.passed_all_filters()]

    @property
    def passed_filters(self) -> bool:
        """True when at least one variant passed every filter."""
        return any(v.passed_all_filters() for v in self.variant_evaluations)

    @property
    def contributing_variants(self) -> List[VariantEvaluation]:
        return [v for v in self.variant_evaluations if v.contributes_to_gene_score]

    def apply_score(self, score: "GeneScore") -> None:
        """
        Write a computed score back to this gene and its variants.

        Contributing flags are reset on every variant first, so applying a new
        score never leaves a stale flag from an earlier scoring.

        Args:
            score: Score computed for this gene
        """
        contributing = {id(v) for v in score.contributing_variants}
        for variant_evaluation in self.variant_evaluations:
            variant_evaluation.contributes_to_gene_score = id(variant_evaluation) in contributing

        self.filter_score = score.filter_score
        self.priority_score = score.priority_score
        self.combined_score = score.combined_score

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "gene_symbol": self.gene_symbol,
            "gene_id": self.gene_id,
            "filter_score": self.filter_score,
            "priority_score": self.priority_score,
            "combined_score": self.combined_score,
            "n_variants": len(self.variant_evaluations),
            "n_passed_variants": len(self.passed_variant_evaluations),
            "contributing_variants": [v.variant_key for v in self.contributing_variants],
            "priority_results": {
                pt.name: r.score for pt, r in self.priority_results.items()
            },
        }

    def __str__(self) -> str:
        return (
            f"{self.gene_symbol} ({self.gene_id}): "
            f"combined={self.combined_score:.3f} "
            f"filter={self.filter_score:.3f} priority={self.priority_score:.3f}"
        )
