"""
Gene Scorer

Turns a gene's filtered variant evaluations and prioritizer results into a
filter score, a priority score and the combined score used for ranking.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

import numpy as np

from ..model.gene import Gene
from ..model.inheritance import ALLELE_REQUIREMENTS, AlleleRequirement, ModeOfInheritance
from ..model.priority import PriorityResult
from ..model.variant import VariantEvaluation
from .ranking import RankedGene, RankingResult, rank_genes, rank_order

logger = logging.getLogger(__name__)


class PriorityCombination(Enum):
    """How scores from several prioritizers are merged into one."""

    PRODUCT = "product"
    MEAN = "mean"
    MAX = "max"


@dataclass
class ScorerConfig:
    """Configuration for the gene scorer."""

    # Only used when a gene carries results from more than one prioritizer
    priority_combination: PriorityCombination = PriorityCombination.PRODUCT

    # Genes are scored on a thread pool when greater than 1
    max_workers: int = 1

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.priority_combination, str):
            self.priority_combination = PriorityCombination(self.priority_combination.lower())
        if not isinstance(self.priority_combination, PriorityCombination):
            raise ValueError(f"Unknown priority combination: {self.priority_combination!r}")
        if not isinstance(self.max_workers, int) or isinstance(self.max_workers, bool):
            raise ValueError(f"max_workers must be an integer, got {self.max_workers!r}")
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority_combination": self.priority_combination.value,
            "max_workers": self.max_workers,
        }


@dataclass(frozen=True)
class GeneScore:
    """
    Scores computed for one gene.

    Attributes:
        filter_score: Score from the variants that passed filtering
        priority_score: Score from the prioritizers
        combined_score: Mean of the filter and priority scores
        contributing_variants: Variants the filter score was taken from
    """

    filter_score: float = 0.0
    priority_score: float = 0.0
    combined_score: float = 0.0
    contributing_variants: Tuple[VariantEvaluation, ...] = ()


class GeneScorer:
    """
    Scores genes under a mode of inheritance and ranks them.

    Dominant-like modes take the single most damaging passing variant.
    Recessive modes need two alleles and average the two best passing
    variants, falling back to the single best when only one passed.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        """
        Initialize gene scorer.

        Args:
            config: Scorer configuration
        """
        self.config = config or ScorerConfig()

    def calculate(self, gene: Gene, mode_of_inheritance: ModeOfInheritance) -> GeneScore:
        """
        Compute the scores for a gene without modifying it.

        Args:
            gene: Gene with its variant evaluations and priority results
            mode_of_inheritance: Mode of inheritance to score under

        Returns:
            GeneScore for the gene
        """
        _check_arguments(gene, mode_of_inheritance)

        filter_score, contributing = self._calculate_filter_score(
            gene.variant_evaluations, mode_of_inheritance
        )
        priority_score = self._calculate_priority_score(list(gene.priority_results.values()))
        combined_score = (filter_score + priority_score) / 2.0

        logger.debug(
            f"{gene.gene_symbol} ({mode_of_inheritance.name}): filter={filter_score:.4f} "
            f"priority={priority_score:.4f} combined={combined_score:.4f}"
        )

        return GeneScore(
            filter_score=filter_score,
            priority_score=priority_score,
            combined_score=combined_score,
            contributing_variants=tuple(contributing),
        )

    def score_gene(self, gene: Gene, mode_of_inheritance: ModeOfInheritance) -> None:
        """Score a gene and record the result on it and its variants."""
        score = self.calculate(gene, mode_of_inheritance)
        gene.apply_score(score)

    def score_genes(self, genes: List[Gene], mode_of_inheritance: ModeOfInheritance) -> None:
        """
        Score every gene, then sort the list in place by combined score.

        Genes with equal combined scores keep their relative order.

        Args:
            genes: Genes to score; reordered in place
            mode_of_inheritance: Mode of inheritance to score under
        """
        scores = self._calculate_all(genes, mode_of_inheritance)
        for gene, score in zip(genes, scores):
            gene.apply_score(score)

        genes[:] = rank_genes(genes)
        logger.info(f"Scored and ranked {len(genes)} genes under {mode_of_inheritance.name}")

    def rank(
        self,
        genes: Sequence[Gene],
        mode_of_inheritance: ModeOfInheritance,
    ) -> RankingResult:
        """
        Score and rank genes without modifying them or the input sequence.

        Args:
            genes: Genes to rank
            mode_of_inheritance: Mode of inheritance to score under

        Returns:
            RankingResult ordered by combined score, best first
        """
        genes = list(genes)
        scores = self._calculate_all(genes, mode_of_inheritance)
        order = rank_order([s.combined_score for s in scores])

        ranked = [
            RankedGene(rank=position + 1, gene=genes[i], score=scores[i])
            for position, i in enumerate(order)
        ]
        logger.info(f"Ranked {len(ranked)} genes under {mode_of_inheritance.name}")

        return RankingResult(
            ranked_genes=ranked,
            mode_of_inheritance=mode_of_inheritance,
            metadata={"scorer": self.config.to_dict()},
        )

    def _calculate_all(
        self,
        genes: Sequence[Gene],
        mode_of_inheritance: ModeOfInheritance,
    ) -> List[GeneScore]:
        """Score genes, on a thread pool when configured. Order matches input."""
        if mode_of_inheritance is None:
            raise TypeError("mode_of_inheritance must not be None")

        if self.config.max_workers > 1 and len(genes) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                return list(executor.map(
                    lambda gene: self.calculate(gene, mode_of_inheritance), genes
                ))

        return [self.calculate(gene, mode_of_inheritance) for gene in genes]

    def _calculate_filter_score(
        self,
        variant_evaluations: Sequence[VariantEvaluation],
        mode_of_inheritance: ModeOfInheritance,
    ) -> Tuple[float, List[VariantEvaluation]]:
        """Filter score and the variants it was taken from."""
        passed = [v for v in variant_evaluations if v.passed_all_filters()]
        if not passed:
            return 0.0, []

        requirement = ALLELE_REQUIREMENTS[mode_of_inheritance]
        if requirement == AlleleRequirement.TWO_ALLELES and len(passed) >= 2:
            return _two_allele_score(passed)
        return _single_allele_score(passed)

    def _calculate_priority_score(self, priority_results: List[PriorityResult]) -> float:
        """Merge prioritizer scores; 0.0 without any."""
        if not priority_results:
            return 0.0
        if len(priority_results) == 1:
            return priority_results[0].score

        scores = np.array([r.score for r in priority_results], dtype=float)
        method = self.config.priority_combination
        if method == PriorityCombination.PRODUCT:
            return float(np.prod(scores))
        elif method == PriorityCombination.MEAN:
            return float(np.mean(scores))
        elif method == PriorityCombination.MAX:
            return float(np.max(scores))
        raise ValueError(f"Unknown priority combination: {method}")


def _check_arguments(gene: Gene, mode_of_inheritance: ModeOfInheritance) -> None:
    if gene is None:
        raise TypeError("gene must not be None")
    if not isinstance(mode_of_inheritance, ModeOfInheritance):
        raise TypeError(
            f"mode_of_inheritance must be a ModeOfInheritance, got {mode_of_inheritance!r}"
        )


def _single_allele_score(
    passed: List[VariantEvaluation],
) -> Tuple[float, List[VariantEvaluation]]:
    """Best variant score; every variant reaching it contributes."""
    best = max(v.variant_score for v in passed)
    return best, [v for v in passed if v.variant_score == best]


def _two_allele_score(
    passed: List[VariantEvaluation],
) -> Tuple[float, List[VariantEvaluation]]:
    """Mean of the two best variant scores; ties keep insertion order."""
    top_two = sorted(passed, key=lambda v: v.variant_score, reverse=True)[:2]
    score = (top_two[0].variant_score + top_two[1].variant_score) / 2.0
    return score, top_two
