"""
Variant Evaluation

A single variant together with the filter results recorded against it and
the precomputed score summarising its predicted impact and rarity.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional
import logging

from .filters import FilterResult, FilterStatus, FilterType
from .frequency import FrequencyData

logger = logging.getLogger(__name__)


class VariantEffect(Enum):
    """Predicted effect of a variant (Sequence Ontology terms)."""

    # High impact
    FRAMESHIFT_VARIANT = "frameshift_variant"
    STOP_GAINED = "stop_gained"
    STOP_LOST = "stop_lost"
    START_LOST = "start_lost"
    SPLICE_ACCEPTOR_VARIANT = "splice_acceptor_variant"
    SPLICE_DONOR_VARIANT = "splice_donor_variant"

    # Moderate impact
    INFRAME_INSERTION = "inframe_insertion"
    INFRAME_DELETION = "inframe_deletion"
    MISSENSE_VARIANT = "missense_variant"

    # Low impact
    SPLICE_REGION_VARIANT = "splice_region_variant"
    SYNONYMOUS_VARIANT = "synonymous_variant"

    # Modifier
    FIVE_PRIME_UTR_VARIANT = "5_prime_UTR_variant"
    THREE_PRIME_UTR_VARIANT = "3_prime_UTR_variant"
    INTRON_VARIANT = "intron_variant"
    NON_CODING_TRANSCRIPT_VARIANT = "non_coding_transcript_variant"
    REGULATORY_REGION_VARIANT = "regulatory_region_variant"
    UPSTREAM_GENE_VARIANT = "upstream_gene_variant"
    DOWNSTREAM_GENE_VARIANT = "downstream_gene_variant"
    INTERGENIC_VARIANT = "intergenic_variant"

    SEQUENCE_VARIANT = "sequence_variant"

    @classmethod
    def from_string(cls, value: str) -> "VariantEffect":
        """Look up an effect by SO term or enum name."""
        key = value.strip()
        for member in cls:
            if member.value == key or member.name == key.upper():
                return member
        raise ValueError(f"Unknown variant effect: {value}")

    @property
    def default_pathogenicity(self) -> float:
        return EFFECT_PATHOGENICITY.get(self, 0.0)


# Default pathogenicity used when no predicted score is supplied
EFFECT_PATHOGENICITY: Dict[VariantEffect, float] = {
    VariantEffect.FRAMESHIFT_VARIANT: 0.95,
    VariantEffect.STOP_GAINED: 0.95,
    VariantEffect.STOP_LOST: 0.95,
    VariantEffect.START_LOST: 0.95,
    VariantEffect.SPLICE_ACCEPTOR_VARIANT: 0.90,
    VariantEffect.SPLICE_DONOR_VARIANT: 0.90,
    VariantEffect.INFRAME_INSERTION: 0.85,
    VariantEffect.INFRAME_DELETION: 0.85,
    VariantEffect.MISSENSE_VARIANT: 0.6,
    VariantEffect.SPLICE_REGION_VARIANT: 0.2,
    VariantEffect.SYNONYMOUS_VARIANT: 0.1,
}


@dataclass(eq=False)
class VariantEvaluation:
    """
    A variant and everything recorded about it before gene scoring.

    Identity is by object: two evaluations at the same coordinates are still
    distinct entries of a gene.

    Attributes:
        chrom: Chromosome name
        pos: 1-based position
        ref: Reference allele
        alt: Alternate allele
        gene_symbol: Symbol of the gene the variant was assigned to
        gene_id: Numeric gene identifier
        variant_effect: Most severe predicted effect
        frequency_data: Population frequencies, if known
        pathogenicity_score: Predicted pathogenicity in [0, 1]; defaults to
            the effect's default pathogenicity
        variant_score: Combined score in [0, 1]; derived from frequency and
            pathogenicity when not given
        contributes_to_gene_score: Set by the gene scorer only
    """

    chrom: str
    pos: int
    ref: str
    alt: str
    gene_symbol: Optional[str] = None
    gene_id: Optional[int] = None
    variant_effect: VariantEffect = VariantEffect.SEQUENCE_VARIANT
    frequency_data: Optional[FrequencyData] = None
    pathogenicity_score: Optional[float] = None
    variant_score: Optional[float] = None
    filter_results: Dict[FilterType, FilterResult] = field(default_factory=dict)
    contributes_to_gene_score: bool = False

    def __post_init__(self):
        """Derive the variant score and validate ranges."""
        self.chrom = str(self.chrom)
        if self.pathogenicity_score is None:
            self.pathogenicity_score = self.variant_effect.default_pathogenicity
        if not 0 <= self.pathogenicity_score <= 1:
            raise ValueError("pathogenicity_score must be between 0 and 1")

        if self.variant_score is None:
            self.variant_score = self.frequency_score * self.pathogenicity_score
        if not 0 <= self.variant_score <= 1:
            raise ValueError("variant_score must be between 0 and 1")

        # Accept any iterable of results; keep one per filter type
        results = self.filter_results
        self.filter_results = {}
        values = results.values() if isinstance(results, dict) else results
        for result in values:
            self.add_filter_result(result)

    @classmethod
    def build(
        cls,
        chrom: str,
        pos: int,
        ref: str,
        alt: str,
        filter_results: Iterable[FilterResult] = (),
        **kwargs: Any,
    ) -> "VariantEvaluation":
        """Create an evaluation with filter results given in pipeline order."""
        return cls(chrom, pos, ref, alt, filter_results=list(filter_results), **kwargs)

    @property
    def variant_key(self) -> str:
        return f"{self.chrom}:{self.pos}:{self.ref}>{self.alt}"

    @property
    def frequency_score(self) -> float:
        if self.frequency_data is None:
            return 1.0
        return self.frequency_data.score

    def add_filter_result(self, result: FilterResult) -> None:
        """
        Record a filter result.

        A later result for a filter type already present replaces the earlier
        one without changing its position in the pipeline order.
        """
        self.filter_results[result.filter_type] = result

    def get_filter_results(self) -> List[FilterResult]:
        return list(self.filter_results.values())

    def get_filter_status(self, filter_type: FilterType) -> FilterStatus:
        """Status for a filter type; absent results count as NOT_RUN."""
        result = self.filter_results.get(filter_type)
        if result is None:
            return FilterStatus.NOT_RUN
        return result.status

    def passed_filter(self, filter_type: FilterType) -> bool:
        return self.get_filter_status(filter_type) == FilterStatus.PASS

    def passed_all_filters(self) -> bool:
        """True when every recorded result passed; vacuously true if none."""
        return all(result.passed for result in self.filter_results.values())

    def failed_filter_types(self) -> List[FilterType]:
        return [r.filter_type for r in self.filter_results.values() if not r.passed]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "variant": self.variant_key,
            "gene_symbol": self.gene_symbol,
            "effect": self.variant_effect.value,
            "variant_score": self.variant_score,
            "filters": {ft.name: r.status.value for ft, r in self.filter_results.items()},
            "contributes_to_gene_score": self.contributes_to_gene_score,
        }

    def __str__(self) -> str:
        filters = ", ".join(str(r) for r in self.filter_results.values())
        return (
            f"{self.variant_key} {self.variant_effect.value} "
            f"score={self.variant_score:.3f} [{filters}] "
            f"contributing={self.contributes_to_gene_score}"
        )
