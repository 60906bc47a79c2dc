"""
Variant Filter Results

Outcome of applying a single filter to a single variant, and the contract
that filter implementations follow.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List
import logging

if TYPE_CHECKING:
    from .variant import VariantEvaluation

logger = logging.getLogger(__name__)


class FilterStatus(Enum):
    """Possible outcomes of running a filter on a variant."""

    PASS = "PASS"
    FAIL = "FAIL"
    NOT_RUN = "NOT_RUN"


class FilterType(Enum):
    """Filters that may be applied to a variant, in no particular order."""

    FAILED_VARIANT_FILTER = "failed_variant"
    INTERVAL_FILTER = "interval"
    QUALITY_FILTER = "quality"
    FREQUENCY_FILTER = "frequency"
    PATHOGENICITY_FILTER = "pathogenicity"
    INHERITANCE_FILTER = "inheritance"
    TARGET_FILTER = "target"
    KNOWN_VARIANT_FILTER = "known_variant"
    ENTREZ_GENE_ID_FILTER = "gene_id"
    REGULATORY_FEATURE_FILTER = "regulatory_feature"
    PRIORITY_SCORE_FILTER = "priority_score"

    @classmethod
    def from_string(cls, value: str) -> "FilterType":
        """Look up a filter type by enum name or short value."""
        key = value.strip()
        if key.upper() in cls.__members__:
            return cls[key.upper()]
        for member in cls:
            if member.value == key.lower():
                return member
        raise ValueError(f"Unknown filter type: {value}")


@dataclass(frozen=True)
class FilterResult:
    """
    Immutable result of one filter applied to one variant.

    Attributes:
        filter_type: Filter which produced the result
        status: PASS, FAIL or NOT_RUN
    """

    filter_type: FilterType
    status: FilterStatus

    @classmethod
    def pass_(cls, filter_type: FilterType) -> "FilterResult":
        return cls(filter_type, FilterStatus.PASS)

    @classmethod
    def fail(cls, filter_type: FilterType) -> "FilterResult":
        return cls(filter_type, FilterStatus.FAIL)

    @classmethod
    def not_run(cls, filter_type: FilterType) -> "FilterResult":
        return cls(filter_type, FilterStatus.NOT_RUN)

    @property
    def passed(self) -> bool:
        return self.status == FilterStatus.PASS

    @property
    def failed(self) -> bool:
        return self.status == FilterStatus.FAIL

    @property
    def was_run(self) -> bool:
        return self.status != FilterStatus.NOT_RUN

    def __str__(self) -> str:
        return f"{self.filter_type.name}={self.status.value}"


class VariantFilter(ABC):
    """
    Base class for filters run over variant evaluations.

    Implementations decide pass or fail for a single variant and report it
    as a FilterResult carrying their own filter type.
    """

    filter_type: FilterType

    @abstractmethod
    def run_filter(self, variant_evaluation: "VariantEvaluation") -> FilterResult:
        """
        Return the outcome of this filter for a variant.

        Args:
            variant_evaluation: Variant to be filtered

        Returns:
            FilterResult for this filter's type
        """


def apply_filters(
    variant_evaluations: Iterable["VariantEvaluation"],
    filters: List[VariantFilter],
) -> int:
    """
    Run filters over variants in pipeline order and record the results.

    Args:
        variant_evaluations: Variants to filter
        filters: Filters in the order they should be applied

    Returns:
        Number of variants passing every filter
    """
    n_variants = 0
    n_passed = 0
    for variant_evaluation in variant_evaluations:
        n_variants += 1
        for variant_filter in filters:
            variant_evaluation.add_filter_result(variant_filter.run_filter(variant_evaluation))
        if variant_evaluation.passed_all_filters():
            n_passed += 1

    logger.info(
        f"Applied {len(filters)} filters to {n_variants} variants: "
        f"{n_passed} passed all filters"
    )
    return n_passed
