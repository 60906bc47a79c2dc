"""
Data Model

Value objects and aggregates consumed by the gene scorer: filter results,
variant evaluations, priority results, modes of inheritance and genes.
"""

from .filters import FilterResult, FilterStatus, FilterType, VariantFilter, apply_filters
from .frequency import (
    ALL_ESP_SOURCES,
    ALL_EXAC_SOURCES,
    ALL_EXTERNAL_FREQ_SOURCES,
    Frequency,
    FrequencyData,
    FrequencySource,
)
from .gene import Gene
from .inheritance import ALLELE_REQUIREMENTS, AlleleRequirement, ModeOfInheritance
from .priority import GeneMatch, PriorityResult, PriorityType
from .variant import EFFECT_PATHOGENICITY, VariantEffect, VariantEvaluation

__all__ = [
    # Filters
    "FilterResult",
    "FilterStatus",
    "FilterType",
    "VariantFilter",
    "apply_filters",
    # Frequency
    "Frequency",
    "FrequencyData",
    "FrequencySource",
    "ALL_ESP_SOURCES",
    "ALL_EXAC_SOURCES",
    "ALL_EXTERNAL_FREQ_SOURCES",
    # Variants
    "VariantEffect",
    "VariantEvaluation",
    "EFFECT_PATHOGENICITY",
    # Priority
    "GeneMatch",
    "PriorityResult",
    "PriorityType",
    # Inheritance
    "ModeOfInheritance",
    "AlleleRequirement",
    "ALLELE_REQUIREMENTS",
    # Genes
    "Gene",
]
