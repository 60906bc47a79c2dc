"""
Gene Ranking Engine

Ranks candidate disease genes by combining per-variant filter outcomes with
gene-level prioritization scores under a mode of inheritance.
"""

__version__ = "0.1.0"

from .config import EngineConfig
from .model import (
    FilterResult,
    FilterStatus,
    FilterType,
    Gene,
    ModeOfInheritance,
    PriorityResult,
    PriorityType,
    VariantEffect,
    VariantEvaluation,
)
from .scoring import GeneScore, GeneScorer, RankingResult, ScorerConfig

__all__ = [
    "EngineConfig",
    "FilterResult",
    "FilterStatus",
    "FilterType",
    "Gene",
    "GeneScore",
    "GeneScorer",
    "ModeOfInheritance",
    "PriorityResult",
    "PriorityType",
    "RankingResult",
    "ScorerConfig",
    "VariantEffect",
    "VariantEvaluation",
    "__version__",
]
