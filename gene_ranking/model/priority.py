"""
Priority Results

Gene-level scores emitted by the phenotype and network prioritizers, with the
evidence each score rests on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple


class PriorityType(Enum):
    """Prioritizers able to contribute a gene score."""

    OMIM_PRIORITY = "omim"
    PHIVE_PRIORITY = "phive"
    HIPHIVE_PRIORITY = "hiphive"
    PHENIX_PRIORITY = "phenix"
    EXOMEWALKER_PRIORITY = "exomewalker"
    NONE = "none"

    @classmethod
    def from_string(cls, value: str) -> "PriorityType":
        """Look up a prioritizer by enum name or short value."""
        key = value.strip()
        if key.upper() in cls.__members__:
            return cls[key.upper()]
        for member in cls:
            if member.value == key.lower():
                return member
        raise ValueError(f"Unknown priority type: {value}")


@dataclass(frozen=True)
class GeneMatch:
    """
    Best cross-species match found for a query gene.

    Attributes:
        query_gene_id: Gene being prioritized
        match_gene_id: Gene whose model phenotypes matched best
        score: Similarity of the match
        best_match_models: Identifiers of the models behind the match
    """

    query_gene_id: int = 0
    match_gene_id: int = 0
    score: float = 0.0
    best_match_models: Tuple[str, ...] = ()

    NO_HIT: ClassVar["GeneMatch"]

    def __post_init__(self):
        object.__setattr__(self, "best_match_models", tuple(self.best_match_models))


GeneMatch.NO_HIT = GeneMatch()


@dataclass(frozen=True)
class PriorityResult:
    """
    Score assigned to one gene by one prioritizer.

    Attributes:
        priority_type: Prioritizer that produced the score
        gene_id: Numeric gene identifier
        gene_symbol: Gene symbol
        score: Normalised score in [0, 1]
        evidence: Supporting evidence, e.g. a GeneMatch
    """

    priority_type: PriorityType
    gene_id: int
    gene_symbol: str
    score: float
    evidence: Optional[Any] = None

    def __post_init__(self):
        if not 0 <= self.score <= 1:
            raise ValueError("score must be between 0 and 1")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "priority_type": self.priority_type.name,
            "gene_id": self.gene_id,
            "gene_symbol": self.gene_symbol,
            "score": self.score,
        }
