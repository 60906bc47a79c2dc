"""
Modes of Inheritance

Transmission patterns assumed when scoring a gene, grouped by how many
qualifying alleles the pattern needs.
"""

from enum import Enum
from typing import Dict


class ModeOfInheritance(Enum):
    """Mode of inheritance supplied by the caller."""

    UNINITIALIZED = "uninitialized"
    AUTOSOMAL_DOMINANT = "autosomal_dominant"
    AUTOSOMAL_RECESSIVE = "autosomal_recessive"
    X_DOMINANT = "x_dominant"
    X_RECESSIVE = "x_recessive"
    MITOCHONDRIAL = "mitochondrial"
    ANY = "any"

    @classmethod
    def from_string(cls, value: str) -> "ModeOfInheritance":
        """Parse a mode from its name, value or common abbreviation."""
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if key in MODE_ABBREVIATIONS:
            return MODE_ABBREVIATIONS[key]
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Unknown mode of inheritance: {value}")

    @property
    def allele_requirement(self) -> "AlleleRequirement":
        return ALLELE_REQUIREMENTS[self]

    @property
    def is_recessive(self) -> bool:
        return ALLELE_REQUIREMENTS[self] == AlleleRequirement.TWO_ALLELES


class AlleleRequirement(Enum):
    """Number of qualifying alleles a gene needs to explain disease."""

    SINGLE_ALLELE = 1
    TWO_ALLELES = 2


MODE_ABBREVIATIONS: Dict[str, ModeOfInheritance] = {
    "AD": ModeOfInheritance.AUTOSOMAL_DOMINANT,
    "AR": ModeOfInheritance.AUTOSOMAL_RECESSIVE,
    "XD": ModeOfInheritance.X_DOMINANT,
    "XR": ModeOfInheritance.X_RECESSIVE,
    "MT": ModeOfInheritance.MITOCHONDRIAL,
}

# Every mode must appear here; anything not recessive needs a single allele
ALLELE_REQUIREMENTS: Dict[ModeOfInheritance, AlleleRequirement] = {
    ModeOfInheritance.UNINITIALIZED: AlleleRequirement.SINGLE_ALLELE,
    ModeOfInheritance.AUTOSOMAL_DOMINANT: AlleleRequirement.SINGLE_ALLELE,
    ModeOfInheritance.AUTOSOMAL_RECESSIVE: AlleleRequirement.TWO_ALLELES,
    ModeOfInheritance.X_DOMINANT: AlleleRequirement.SINGLE_ALLELE,
    ModeOfInheritance.X_RECESSIVE: AlleleRequirement.TWO_ALLELES,
    ModeOfInheritance.MITOCHONDRIAL: AlleleRequirement.SINGLE_ALLELE,
    ModeOfInheritance.ANY: AlleleRequirement.SINGLE_ALLELE,
}
