"""
Pytest configuration and fixtures.

Puts the project root on the import path and provides gene and variant
builders shared by the test modules.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from gene_ranking.model import (  # noqa: E402
    FilterResult,
    FilterType,
    Gene,
    VariantEffect,
    VariantEvaluation,
)

PASS_FREQUENCY = FilterResult.pass_(FilterType.FREQUENCY_FILTER)
FAIL_FREQUENCY = FilterResult.fail(FilterType.FREQUENCY_FILTER)
PASS_PATHOGENICITY = FilterResult.pass_(FilterType.PATHOGENICITY_FILTER)


@pytest.fixture
def make_variant():
    """Factory for variant evaluations that passed or failed filtering."""

    def _make(effect=VariantEffect.MISSENSE_VARIANT, passed=True, score=None):
        if passed:
            results = [PASS_FREQUENCY, PASS_PATHOGENICITY]
        else:
            results = [FAIL_FREQUENCY]
        return VariantEvaluation.build(
            1, 1, "A", "T",
            filter_results=results,
            variant_effect=effect,
            variant_score=score,
        )

    return _make


@pytest.fixture
def make_gene():
    """Factory for a gene holding the given variants."""

    def _make(*variants, symbol="TEST1", gene_id=1234):
        gene = Gene(symbol, gene_id)
        for variant in variants:
            gene.add_variant(variant)
        return gene

    return _make
