"""
Tests for VariantEvaluation

Tests for filter bookkeeping and variant score derivation.
"""

import pytest

from gene_ranking.model.filters import FilterResult, FilterStatus, FilterType
from gene_ranking.model.frequency import Frequency, FrequencyData, FrequencySource
from gene_ranking.model.variant import (
    EFFECT_PATHOGENICITY,
    VariantEffect,
    VariantEvaluation,
)


class TestVariantEffect:
    """Tests for VariantEffect."""

    def test_default_pathogenicity_ordering(self):
        """Test loss-of-function effects outrank missense and synonymous."""
        frameshift = VariantEffect.FRAMESHIFT_VARIANT.default_pathogenicity
        missense = VariantEffect.MISSENSE_VARIANT.default_pathogenicity
        synonymous = VariantEffect.SYNONYMOUS_VARIANT.default_pathogenicity

        assert frameshift > missense > synonymous

    def test_non_coding_defaults_to_zero(self):
        assert VariantEffect.INTERGENIC_VARIANT.default_pathogenicity == 0.0
        assert VariantEffect.INTERGENIC_VARIANT not in EFFECT_PATHOGENICITY

    def test_from_string(self):
        assert VariantEffect.from_string("stop_gained") == VariantEffect.STOP_GAINED
        assert VariantEffect.from_string("MISSENSE_VARIANT") == VariantEffect.MISSENSE_VARIANT

    def test_from_string_unknown(self):
        with pytest.raises(ValueError):
            VariantEffect.from_string("mystery_variant")


class TestVariantEvaluation:
    """Tests for VariantEvaluation."""

    def test_creation(self):
        """Test creating an evaluation."""
        variant = VariantEvaluation(1, 12345, "A", "T")

        assert variant.chrom == "1"
        assert variant.variant_key == "1:12345:A>T"
        assert variant.contributes_to_gene_score is False
        assert variant.get_filter_results() == []

    def test_no_filter_results_passes(self):
        """Test that an unfiltered variant is treated as passing."""
        variant = VariantEvaluation("1", 1, "A", "T")
        assert variant.passed_all_filters() is True

    def test_all_pass(self):
        variant = VariantEvaluation.build(
            "1", 1, "A", "T",
            filter_results=[
                FilterResult.pass_(FilterType.FREQUENCY_FILTER),
                FilterResult.pass_(FilterType.PATHOGENICITY_FILTER),
            ],
        )
        assert variant.passed_all_filters() is True

    def test_one_failure_fails(self):
        variant = VariantEvaluation.build(
            "1", 1, "A", "T",
            filter_results=[
                FilterResult.pass_(FilterType.FREQUENCY_FILTER),
                FilterResult.fail(FilterType.PATHOGENICITY_FILTER),
            ],
        )
        assert variant.passed_all_filters() is False
        assert variant.failed_filter_types() == [FilterType.PATHOGENICITY_FILTER]

    def test_not_run_result_is_not_a_pass(self):
        variant = VariantEvaluation.build(
            "1", 1, "A", "T",
            filter_results=[FilterResult.not_run(FilterType.INHERITANCE_FILTER)],
        )
        assert variant.passed_all_filters() is False

    def test_passed_all_filters_has_no_side_effects(self):
        variant = VariantEvaluation.build(
            "1", 1, "A", "T", filter_results=[FilterResult.fail(FilterType.QUALITY_FILTER)]
        )
        variant.passed_all_filters()

        assert variant.contributes_to_gene_score is False
        assert len(variant.get_filter_results()) == 1

    def test_missing_filter_is_not_run(self):
        """Test that an absent result reads as NOT_RUN."""
        variant = VariantEvaluation.build(
            "1", 1, "A", "T", filter_results=[FilterResult.pass_(FilterType.FREQUENCY_FILTER)]
        )

        assert variant.get_filter_status(FilterType.FREQUENCY_FILTER) == FilterStatus.PASS
        assert variant.get_filter_status(FilterType.TARGET_FILTER) == FilterStatus.NOT_RUN
        assert variant.passed_filter(FilterType.TARGET_FILTER) is False

    def test_one_result_per_filter_type(self):
        """Test a repeated filter type replaces the earlier result in place."""
        variant = VariantEvaluation.build(
            "1", 1, "A", "T",
            filter_results=[
                FilterResult.fail(FilterType.FREQUENCY_FILTER),
                FilterResult.pass_(FilterType.QUALITY_FILTER),
            ],
        )
        variant.add_filter_result(FilterResult.pass_(FilterType.FREQUENCY_FILTER))

        results = variant.get_filter_results()
        assert len(results) == 2
        assert results[0] == FilterResult.pass_(FilterType.FREQUENCY_FILTER)
        assert variant.passed_all_filters() is True

    def test_score_defaults_to_effect_pathogenicity(self):
        variant = VariantEvaluation(
            "1", 1, "A", "T", variant_effect=VariantEffect.FRAMESHIFT_VARIANT
        )
        assert variant.variant_score == 0.95
        assert variant.pathogenicity_score == 0.95

    def test_score_uses_frequency(self):
        """Test common variants are down-weighted by their frequency score."""
        frequency_data = FrequencyData(
            frequencies=[Frequency(FrequencySource.ESP_ALL, 3.0)]
        )
        variant = VariantEvaluation(
            "1", 1, "A", "T",
            variant_effect=VariantEffect.STOP_GAINED,
            frequency_data=frequency_data,
        )
        assert variant.variant_score == 0.0

    def test_explicit_score_is_kept(self):
        variant = VariantEvaluation(
            "1", 1, "A", "T",
            variant_effect=VariantEffect.SYNONYMOUS_VARIANT,
            variant_score=0.42,
        )
        assert variant.variant_score == 0.42

    def test_score_out_of_range(self):
        with pytest.raises(ValueError):
            VariantEvaluation("1", 1, "A", "T", variant_score=1.5)

        with pytest.raises(ValueError):
            VariantEvaluation("1", 1, "A", "T", pathogenicity_score=-0.1)

    def test_identity_semantics(self):
        """Test evaluations at the same coordinates remain distinct."""
        first = VariantEvaluation("1", 1, "A", "T")
        second = VariantEvaluation("1", 1, "A", "T")

        assert first != second
        assert first in [first]
        assert second not in [first]

    def test_to_dict(self):
        variant = VariantEvaluation.build(
            "X", 5, "G", "C",
            filter_results=[FilterResult.pass_(FilterType.FREQUENCY_FILTER)],
            variant_effect=VariantEffect.MISSENSE_VARIANT,
        )
        d = variant.to_dict()

        assert d["variant"] == "X:5:G>C"
        assert d["effect"] == "missense_variant"
        assert d["filters"] == {"FREQUENCY_FILTER": "PASS"}
        assert d["contributes_to_gene_score"] is False
