"""
Tests: Input Validator — advisory errors and warnings.

Run with:
    pytest quote_engine/tests/test_validation.py -v
"""

import pytest

from quote_engine.models.inputs import (
    BuildTeamAssumptions,
    DocumentTypeValues,
    ExtractionAssumptions,
    Inputs,
    OpexAssumptions,
    QualityAssumptions,
    QualityTierValues,
    ScanningAssumptions,
    VolumeAssumptions,
)
from quote_engine.orchestration.engine import QuoteEngine
from quote_engine.pricing.validation import validate_inputs


class TestSums:
    def test_defaults_are_valid(self):
        report = validate_inputs(Inputs())
        assert report.is_valid
        assert report.errors == []

    def test_exact_sums_pass(self):
        inputs = Inputs(volume=VolumeAssumptions(
            document_mix=DocumentTypeValues(lease=0.25, deed=0.25, licence=0.25, plan=0.25),
        ))
        assert validate_inputs(inputs).is_valid

    def test_within_tolerance_passes(self):
        inputs = Inputs(volume=VolumeAssumptions(
            document_mix=DocumentTypeValues(lease=0.505, deed=0.1, licence=0.1, plan=0.3),
        ))
        assert validate_inputs(inputs).is_valid

    def test_mix_off_by_more_than_one_percent(self):
        inputs = Inputs(volume=VolumeAssumptions(
            document_mix=DocumentTypeValues(lease=0.6, deed=0.1, licence=0.1, plan=0.3),
        ))
        report = validate_inputs(inputs)
        assert not report.is_valid
        assert "Document mix must total 100%" in report.errors

    def test_quality_off(self):
        inputs = Inputs(quality=QualityAssumptions(
            tier_shares=QualityTierValues(good=0.5, medium=0.2, poor=0.1),
        ))
        assert "Quality distribution must total 100%" in validate_inputs(inputs).errors


class TestRanges:
    def test_review_rate_out_of_range(self):
        inputs = Inputs(quality=QualityAssumptions(
            review_rates=QualityTierValues(good=0.005, medium=1.5, poor=-0.1),
        ))
        errors = validate_inputs(inputs).errors
        assert "Medium quality review rate must be between 0 and 1" in errors
        assert "Poor quality review rate must be between 0 and 1" in errors
        assert "Good quality review rate must be between 0 and 1" not in errors

    @pytest.mark.parametrize("inputs, message", [
        (Inputs(volume=VolumeAssumptions(n_sites=-1)), "Total Sites must be non-negative"),
        (Inputs(build_team=BuildTeamAssumptions(qa_engineer=-2)), "QA Days must be non-negative"),
        (Inputs(opex=OpexAssumptions(support_rate=-5)), "Support Rate must be non-negative"),
        (Inputs(volume=VolumeAssumptions(
            pages_per_document=DocumentTypeValues(lease=-1, deed=3, licence=3, plan=5),
        )), "Lease Pages must be non-negative"),
        (Inputs(scanning=ScanningAssumptions(operator_hourly_rate=-15)), "Operator Hourly Rate must be non-negative"),
        (Inputs(scanning=ScanningAssumptions(logistics_cost=-50_000)), "Logistics Cost must be non-negative"),
        (Inputs(scanning=ScanningAssumptions(risk_buffer_pct=-20)), "Risk Buffer Percentage must be non-negative"),
        (Inputs(scanning=ScanningAssumptions(scanner_monthly_lease=-1)), "Scanner Monthly Lease must be non-negative"),
        (Inputs(scanning=ScanningAssumptions(enabled=False, scanner_count=-1)), "Number of Scanners must be non-negative"),
        (Inputs(scanning=ScanningAssumptions(
            prep_minutes=DocumentTypeValues(lease=2, deed=0.5, licence=0.5, plan=-3),
        )), "Plan Prep Minutes must be non-negative"),
    ])
    def test_negative_quantities(self, inputs, message):
        assert message in validate_inputs(inputs).errors

    def test_negative_scanning_costs_make_inputs_invalid(self):
        inputs = Inputs(scanning=ScanningAssumptions(
            operator_hourly_rate=-15, logistics_cost=-50_000, risk_buffer_pct=-20,
        ))
        assert not validate_inputs(inputs).is_valid

    @pytest.mark.parametrize("pct", [-10, 150])
    def test_client_review_share_out_of_range(self, pct):
        inputs = Inputs(quality=QualityAssumptions(client_handled_review_pct=pct))
        report = validate_inputs(inputs)
        assert not report.is_valid
        assert "Client review share must be between 0 and 100" in report.errors

    @pytest.mark.parametrize("pct", [0, 100])
    def test_client_review_share_bounds_are_valid(self, pct):
        inputs = Inputs(quality=QualityAssumptions(client_handled_review_pct=pct))
        assert validate_inputs(inputs).is_valid

    def test_passes_below_one(self):
        inputs = Inputs(extraction=ExtractionAssumptions(pipeline_passes=0.5))
        assert "Extraction Passes must be at least 1" in validate_inputs(inputs).errors

    def test_min_above_max(self):
        inputs = Inputs(volume=VolumeAssumptions(min_docs_per_site=12, max_docs_per_site=10))
        assert "Min Docs cannot exceed Max Docs" in validate_inputs(inputs).errors


class TestWarnings:
    def test_defaults_have_no_warnings(self):
        assert validate_inputs(Inputs()).warnings == []

    def test_warnings_do_not_affect_validity(self):
        inputs = Inputs(
            quality=QualityAssumptions(review_minutes=45, conflict_minutes=35),
            extraction=ExtractionAssumptions(llm_cost_per_m_tokens=8),
        )
        report = validate_inputs(inputs)
        assert report.is_valid
        assert "Review time is high - consider quality improvement" in report.warnings
        assert "Conflict resolution time is high - may impact scalability" in report.warnings
        assert "AI Extraction cost is high - verify pricing model" in report.warnings

    def test_poor_quality_warnings(self):
        inputs = Inputs(quality=QualityAssumptions(
            tier_shares=QualityTierValues(good=0.1, medium=0.4, poor=0.5),
        ))
        warnings = validate_inputs(inputs).warnings
        assert "High poor quality rate - review costs may increase significantly" in warnings
        assert "Low good quality rate - consider data quality improvements" in warnings

    def test_low_docs_per_site(self):
        inputs = Inputs(volume=VolumeAssumptions(min_docs_per_site=1, max_docs_per_site=2))
        assert "Very low average documents per site - verify volume assumptions" in validate_inputs(inputs).warnings


class TestAdvisoryOnly:
    def test_invalid_inputs_still_produce_a_quote(self):
        inputs = Inputs(volume=VolumeAssumptions(
            document_mix=DocumentTypeValues(lease=0.9, deed=0.1, licence=0.1, plan=0.3),
        ))
        model = QuoteEngine().compute(inputs, "conservative")
        assert not model.validation.is_valid
        assert model.capex.price > 0
