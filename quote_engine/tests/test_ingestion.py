"""
Tests: Ingestion Cost Calculator.

Run with:
    pytest quote_engine/tests/test_ingestion.py -v
"""

import pytest

from quote_engine.models.enums import MarginKind
from quote_engine.models.inputs import (
    ExtractionAssumptions,
    QualityAssumptions,
    ScanningAssumptions,
    VolumeAssumptions,
)
from quote_engine.pricing import ingestion
from quote_engine.pricing.scanning import estimate_scanning
from quote_engine.pricing.scenarios import default_registry
from quote_engine.pricing.volumes import derive_volumes

CONSERVATIVE = default_registry().get("conservative")
VOLUMES = derive_volumes(VolumeAssumptions())
SCANNING = estimate_scanning(ScanningAssumptions(), VOLUMES, CONSERVATIVE)


def _calc(quality=None, extraction=None, scanning=SCANNING):
    return ingestion.calculate_ingestion(
        VOLUMES,
        quality or QualityAssumptions(),
        extraction or ExtractionAssumptions(),
        CONSERVATIVE,
        scanning=scanning,
    )


class TestOcr:
    def test_ocr_billed_with_scanning(self):
        c = _calc()
        assert c.ocr_cost == pytest.approx(1861.5 * 1.23)
        assert c.ocr_cost > 0

    def test_ocr_identical_without_scanning(self):
        assert _calc(scanning=None).ocr_cost == pytest.approx(_calc().ocr_cost)


class TestExtraction:
    def test_scanned_input_discount(self):
        with_scan = _calc()
        without = _calc(scanning=None)
        assert with_scan.quality_discount == 0.70
        assert without.quality_discount == 1.0
        assert with_scan.llm_cost == pytest.approx(without.llm_cost * 0.70)

    def test_baseline_tokens_and_cost(self):
        c = _calc(scanning=None)
        assert c.tokens_millions == pytest.approx(4300.065)
        assert c.llm_cost == pytest.approx(21_500.325)

    def test_fallbacks_for_non_positive_values(self):
        c = _calc(
            extraction=ExtractionAssumptions(
                tokens_per_page=0, pipeline_passes=float("nan"), llm_cost_per_m_tokens=-1,
            ),
            scanning=None,
        )
        assert c.tokens_millions == pytest.approx(1_861_500 * 750 / 1_000_000)
        assert c.llm_rate_per_m_tokens == 5.0


class TestManualReview:
    def test_flagged_rate_is_weighted(self):
        assert ingestion.flagged_rate(QualityAssumptions()) == pytest.approx(0.0077)

    def test_billed_hours_exclude_client_share(self):
        c = _calc()
        assert c.review_hours == pytest.approx(127_500 * 0.0077 * 5 / 60)
        assert c.conflict_hours == pytest.approx(17_000 / 60)
        assert c.billed_review_hours == pytest.approx(c.total_review_hours * 0.25)
        assert c.client_review_hours == pytest.approx(c.total_review_hours * 0.75)
        assert c.manual_cost == pytest.approx(c.billed_review_hours * 44)

    def test_client_handling_everything_bills_nothing(self):
        c = _calc(quality=QualityAssumptions(client_handled_review_pct=100))
        assert c.manual_cost == 0


class TestRollup:
    def test_labor_and_passthrough_split(self):
        c = _calc()
        assert c.labor_cost == pytest.approx(c.manual_cost + SCANNING.labor_bucket)
        assert c.passthrough_cost == pytest.approx(c.ocr_cost + c.llm_cost + SCANNING.passthrough_bucket)
        assert c.total_cost == pytest.approx(c.labor_cost + c.passthrough_cost)

    def test_components_cover_total(self):
        c = _calc()
        assert sum(x.cost for x in c.components) == pytest.approx(c.total_cost)
        tags = {x.key: x.tag.kind for x in c.components}
        assert tags[ingestion.MANUAL_REVIEW] == MarginKind.LABOR
        assert tags[ingestion.OCR] == MarginKind.PASSTHROUGH
        assert tags[ingestion.SCANNING_EQUIPMENT] == MarginKind.PASSTHROUGH

    def test_no_scanning_components_when_disabled(self):
        keys = {x.key for x in _calc(scanning=None).components}
        assert ingestion.SCANNING_LABOR not in keys
        assert keys == {ingestion.OCR, ingestion.LLM_EXTRACTION, ingestion.MANUAL_REVIEW}
