"""
Ingestion Cost Calculator — OCR, AI extraction and manual review.

OCR is billed whether or not scanning is enabled: scanning produces
images, OCR turns them into text.  When scanning is enabled its two
margin buckets are folded into the ingestion labor/passthrough rollup.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from quote_engine.models.enums import CostCategory, QualityTier
from quote_engine.models.inputs import (
    ExtractionAssumptions,
    MarginTag,
    QualityAssumptions,
    ScenarioConfig,
)
from quote_engine.models.schemas import (
    CostComponent,
    IngestionCosts,
    ScanningResult,
    VolumeResult,
)

logger = logging.getLogger(__name__)

# Fallbacks for non-finite or non-positive extraction assumptions
DEFAULT_TOKENS_PER_PAGE = 750.0
DEFAULT_PIPELINE_PASSES = 1.0
DEFAULT_LLM_RATE_PER_M_TOKENS = 5.0

# Cleaner scanned input means fewer re-processing passes
SCANNED_QUALITY_DISCOUNT = 0.70

# Component keys
SCANNING_LABOR = "scanning_labor"
SCANNING_EQUIPMENT = "scanning_equipment"
OCR = "ocr"
LLM_EXTRACTION = "llm_extraction"
MANUAL_REVIEW = "manual_review"


def _positive_or(value: float, fallback: float) -> float:
    return value if math.isfinite(value) and value > 0 else fallback


def ocr_cost(total_pages: float, extraction: ExtractionAssumptions) -> float:
    return (total_pages / 1000) * extraction.ocr_cost_per_1000


def flagged_rate(quality: QualityAssumptions) -> float:
    """Probability a document is flagged for review, weighted across quality tiers."""
    return sum(
        quality.tier_shares.get(tier) * quality.review_rates.get(tier)
        for tier in QualityTier
    )


def calculate_ingestion(
    volumes: VolumeResult,
    quality: QualityAssumptions,
    extraction: ExtractionAssumptions,
    scenario: ScenarioConfig,
    scanning: Optional[ScanningResult] = None,
) -> IngestionCosts:
    n_docs = volumes.total_documents
    n_pages = volumes.total_pages

    # ── OCR ──────────────────────────────────────────────
    c_ocr = ocr_cost(n_pages, extraction)

    # ── AI extraction ────────────────────────────────────
    tokens_per_page = _positive_or(extraction.tokens_per_page, DEFAULT_TOKENS_PER_PAGE)
    passes = _positive_or(extraction.pipeline_passes, DEFAULT_PIPELINE_PASSES)
    rate = _positive_or(extraction.llm_cost_per_m_tokens, DEFAULT_LLM_RATE_PER_M_TOKENS)
    tokens_m = n_pages * tokens_per_page * passes / 1_000_000
    discount = SCANNED_QUALITY_DISCOUNT if scanning is not None else 1.0
    c_llm = tokens_m * rate * discount

    # ── Manual review ────────────────────────────────────
    r = flagged_rate(quality)
    flagged_docs = n_docs * r
    review_hours = flagged_docs * quality.review_minutes / 60
    conflict_hours = volumes.n_sites * quality.conflict_minutes / 60
    total_review_hours = review_hours + conflict_hours
    billed_hours = total_review_hours * (100 - quality.client_handled_review_pct) / 100
    client_hours = total_review_hours * quality.client_handled_review_pct / 100
    analyst_rate = scenario.day_rates.analyst_hourly
    c_manual = billed_hours * analyst_rate

    # ── Components ───────────────────────────────────────
    components: list[CostComponent] = []
    if scanning is not None:
        components.append(CostComponent(
            key=SCANNING_LABOR, category=CostCategory.INGESTION,
            cost=scanning.labor_bucket, tag=MarginTag.labor(),
        ))
        components.append(CostComponent(
            key=SCANNING_EQUIPMENT, category=CostCategory.INGESTION,
            cost=scanning.passthrough_bucket, tag=MarginTag.passthrough(),
        ))
    components.extend([
        CostComponent(key=OCR, category=CostCategory.INGESTION, cost=c_ocr, tag=MarginTag.passthrough()),
        CostComponent(key=LLM_EXTRACTION, category=CostCategory.INGESTION, cost=c_llm, tag=MarginTag.passthrough()),
        CostComponent(key=MANUAL_REVIEW, category=CostCategory.INGESTION, cost=c_manual, tag=MarginTag.labor()),
    ])

    labor_cost = c_manual + (scanning.labor_bucket if scanning else 0.0)
    passthrough_cost = c_ocr + c_llm + (scanning.passthrough_bucket if scanning else 0.0)

    logger.debug(
        f"Ingestion: OCR £{c_ocr:,.2f}, LLM £{c_llm:,.2f}, manual £{c_manual:,.2f} "
        f"({billed_hours:,.1f} billed of {total_review_hours:,.1f} review hours)"
    )

    return IngestionCosts(
        ocr_cost=c_ocr,
        tokens_millions=tokens_m,
        llm_rate_per_m_tokens=rate,
        quality_discount=discount,
        llm_cost=c_llm,
        flagged_rate=r,
        flagged_documents=flagged_docs,
        review_hours=review_hours,
        conflict_hours=conflict_hours,
        total_review_hours=total_review_hours,
        billed_review_hours=billed_hours,
        client_review_hours=client_hours,
        client_review_cost=client_hours * analyst_rate,
        manual_cost=c_manual,
        scanning_cost=scanning.total_cost if scanning else 0.0,
        labor_cost=labor_cost,
        passthrough_cost=passthrough_cost,
        total_cost=labor_cost + passthrough_cost,
        components=components,
    )
