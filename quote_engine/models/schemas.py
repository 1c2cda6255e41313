"""
Derived records produced by the pricing pipeline.
Each schema is owned by one stage; `QuoteModel` is the engine's sole output.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .enums import CostCategory, VarianceStatus
from .inputs import DocumentTypeValues, MarginTag


# ── Cost components ──────────────────────────────────────


class CostComponent(BaseModel):
    """One margin-eligible cost bucket emitted by a calculator."""
    key: str
    category: CostCategory
    cost: float
    tag: MarginTag


class PricedComponent(CostComponent):
    """A cost component after the margin pricer has run."""
    margin: float
    price: float


# ── Volume Deriver ───────────────────────────────────────


class VolumeResult(BaseModel):
    n_sites: float = 0.0
    avg_docs_per_site: float = 0.0
    pages_per_document: float = 0.0
    total_documents: float = 0.0
    total_pages: float = 0.0
    documents_by_type: DocumentTypeValues = Field(default_factory=DocumentTypeValues)


# ── Scanning Cost Estimator ──────────────────────────────


class ScanningResult(BaseModel):
    # Timeline
    daily_capacity: float
    days_needed: int
    weeks_needed: int
    months_needed: int

    # Hours
    prep_hours: float
    scanning_hours: float
    qa_hours: float
    management_hours: float
    operator_labor_hours: float
    total_labor_hours: float

    # Costs
    operator_labor_cost: float
    management_cost: float
    labor_cost: float
    equipment_cost: float
    overhead_cost: float
    facility_cost: float
    logistics_cost: float
    subtotal_cost: float
    risk_buffer_cost: float
    total_cost: float

    # Margin buckets
    labor_bucket: float
    passthrough_bucket: float

    total_pages: float
    cost_per_page: float


# ── Cost calculators ─────────────────────────────────────


class IngestionCosts(BaseModel):
    ocr_cost: float = 0.0

    tokens_millions: float = 0.0
    llm_rate_per_m_tokens: float = 0.0
    quality_discount: float = 1.0
    llm_cost: float = 0.0

    flagged_rate: float = 0.0
    flagged_documents: float = 0.0
    review_hours: float = 0.0
    conflict_hours: float = 0.0
    total_review_hours: float = 0.0
    billed_review_hours: float = 0.0
    client_review_hours: float = 0.0
    client_review_cost: float = 0.0
    manual_cost: float = 0.0

    scanning_cost: float = 0.0

    labor_cost: float = 0.0
    passthrough_cost: float = 0.0
    total_cost: float = 0.0
    components: list[CostComponent] = []


class BuildCosts(BaseModel):
    labor_cost: float = 0.0
    passthrough_cost: float = 0.0
    total_cost: float = 0.0
    components: list[CostComponent] = []


class OpexCosts(BaseModel):
    """Monthly figures unless prefixed `annual_`."""
    platform_cost: float = 0.0
    storage_gb: float = 0.0
    storage_cost: float = 0.0
    queries: float = 0.0
    query_cost: float = 0.0
    pen_test_cost: float = 0.0
    support_cost: float = 0.0
    client_direct_cost: float = 0.0
    vendor_billed_cost: float = 0.0
    monthly_total_cost: float = 0.0
    annual_total_cost: float = 0.0
    components: list[CostComponent] = []


# ── Line items ───────────────────────────────────────────


class LineItem(BaseModel):
    """One billable concept in the client-facing breakdown."""
    id: str
    category: CostCategory
    description: str
    quantity: float
    unit: str
    unit_rate: float
    cost: float
    margin: float
    price: float
    notes: str = ""
    is_passthrough: bool = False
    margin_tag: Optional[MarginTag] = None  # None for blended (multi-bucket) items


# ── Aggregation ──────────────────────────────────────────


class CategoryTotal(BaseModel):
    cost: float = 0.0
    price: float = 0.0
    labor_cost: float = 0.0
    labor_price: float = 0.0
    passthrough_cost: float = 0.0
    passthrough_price: float = 0.0
    gross_margin: float = 0.0


class VarianceResult(BaseModel):
    target_margin: float
    realized_margin: float
    variance_points: float
    status: VarianceStatus


class CostDrivers(BaseModel):
    """Percentages (0-100) of the relevant total."""
    manual_of_ingestion: float = 0.0
    ocr_of_ingestion: float = 0.0
    llm_of_ingestion: float = 0.0
    scanning_of_ingestion: float = 0.0
    manual_of_total: float = 0.0
    scanning_of_total: float = 0.0
    build_of_total: float = 0.0
    opex_of_total: float = 0.0


class BenchmarkComparison(BaseModel):
    manual_total: float = 0.0
    competitor_total: float = 0.0
    savings_vs_manual: float = 0.0
    savings_vs_competitor: float = 0.0
    savings_vs_manual_pct: float = 0.0
    savings_vs_competitor_pct: float = 0.0


class ValidationReport(BaseModel):
    is_valid: bool = True
    errors: list[str] = []
    warnings: list[str] = []


# ── Engine output ────────────────────────────────────────


class ComponentPrices(BaseModel):
    """Per-component client prices, for display and audit."""
    scanning: float = 0.0
    ocr: float = 0.0
    llm: float = 0.0
    manual: float = 0.0
    build_labor: float = 0.0
    build_pen_test: float = 0.0
    opex_client_direct: float = 0.0
    opex_vendor_billed: float = 0.0
    opex_pen_test: float = 0.0
    opex_support: float = 0.0


class QuoteModel(BaseModel):
    scenario_id: str
    volumes: VolumeResult
    scanning: Optional[ScanningResult] = None

    ingestion_costs: IngestionCosts
    build_costs: BuildCosts
    opex_costs: OpexCosts
    prices: ComponentPrices

    ingestion: CategoryTotal
    build: CategoryTotal
    opex_monthly: CategoryTotal
    capex: CategoryTotal
    opex_annual: CategoryTotal
    total_quote: CategoryTotal

    gross_margin: float
    capex_gross_margin: float
    opex_gross_margin: float

    variance: VarianceResult
    cost_drivers: CostDrivers
    benchmarks: BenchmarkComparison
    line_items: list[LineItem] = []
    validation: ValidationReport = Field(default_factory=ValidationReport)

    @property
    def scanning_enabled(self) -> bool:
        return self.scanning is not None

    def line_items_for(self, category: CostCategory) -> list[LineItem]:
        return [item for item in self.line_items if item.category == category]
