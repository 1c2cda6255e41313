"""
Caller-owned assumption records.

`Inputs` groups the flat assumption sheet into nested sub-structs so that
each calculator only sees the slice it needs.  Every record is frozen:
one computation treats its inputs as immutable, and frozen models are
hashable, which lets the engine memoise on (inputs, scenario_id).

Field defaults reproduce the baseline assumption sheet.  No range
constraints are declared here: invalid values must stay representable
for the live preview and are reported by `validate_inputs`.
"""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field, model_validator

from .enums import BuildRole, DocumentType, MarginKind, QualityTier

_FROZEN = {"frozen": True}


# ── Per-type / per-tier value holders ────────────────────


class DocumentTypeValues(BaseModel):
    """One number per document type (mix share, pages, prep minutes, counts)."""
    model_config = _FROZEN

    lease: float = 0.0
    deed: float = 0.0
    licence: float = 0.0
    plan: float = 0.0

    def get(self, doc_type: DocumentType) -> float:
        return getattr(self, doc_type.value)

    def items(self) -> Iterator[tuple[DocumentType, float]]:
        for doc_type in DocumentType:
            yield doc_type, self.get(doc_type)

    def total(self) -> float:
        return self.lease + self.deed + self.licence + self.plan


class QualityTierValues(BaseModel):
    """One number per quality tier (share of documents or review rate)."""
    model_config = _FROZEN

    good: float = 0.0
    medium: float = 0.0
    poor: float = 0.0

    def get(self, tier: QualityTier) -> float:
        return getattr(self, tier.value)

    def total(self) -> float:
        return self.good + self.medium + self.poor


# ── Assumption groups ────────────────────────────────────


class VolumeAssumptions(BaseModel):
    model_config = _FROZEN

    n_sites: float = 17000
    min_docs_per_site: float = 5
    max_docs_per_site: float = 10
    document_mix: DocumentTypeValues = Field(
        default_factory=lambda: DocumentTypeValues(lease=0.5, deed=0.1, licence=0.1, plan=0.3)
    )
    pages_per_document: DocumentTypeValues = Field(
        default_factory=lambda: DocumentTypeValues(lease=25, deed=3, licence=3, plan=5)
    )


class QualityAssumptions(BaseModel):
    model_config = _FROZEN

    tier_shares: QualityTierValues = Field(
        default_factory=lambda: QualityTierValues(good=0.92, medium=0.07, poor=0.01)
    )
    review_rates: QualityTierValues = Field(
        default_factory=lambda: QualityTierValues(good=0.005, medium=0.03, poor=0.10)
    )
    review_minutes: float = 5
    conflict_minutes: float = 1
    # Share (%) of flagged review hours absorbed by the client's own staff.
    # The vendor bills the remaining (100 - pct)%.
    client_handled_review_pct: float = 75


class ScanningAssumptions(BaseModel):
    model_config = _FROZEN

    enabled: bool = True
    scanner_speed_ppm: float = 75
    scanner_count: float = 2
    hours_per_day: float = 6
    operator_hourly_rate: float = 15
    scanner_monthly_lease: float = 1000
    qa_review_pct: float = 10
    prep_minutes: DocumentTypeValues = Field(
        default_factory=lambda: DocumentTypeValues(lease=2.0, deed=0.5, licence=0.5, plan=3.0)
    )
    facility_monthly_cost: float = 1500
    logistics_cost: float = 3500
    risk_buffer_pct: float = 5


class ExtractionAssumptions(BaseModel):
    model_config = _FROZEN

    ocr_cost_per_1000: float = 1.23
    tokens_per_page: float = 2100
    pipeline_passes: float = 1.1
    llm_cost_per_m_tokens: float = 5


class BuildTeamAssumptions(BaseModel):
    """Engineering days per role plus the one-off penetration test fee."""
    model_config = _FROZEN

    solution_architect: float = 22
    ml_engineer: float = 48
    backend_engineer: float = 54
    frontend_engineer: float = 40
    devops_engineer: float = 20
    qa_engineer: float = 24
    project_manager: float = 33
    pen_test_fee: float = 12000

    def days_for(self, role: BuildRole) -> float:
        return getattr(self, role.value)


class OpexAssumptions(BaseModel):
    model_config = _FROZEN

    search: float = 320
    app_hosting: float = 620
    monitoring: float = 260
    database_services: float = 145
    security_services: float = 33
    pen_test_monthly: float = 1000
    mb_per_page: float = 0.3
    cost_per_gb_month: float = 0.0142
    queries_per_1000_sites: float = 2000
    cost_per_query: float = 0.005
    support_hours: float = 30.19
    support_rate: float = 50


class BenchmarkAssumptions(BaseModel):
    model_config = _FROZEN

    manual_per_doc: float = 12
    competitor_per_doc: float = 5


class Inputs(BaseModel):
    """The full assumption sheet for one computation."""
    model_config = _FROZEN

    volume: VolumeAssumptions = Field(default_factory=VolumeAssumptions)
    quality: QualityAssumptions = Field(default_factory=QualityAssumptions)
    scanning: ScanningAssumptions = Field(default_factory=ScanningAssumptions)
    extraction: ExtractionAssumptions = Field(default_factory=ExtractionAssumptions)
    build_team: BuildTeamAssumptions = Field(default_factory=BuildTeamAssumptions)
    opex: OpexAssumptions = Field(default_factory=OpexAssumptions)
    benchmarks: BenchmarkAssumptions = Field(default_factory=BenchmarkAssumptions)


# ── Scenario ─────────────────────────────────────────────


class DayRates(BaseModel):
    """Cost day rates per build role, plus the analyst hourly rate."""
    model_config = _FROZEN

    solution_architect: float = 488
    ml_engineer: float = 418
    backend_engineer: float = 380
    frontend_engineer: float = 360
    devops_engineer: float = 394
    qa_engineer: float = 304
    project_manager: float = 412
    analyst_hourly: float = 44

    def rate_for(self, role: BuildRole) -> float:
        return getattr(self, role.value)


class ScenarioConfig(BaseModel):
    """A named pricing position: day rates plus the dual margins and target."""
    model_config = _FROZEN

    scenario_id: str
    name: str
    description: str = ""
    day_rates: DayRates = Field(default_factory=DayRates)
    labor_margin: float = Field(ge=0.0, lt=1.0)
    passthrough_margin: float = Field(ge=0.0, lt=1.0)
    target_margin: float = Field(ge=0.0, lt=1.0)


# ── Margin tagging ───────────────────────────────────────


class MarginTag(BaseModel):
    """
    Which margin a cost component is priced at.

    LABOR / PASSTHROUGH resolve against the scenario, CLIENT_DIRECT is
    always 0%, FIXED_OVERRIDE carries its own rate.
    """
    model_config = _FROZEN

    kind: MarginKind
    rate: float | None = None

    @model_validator(mode="after")
    def _rate_only_for_override(self) -> "MarginTag":
        if self.kind == MarginKind.FIXED_OVERRIDE and self.rate is None:
            raise ValueError("fixed_override margin tag requires a rate")
        if self.kind != MarginKind.FIXED_OVERRIDE and self.rate is not None:
            raise ValueError(f"{self.kind.value} margin tag does not take a rate")
        return self

    @classmethod
    def labor(cls) -> "MarginTag":
        return cls(kind=MarginKind.LABOR)

    @classmethod
    def passthrough(cls) -> "MarginTag":
        return cls(kind=MarginKind.PASSTHROUGH)

    @classmethod
    def client_direct(cls) -> "MarginTag":
        return cls(kind=MarginKind.CLIENT_DIRECT)

    @classmethod
    def fixed(cls, rate: float) -> "MarginTag":
        return cls(kind=MarginKind.FIXED_OVERRIDE, rate=rate)
