"""
Input Validator — advisory checks that never block a computation.

Errors mean the quote must not be used commercially; warnings flag
valid-but-unusual assumptions.  Both are plain human-readable strings.
"""

from __future__ import annotations

from quote_engine.models.enums import QualityTier
from quote_engine.models.inputs import Inputs
from quote_engine.models.schemas import ValidationReport

SUM_TOLERANCE = 0.01

# (section, field, label) for every quantity that must be non-negative
NON_NEGATIVE_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("volume", "n_sites", "Total Sites"),
    ("volume", "min_docs_per_site", "Min Docs"),
    ("volume", "max_docs_per_site", "Max Docs"),
    ("quality", "review_minutes", "Review Minutes"),
    ("quality", "conflict_minutes", "Conflict Minutes"),
    ("scanning", "scanner_speed_ppm", "Scanner Speed"),
    ("scanning", "scanner_count", "Number of Scanners"),
    ("scanning", "hours_per_day", "Working Hours per Day"),
    ("scanning", "operator_hourly_rate", "Operator Hourly Rate"),
    ("scanning", "scanner_monthly_lease", "Scanner Monthly Lease"),
    ("scanning", "qa_review_pct", "QA Review Percentage"),
    ("scanning", "facility_monthly_cost", "Facility Monthly Cost"),
    ("scanning", "logistics_cost", "Logistics Cost"),
    ("scanning", "risk_buffer_pct", "Risk Buffer Percentage"),
    ("extraction", "ocr_cost_per_1000", "OCR Cost"),
    ("extraction", "tokens_per_page", "Tokens per Page"),
    ("extraction", "llm_cost_per_m_tokens", "AI Extraction Cost"),
    ("extraction", "pipeline_passes", "Extraction Passes"),
    ("build_team", "solution_architect", "SA Days"),
    ("build_team", "ml_engineer", "ML Days"),
    ("build_team", "backend_engineer", "BE Days"),
    ("build_team", "frontend_engineer", "FE Days"),
    ("build_team", "devops_engineer", "DevOps Days"),
    ("build_team", "qa_engineer", "QA Days"),
    ("build_team", "project_manager", "PM Days"),
    ("build_team", "pen_test_fee", "Pen-Test Cost"),
    ("opex", "search", "Search"),
    ("opex", "app_hosting", "App Hosting"),
    ("opex", "monitoring", "Monitoring"),
    ("opex", "database_services", "Database Services"),
    ("opex", "security_services", "Security Services"),
    ("opex", "pen_test_monthly", "Monthly Pen-Test"),
    ("opex", "mb_per_page", "MB per Page"),
    ("opex", "cost_per_gb_month", "Storage Cost"),
    ("opex", "queries_per_1000_sites", "Queries per 1000 Sites"),
    ("opex", "cost_per_query", "Cost per Query"),
    ("opex", "support_hours", "Support Hours"),
    ("opex", "support_rate", "Support Rate"),
    ("benchmarks", "manual_per_doc", "Manual Benchmark"),
    ("benchmarks", "competitor_per_doc", "Competitor Benchmark"),
)

# Warning thresholds
POOR_QUALITY_SHARE_MAX = 0.4
GOOD_QUALITY_SHARE_MIN = 0.2
REVIEW_MINUTES_MAX = 40
CONFLICT_MINUTES_MAX = 30
AVG_DOCS_PER_SITE_MIN = 2
LLM_RATE_MAX = 5
SUPPORT_RATE_MAX = 2000


def validation_errors(inputs: Inputs) -> list[str]:
    errors: list[str] = []
    volume, quality = inputs.volume, inputs.quality

    if abs(volume.document_mix.total() - 1.0) > SUM_TOLERANCE:
        errors.append("Document mix must total 100%")
    if abs(quality.tier_shares.total() - 1.0) > SUM_TOLERANCE:
        errors.append("Quality distribution must total 100%")

    for tier in QualityTier:
        rate = quality.review_rates.get(tier)
        if rate < 0 or rate > 1:
            errors.append(f"{tier.value.capitalize()} quality review rate must be between 0 and 1")

    for section, field, label in NON_NEGATIVE_FIELDS:
        if getattr(getattr(inputs, section), field) < 0:
            errors.append(f"{label} must be non-negative")
    for doc_type, pages in volume.pages_per_document.items():
        if pages < 0:
            errors.append(f"{doc_type.value.capitalize()} Pages must be non-negative")
    for doc_type, minutes in inputs.scanning.prep_minutes.items():
        if minutes < 0:
            errors.append(f"{doc_type.value.capitalize()} Prep Minutes must be non-negative")

    pct = quality.client_handled_review_pct
    if pct < 0 or pct > 100:
        errors.append("Client review share must be between 0 and 100")

    if inputs.extraction.pipeline_passes < 1:
        errors.append("Extraction Passes must be at least 1")
    if volume.min_docs_per_site > volume.max_docs_per_site:
        errors.append("Min Docs cannot exceed Max Docs")

    return errors


def validation_warnings(inputs: Inputs) -> list[str]:
    warnings: list[str] = []
    quality = inputs.quality
    avg_docs = (inputs.volume.min_docs_per_site + inputs.volume.max_docs_per_site) / 2

    if quality.tier_shares.poor > POOR_QUALITY_SHARE_MAX:
        warnings.append("High poor quality rate - review costs may increase significantly")
    if quality.review_minutes > REVIEW_MINUTES_MAX:
        warnings.append("Review time is high - consider quality improvement")
    if inputs.opex.support_rate > SUPPORT_RATE_MAX:
        warnings.append("Support rate is extremely high (>£2000/day)")
    if quality.conflict_minutes > CONFLICT_MINUTES_MAX:
        warnings.append("Conflict resolution time is high - may impact scalability")
    if quality.tier_shares.good < GOOD_QUALITY_SHARE_MIN:
        warnings.append("Low good quality rate - consider data quality improvements")
    if avg_docs < AVG_DOCS_PER_SITE_MIN:
        warnings.append("Very low average documents per site - verify volume assumptions")
    if inputs.extraction.llm_cost_per_m_tokens > LLM_RATE_MAX:
        warnings.append("AI Extraction cost is high - verify pricing model")

    return warnings


def validate_inputs(inputs: Inputs) -> ValidationReport:
    errors = validation_errors(inputs)
    return ValidationReport(
        is_valid=not errors,
        errors=errors,
        warnings=validation_warnings(inputs),
    )
