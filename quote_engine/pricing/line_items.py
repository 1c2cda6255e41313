"""
Line Item Generator — the client-facing, auditable breakdown.

One record per billable concept, in a fixed order: ingestion, then build,
then monthly opex.  Cost, margin and price are read from the priced
components, never recomputed here, so the line items always reconcile
with the category totals.
"""

from __future__ import annotations

from typing import Optional

from quote_engine.models.enums import BuildRole, CostCategory, MarginKind
from quote_engine.models.inputs import Inputs, ScenarioConfig
from quote_engine.models.schemas import (
    IngestionCosts,
    LineItem,
    OpexCosts,
    PricedComponent,
    ScanningResult,
    VolumeResult,
)
from quote_engine.pricing import build as build_calc
from quote_engine.pricing import ingestion as ingestion_calc
from quote_engine.pricing import opex as opex_calc
from quote_engine.pricing.margin import blended_margin

CLIENT_DIRECT_NOTE = "Payable directly to the cloud provider (Client Direct Cost)"

BUILD_ROLE_IDS: dict[BuildRole, str] = {
    BuildRole.SOLUTION_ARCHITECT: "build-sa",
    BuildRole.ML_ENGINEER: "build-ml",
    BuildRole.BACKEND_ENGINEER: "build-be",
    BuildRole.FRONTEND_ENGINEER: "build-fe",
    BuildRole.DEVOPS_ENGINEER: "build-devops",
    BuildRole.QA_ENGINEER: "build-qa",
    BuildRole.PROJECT_MANAGER: "build-pm",
}

# (line item id, component key, description)
PLATFORM_ITEMS: tuple[tuple[str, str, str], ...] = (
    ("opex-search", "opex_search", "Search Service"),
    ("opex-hosting", "opex_hosting", "Application Hosting"),
    ("opex-monitoring", "opex_monitoring", "Monitoring & Logging"),
    ("opex-db", "opex_database", "Database Services"),
    ("opex-security", "opex_security", "Security Services"),
)


def _item(
    component: PricedComponent,
    item_id: str,
    description: str,
    quantity: float,
    unit: str,
    unit_rate: float,
    notes: str = "",
) -> LineItem:
    return LineItem(
        id=item_id,
        category=component.category,
        description=description,
        quantity=quantity,
        unit=unit,
        unit_rate=unit_rate,
        cost=component.cost,
        margin=component.margin,
        price=component.price,
        notes=notes,
        is_passthrough=component.tag.kind in (MarginKind.PASSTHROUGH, MarginKind.CLIENT_DIRECT),
        margin_tag=component.tag,
    )


def _scanning_item(
    scanning: ScanningResult,
    labor: PricedComponent,
    equipment: PricedComponent,
    scanner_count: float,
) -> LineItem:
    cost = labor.cost + equipment.cost
    price = labor.price + equipment.price
    margin = blended_margin(cost, price)
    months = scanning.months_needed
    pages = scanning.total_pages
    price_per_page = price / pages if pages > 0 else 0.0
    notes = (
        f"{pages:,.0f} pages: {scanning.prep_hours:,.0f} hrs preparation, "
        f"{scanner_count:g} scanners over {scanning.days_needed} days, QA sampling and "
        f"project management. Equipment £{scanning.equipment_cost:,.0f}, operator labor "
        f"£{scanning.operator_labor_cost:,.0f}. Client price £{price_per_page:.3f}/page "
        f"(cost £{scanning.cost_per_page:.3f}/page, {margin * 100:.0f}% blended margin)."
    )
    return LineItem(
        id="ing-scanning",
        category=CostCategory.INGESTION,
        description="Document Scanning Service",
        quantity=months,
        unit="months",
        unit_rate=cost / months if months > 0 else 0.0,
        cost=cost,
        margin=margin,
        price=price,
        notes=notes,
        is_passthrough=False,
        margin_tag=None,
    )


def generate_line_items(
    inputs: Inputs,
    scenario: ScenarioConfig,
    volumes: VolumeResult,
    ingestion: IngestionCosts,
    opex: OpexCosts,
    priced: list[PricedComponent],
    scanning: Optional[ScanningResult] = None,
) -> list[LineItem]:
    by_key = {c.key: c for c in priced}
    rates = scenario.day_rates
    items: list[LineItem] = []

    # ── Ingestion ────────────────────────────────────────
    if scanning is not None:
        items.append(_scanning_item(
            scanning,
            by_key[ingestion_calc.SCANNING_LABOR],
            by_key[ingestion_calc.SCANNING_EQUIPMENT],
            inputs.scanning.scanner_count,
        ))

    items.append(_item(
        by_key[ingestion_calc.OCR], "ing-ocr", "OCR (Read)",
        quantity=volumes.total_pages / 1000, unit="per 1000 pages",
        unit_rate=inputs.extraction.ocr_cost_per_1000,
    ))

    llm = by_key[ingestion_calc.LLM_EXTRACTION]
    llm_note = (
        f"Scanned-input discount ×{ingestion.quality_discount:.2f} applied"
        if ingestion.quality_discount < 1.0 else ""
    )
    items.append(_item(
        llm, "ing-llm", "AI Workflow Extraction",
        quantity=ingestion.tokens_millions, unit="M tokens",
        unit_rate=ingestion.llm_rate_per_m_tokens, notes=llm_note,
    ))

    manual = by_key[ingestion_calc.MANUAL_REVIEW]
    client_pct = inputs.quality.client_handled_review_pct
    manual_note = (
        f"Vendor bills {100 - client_pct:g}% of {ingestion.total_review_hours:,.0f} flagged hours "
        f"({ingestion.billed_review_hours:,.1f} hours × £{rates.analyst_hourly:g} = £{manual.cost:,.2f}). "
        f"Client handles {client_pct:g}% ({ingestion.client_review_hours:,.0f} hours ≈ "
        f"£{ingestion.client_review_cost:,.2f} internal effort, not billed). "
        f"Effective Rate: £{rates.analyst_hourly / (1 - manual.margin):.2f}/hr"
    )
    items.append(_item(
        manual, "ing-manual", "Manual Review Support",
        quantity=ingestion.billed_review_hours, unit="hours",
        unit_rate=rates.analyst_hourly, notes=manual_note,
    ))

    # ── Build ────────────────────────────────────────────
    for role in BuildRole:
        component = by_key[build_calc.role_key(role)]
        rate = rates.rate_for(role)
        items.append(_item(
            component, BUILD_ROLE_IDS[role], build_calc.ROLE_TITLES[role],
            quantity=inputs.build_team.days_for(role), unit="days", unit_rate=rate,
            notes=f"Effective Day Rate: £{rate / (1 - component.margin):.2f}",
        ))

    items.append(_item(
        by_key[build_calc.PEN_TEST], "build-pentest", "Security Penetration Test",
        quantity=1, unit="each", unit_rate=inputs.build_team.pen_test_fee,
    ))

    # ── Monthly opex ─────────────────────────────────────
    for item_id, key, description in PLATFORM_ITEMS:
        component = by_key[key]
        items.append(_item(
            component, item_id, description,
            quantity=1, unit="month", unit_rate=component.cost, notes=CLIENT_DIRECT_NOTE,
        ))

    items.append(_item(
        by_key[opex_calc.OPEX_PEN_TEST], "opex-pentest", "Penetration Testing",
        quantity=1, unit="month", unit_rate=inputs.opex.pen_test_monthly,
    ))
    items.append(_item(
        by_key[opex_calc.OPEX_STORAGE], "opex-storage", "Document Storage",
        quantity=opex.storage_gb, unit="GB", unit_rate=inputs.opex.cost_per_gb_month,
        notes=CLIENT_DIRECT_NOTE,
    ))
    items.append(_item(
        by_key[opex_calc.OPEX_QUERIES], "opex-qa", "Q&A API Usage",
        quantity=opex.queries, unit="queries", unit_rate=inputs.opex.cost_per_query,
        notes=CLIENT_DIRECT_NOTE,
    ))

    support = by_key[opex_calc.OPEX_SUPPORT]
    items.append(_item(
        support, "opex-support", "Support & Maintenance",
        quantity=inputs.opex.support_hours, unit="hours", unit_rate=inputs.opex.support_rate,
        notes=(
            f"Fixed {support.margin * 100:.0f}% margin. "
            f"Effective Rate: £{inputs.opex.support_rate / (1 - support.margin):.2f}/hr"
        ),
    ))

    return items
