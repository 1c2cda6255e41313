"""
Aggregator — category totals, realized margins, target variance, cost
drivers and external benchmarks, assembled into the final QuoteModel.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from quote_engine.models.enums import CostCategory, MarginKind, VarianceStatus
from quote_engine.models.inputs import Inputs, ScenarioConfig
from quote_engine.models.schemas import (
    BenchmarkComparison,
    BuildCosts,
    CategoryTotal,
    ComponentPrices,
    CostDrivers,
    IngestionCosts,
    LineItem,
    OpexCosts,
    PricedComponent,
    QuoteModel,
    ScanningResult,
    VarianceResult,
    VolumeResult,
)
from quote_engine.pricing import build as build_calc
from quote_engine.pricing import ingestion as ingestion_calc
from quote_engine.pricing import opex as opex_calc
from quote_engine.pricing.margin import blended_margin
from quote_engine.pricing.validation import validate_inputs

logger = logging.getLogger(__name__)

# Variance thresholds, in margin points below target
ON_TARGET_POINTS = -2.0
NEAR_TARGET_POINTS = -5.0


def _pct(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def category_total(components: Iterable[PricedComponent]) -> CategoryTotal:
    cost = price = labor_cost = labor_price = pt_cost = pt_price = 0.0
    for c in components:
        cost += c.cost
        price += c.price
        if c.tag.kind == MarginKind.LABOR:
            labor_cost += c.cost
            labor_price += c.price
        elif c.tag.kind == MarginKind.PASSTHROUGH:
            pt_cost += c.cost
            pt_price += c.price
    return CategoryTotal(
        cost=cost,
        price=price,
        labor_cost=labor_cost,
        labor_price=labor_price,
        passthrough_cost=pt_cost,
        passthrough_price=pt_price,
        gross_margin=blended_margin(cost, price),
    )


def combine(*totals: CategoryTotal, factor: float = 1.0) -> CategoryTotal:
    """Sum category totals (optionally scaled) and recompute the margin."""
    fields = ("cost", "price", "labor_cost", "labor_price", "passthrough_cost", "passthrough_price")
    summed = {f: sum(getattr(t, f) for t in totals) * factor for f in fields}
    return CategoryTotal(**summed, gross_margin=blended_margin(summed["cost"], summed["price"]))


def classify_variance(realized: float, target: float) -> VarianceResult:
    points = (realized - target) * 100
    # Thresholds are inclusive at 1e-9 point precision
    rounded = round(points, 9)
    if rounded >= ON_TARGET_POINTS:
        status = VarianceStatus.ON_TARGET
    elif rounded >= NEAR_TARGET_POINTS:
        status = VarianceStatus.NEAR_TARGET
    else:
        status = VarianceStatus.BELOW_TARGET
    return VarianceResult(
        target_margin=target,
        realized_margin=realized,
        variance_points=points,
        status=status,
    )


def compare_benchmarks(inputs: Inputs, volumes: VolumeResult, capex_price: float) -> BenchmarkComparison:
    manual_total = volumes.total_documents * inputs.benchmarks.manual_per_doc
    competitor_total = volumes.total_documents * inputs.benchmarks.competitor_per_doc
    vs_manual = manual_total - capex_price
    vs_competitor = competitor_total - capex_price
    return BenchmarkComparison(
        manual_total=manual_total,
        competitor_total=competitor_total,
        savings_vs_manual=vs_manual,
        savings_vs_competitor=vs_competitor,
        savings_vs_manual_pct=_pct(vs_manual, manual_total),
        savings_vs_competitor_pct=_pct(vs_competitor, competitor_total),
    )


def _component_prices(priced: list[PricedComponent]) -> ComponentPrices:
    by_key = {c.key: c.price for c in priced}
    build_labor = sum(
        c.price for c in priced
        if c.category == CostCategory.BUILD and c.key != build_calc.PEN_TEST
    )
    opex_client_direct = sum(
        c.price for c in priced
        if c.category == CostCategory.OPEX and c.tag.kind == MarginKind.CLIENT_DIRECT
    )
    pen_test = by_key.get(opex_calc.OPEX_PEN_TEST, 0.0)
    support = by_key.get(opex_calc.OPEX_SUPPORT, 0.0)
    return ComponentPrices(
        scanning=by_key.get(ingestion_calc.SCANNING_LABOR, 0.0)
        + by_key.get(ingestion_calc.SCANNING_EQUIPMENT, 0.0),
        ocr=by_key.get(ingestion_calc.OCR, 0.0),
        llm=by_key.get(ingestion_calc.LLM_EXTRACTION, 0.0),
        manual=by_key.get(ingestion_calc.MANUAL_REVIEW, 0.0),
        build_labor=build_labor,
        build_pen_test=by_key.get(build_calc.PEN_TEST, 0.0),
        opex_client_direct=opex_client_direct,
        opex_vendor_billed=pen_test + support,
        opex_pen_test=pen_test,
        opex_support=support,
    )


def aggregate(
    inputs: Inputs,
    scenario: ScenarioConfig,
    volumes: VolumeResult,
    ingestion_costs: IngestionCosts,
    build_costs: BuildCosts,
    opex_costs: OpexCosts,
    priced: list[PricedComponent],
    line_items: list[LineItem],
    scanning: Optional[ScanningResult] = None,
) -> QuoteModel:
    def of(category: CostCategory) -> list[PricedComponent]:
        return [c for c in priced if c.category == category]

    ingestion = category_total(of(CostCategory.INGESTION))
    build = category_total(of(CostCategory.BUILD))
    opex_monthly = category_total(of(CostCategory.OPEX))
    capex = combine(ingestion, build)
    opex_annual = combine(opex_monthly, factor=opex_calc.MONTHS_PER_YEAR)
    total_quote = combine(capex, opex_annual)

    variance = classify_variance(capex.gross_margin, scenario.target_margin)

    drivers = CostDrivers(
        manual_of_ingestion=_pct(ingestion_costs.manual_cost, ingestion.cost),
        ocr_of_ingestion=_pct(ingestion_costs.ocr_cost, ingestion.cost),
        llm_of_ingestion=_pct(ingestion_costs.llm_cost, ingestion.cost),
        scanning_of_ingestion=_pct(ingestion_costs.scanning_cost, ingestion.cost),
        manual_of_total=_pct(ingestion_costs.manual_cost, total_quote.cost),
        scanning_of_total=_pct(ingestion_costs.scanning_cost, total_quote.cost),
        build_of_total=_pct(build.cost, total_quote.cost),
        opex_of_total=_pct(opex_annual.cost, total_quote.cost),
    )

    logger.debug(
        f"Aggregate [{scenario.scenario_id}]: CAPEX £{capex.price:,.2f} "
        f"(margin {capex.gross_margin:.1%}, {variance.status.value}), "
        f"OPEX £{opex_annual.price:,.2f}/yr"
    )

    return QuoteModel(
        scenario_id=scenario.scenario_id,
        volumes=volumes,
        scanning=scanning,
        ingestion_costs=ingestion_costs,
        build_costs=build_costs,
        opex_costs=opex_costs,
        prices=_component_prices(priced),
        ingestion=ingestion,
        build=build,
        opex_monthly=opex_monthly,
        capex=capex,
        opex_annual=opex_annual,
        total_quote=total_quote,
        gross_margin=total_quote.gross_margin,
        capex_gross_margin=capex.gross_margin,
        opex_gross_margin=opex_annual.gross_margin,
        variance=variance,
        cost_drivers=drivers,
        benchmarks=compare_benchmarks(inputs, volumes, capex.price),
        line_items=line_items,
        validation=validate_inputs(inputs),
    )
