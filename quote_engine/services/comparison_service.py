"""
Comparison Service — one quote per registered scenario from the same inputs.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from quote_engine.models.enums import VarianceStatus
from quote_engine.models.inputs import Inputs
from quote_engine.orchestration.engine import QuoteEngine

logger = logging.getLogger(__name__)


class ScenarioComparisonRow(BaseModel):
    scenario_id: str
    name: str
    capex_price: float
    opex_annual_price: float
    target_margin_pct: float
    capex_margin_pct: float
    variance_points: float
    labor_margin_pct: float
    passthrough_margin_pct: float
    on_target: bool


def compare_scenarios(engine: QuoteEngine, inputs: Inputs) -> list[ScenarioComparisonRow]:
    """Rows in registry order."""
    models = engine.compute_all(inputs)
    rows = []
    for scenario in engine.registry:
        model = models[scenario.scenario_id]
        rows.append(ScenarioComparisonRow(
            scenario_id=scenario.scenario_id,
            name=scenario.name,
            capex_price=model.capex.price,
            opex_annual_price=model.opex_annual.price,
            target_margin_pct=scenario.target_margin * 100,
            capex_margin_pct=model.capex_gross_margin * 100,
            variance_points=model.variance.variance_points,
            labor_margin_pct=scenario.labor_margin * 100,
            passthrough_margin_pct=scenario.passthrough_margin * 100,
            on_target=model.variance.status == VarianceStatus.ON_TARGET,
        ))
    logger.debug(f"Compared {len(rows)} scenarios")
    return rows
