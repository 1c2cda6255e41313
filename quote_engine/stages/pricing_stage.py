"""
Margin pricing stage — collects every cost component emitted by the
calculators and prices each one against the scenario.
"""

from __future__ import annotations

from quote_engine.models.enums import StageName
from quote_engine.models.state import QuoteGraphState
from quote_engine.pricing.margin import price_components
from quote_engine.stages.base_stage import BaseStage


class PricingStage(BaseStage):
    name = StageName.PRICE_COMPONENTS

    def _real_process(self, state: QuoteGraphState) -> QuoteGraphState:
        components = (
            state.ingestion_costs.components
            + state.build_costs.components
            + state.opex_costs.components
        )
        state.priced_components = price_components(components, state.scenario)
        return state

    def _summary(self, state: QuoteGraphState) -> str:
        return f"{len(state.priced_components)} components priced"
