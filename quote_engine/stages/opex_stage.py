from __future__ import annotations

from quote_engine.models.enums import StageName
from quote_engine.models.state import QuoteGraphState
from quote_engine.pricing.opex import calculate_opex
from quote_engine.stages.base_stage import BaseStage


class OpexStage(BaseStage):
    name = StageName.COST_OPEX

    def _real_process(self, state: QuoteGraphState) -> QuoteGraphState:
        state.opex_costs = calculate_opex(state.inputs.opex, state.volumes)
        return state

    def _summary(self, state: QuoteGraphState) -> str:
        return f"opex £{state.opex_costs.monthly_total_cost:,.2f}/month"
