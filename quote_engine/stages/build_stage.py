from __future__ import annotations

from quote_engine.models.enums import StageName
from quote_engine.models.state import QuoteGraphState
from quote_engine.pricing.build import calculate_build
from quote_engine.stages.base_stage import BaseStage


class BuildStage(BaseStage):
    name = StageName.COST_BUILD

    def _real_process(self, state: QuoteGraphState) -> QuoteGraphState:
        state.build_costs = calculate_build(state.inputs.build_team, state.scenario)
        return state

    def _summary(self, state: QuoteGraphState) -> str:
        return f"build cost £{state.build_costs.total_cost:,.2f}"
