from __future__ import annotations

from quote_engine.models.enums import StageName
from quote_engine.models.state import QuoteGraphState
from quote_engine.pricing.ingestion import calculate_ingestion
from quote_engine.stages.base_stage import BaseStage


class IngestionStage(BaseStage):
    name = StageName.COST_INGESTION

    def _real_process(self, state: QuoteGraphState) -> QuoteGraphState:
        state.ingestion_costs = calculate_ingestion(
            state.volumes,
            state.inputs.quality,
            state.inputs.extraction,
            state.scenario,
            scanning=state.scanning,
        )
        return state

    def _summary(self, state: QuoteGraphState) -> str:
        return f"ingestion cost £{state.ingestion_costs.total_cost:,.2f}"
