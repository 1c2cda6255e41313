from __future__ import annotations

from quote_engine.models.enums import StageName
from quote_engine.models.state import QuoteGraphState
from quote_engine.pricing.line_items import generate_line_items
from quote_engine.stages.base_stage import BaseStage


class LineItemStage(BaseStage):
    name = StageName.GENERATE_LINE_ITEMS

    def _real_process(self, state: QuoteGraphState) -> QuoteGraphState:
        state.line_items = generate_line_items(
            state.inputs,
            state.scenario,
            state.volumes,
            state.ingestion_costs,
            state.opex_costs,
            state.priced_components,
            scanning=state.scanning,
        )
        return state

    def _summary(self, state: QuoteGraphState) -> str:
        return f"{len(state.line_items)} line items"
