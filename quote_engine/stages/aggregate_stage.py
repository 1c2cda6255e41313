"""Roll everything up into the QuoteModel and attach the validation report."""

from __future__ import annotations

import logging

from quote_engine.models.enums import StageName
from quote_engine.models.state import QuoteGraphState
from quote_engine.pricing.aggregation import aggregate
from quote_engine.stages.base_stage import BaseStage

logger = logging.getLogger(__name__)


class AggregateStage(BaseStage):
    name = StageName.AGGREGATE

    def _real_process(self, state: QuoteGraphState) -> QuoteGraphState:
        state.model = aggregate(
            state.inputs,
            state.scenario,
            state.volumes,
            state.ingestion_costs,
            state.build_costs,
            state.opex_costs,
            state.priced_components,
            state.line_items,
            scanning=state.scanning,
        )
        if not state.model.validation.is_valid:
            logger.warning(
                f"Quote for '{state.scenario.scenario_id}' computed from invalid inputs: "
                f"{'; '.join(state.model.validation.errors)}"
            )
        return state

    def _summary(self, state: QuoteGraphState) -> str:
        m = state.model
        return f"CAPEX £{m.capex.price:,.2f}, margin {m.capex_gross_margin:.1%} ({m.variance.status.value})"
