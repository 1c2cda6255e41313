"""Estimate the physical scanning operation.  Only routed to when scanning is enabled."""

from __future__ import annotations

from quote_engine.models.enums import StageName
from quote_engine.models.state import QuoteGraphState
from quote_engine.pricing.scanning import estimate_scanning
from quote_engine.stages.base_stage import BaseStage


class ScanningStage(BaseStage):
    name = StageName.ESTIMATE_SCANNING

    def _real_process(self, state: QuoteGraphState) -> QuoteGraphState:
        state.scanning = estimate_scanning(state.inputs.scanning, state.volumes, state.scenario)
        return state

    def _summary(self, state: QuoteGraphState) -> str:
        s = state.scanning
        return f"{s.days_needed} days / {s.months_needed} months, £{s.total_cost:,.2f}"
