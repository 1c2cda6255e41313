"""Derive document and page volumes from the site assumptions."""

from __future__ import annotations

from quote_engine.models.enums import StageName
from quote_engine.models.state import QuoteGraphState
from quote_engine.pricing.volumes import derive_volumes
from quote_engine.stages.base_stage import BaseStage


class VolumeStage(BaseStage):
    name = StageName.DERIVE_VOLUMES

    def _real_process(self, state: QuoteGraphState) -> QuoteGraphState:
        state.volumes = derive_volumes(state.inputs.volume)
        return state

    def _summary(self, state: QuoteGraphState) -> str:
        return f"{state.volumes.total_documents:,.0f} documents, {state.volumes.total_pages:,.0f} pages"
