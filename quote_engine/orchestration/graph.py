"""
LangGraph State Machine — the pricing pipeline.

    derive_volumes → [estimate_scanning] → cost_ingestion → cost_build
        → cost_opex → price_components → generate_line_items → aggregate

All nodes delegate to stage.process(state), which returns the updated
state dict.  The only branch is whether scanning is estimated.
"""

from __future__ import annotations

import logging
from typing import Any

from langgraph.graph import END, StateGraph

from quote_engine.models.enums import StageName
from quote_engine.models.inputs import Inputs, ScenarioConfig
from quote_engine.models.schemas import QuoteModel
from quote_engine.models.state import QuoteGraphState
from quote_engine.orchestration.transitions import route_after_volumes
from quote_engine.stages import (
    AggregateStage,
    BuildStage,
    IngestionStage,
    LineItemStage,
    OpexStage,
    PricingStage,
    ScanningStage,
    VolumeStage,
)

logger = logging.getLogger(__name__)

# ── Instantiate stages (singletons for the graph) ────────

_volumes = VolumeStage()
_scanning = ScanningStage()
_ingestion = IngestionStage()
_build = BuildStage()
_opex = OpexStage()
_pricing = PricingStage()
_line_items = LineItemStage()
_aggregate = AggregateStage()


# ── Build the graph ──────────────────────────────────────

def build_graph():
    """
    Construct and compile the pricing state machine.
    Returns a compiled graph ready to invoke.
    """
    graph = StateGraph(dict)

    # ── Add nodes ────────────────────────────────────────
    for stage in (_volumes, _scanning, _ingestion, _build, _opex, _pricing, _line_items, _aggregate):
        graph.add_node(stage.name.value, stage.process)

    # ── Set entry point ──────────────────────────────────
    graph.set_entry_point(StageName.DERIVE_VOLUMES.value)

    # ── Add edges ────────────────────────────────────────

    # Volumes → conditional (scanning enabled?)
    graph.add_conditional_edges(
        StageName.DERIVE_VOLUMES.value,
        route_after_volumes,
        {
            StageName.ESTIMATE_SCANNING.value: StageName.ESTIMATE_SCANNING.value,
            StageName.COST_INGESTION.value: StageName.COST_INGESTION.value,
        },
    )

    # Scanning → ingestion → build → opex → pricing → line items → aggregate (linear)
    graph.add_edge(StageName.ESTIMATE_SCANNING.value, StageName.COST_INGESTION.value)
    graph.add_edge(StageName.COST_INGESTION.value, StageName.COST_BUILD.value)
    graph.add_edge(StageName.COST_BUILD.value, StageName.COST_OPEX.value)
    graph.add_edge(StageName.COST_OPEX.value, StageName.PRICE_COMPONENTS.value)
    graph.add_edge(StageName.PRICE_COMPONENTS.value, StageName.GENERATE_LINE_ITEMS.value)
    graph.add_edge(StageName.GENERATE_LINE_ITEMS.value, StageName.AGGREGATE.value)
    graph.add_edge(StageName.AGGREGATE.value, END)

    return graph.compile()


# ── Convenience runner ───────────────────────────────────

def run_pipeline(inputs: Inputs, scenario: ScenarioConfig, compiled=None) -> QuoteGraphState:
    """
    Run the graph end-to-end for one (inputs, scenario) pair.
    Returns the final state, including the stage trail.
    """
    if compiled is None:
        compiled = build_graph()
    initial: dict[str, Any] = QuoteGraphState(inputs=inputs, scenario=scenario).model_dump()

    logger.info(f"Pricing pipeline starting — scenario '{scenario.scenario_id}'")
    final_state = compiled.invoke(initial)
    state = QuoteGraphState(**final_state)
    logger.info(
        f"Pricing pipeline finished — {len(state.stage_log)} stages, "
        f"total {sum(e.elapsed_ms for e in state.stage_log):.2f}ms"
    )
    return state


def compute_model(inputs: Inputs, scenario: ScenarioConfig, compiled=None) -> QuoteModel:
    return run_pipeline(inputs, scenario, compiled).model
