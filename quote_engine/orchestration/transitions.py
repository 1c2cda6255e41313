"""
Routing functions for LangGraph conditional edges.

Each function inspects the current state dict and returns the name
of the next node to execute.
"""

from __future__ import annotations

from typing import Any

from quote_engine.models.enums import StageName


# ── After Volume Deriver ─────────────────────────────────

def route_after_volumes(state: dict[str, Any]) -> str:
    """
    Scanning enabled  → Scanning Cost Estimator.
    Scanning disabled → straight to the ingestion calculator.
    """
    if state["inputs"]["scanning"]["enabled"]:
        return StageName.ESTIMATE_SCANNING.value
    return StageName.COST_INGESTION.value
