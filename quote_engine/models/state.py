"""
LangGraph shared state — the single object that flows through every stage.

Design rules:
  1. Each field is "owned" by one stage (see comments).
  2. Stages may READ any field but should only WRITE to their owned fields.
  3. The state lives for one computation only; nothing is persisted.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .inputs import Inputs, ScenarioConfig
from .schemas import (
    BuildCosts,
    IngestionCosts,
    LineItem,
    OpexCosts,
    PricedComponent,
    QuoteModel,
    ScanningResult,
    VolumeResult,
)


class StageLogEntry(BaseModel):
    stage: str
    action: str
    details: str = ""
    elapsed_ms: float = 0.0


class QuoteGraphState(BaseModel):
    """The state passed through every LangGraph node."""

    # ── Caller-supplied ──────────────────────────────────
    inputs: Inputs
    scenario: ScenarioConfig
    current_stage: str = ""

    # ── Volume Deriver (owner: derive_volumes) ───────────
    volumes: Optional[VolumeResult] = None

    # ── Scanning Estimator (owner: estimate_scanning) ────
    scanning: Optional[ScanningResult] = None

    # ── Cost calculators ─────────────────────────────────
    ingestion_costs: Optional[IngestionCosts] = None
    build_costs: Optional[BuildCosts] = None
    opex_costs: Optional[OpexCosts] = None

    # ── Margin Pricer (owner: price_components) ──────────
    priced_components: list[PricedComponent] = Field(default_factory=list)

    # ── Line Item Generator (owner: generate_line_items) ─
    line_items: list[LineItem] = Field(default_factory=list)

    # ── Aggregator & Validator (owner: aggregate) ────────
    model: Optional[QuoteModel] = None

    # ── Stage trail (append-only) ────────────────────────
    stage_log: list[StageLogEntry] = Field(default_factory=list)

    def log_stage(self, stage: str, action: str, details: str = "", elapsed_ms: float = 0.0) -> None:
        self.stage_log.append(
            StageLogEntry(stage=stage, action=action, details=details, elapsed_ms=elapsed_ms)
        )
