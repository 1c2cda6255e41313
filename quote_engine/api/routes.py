"""
API routes — thin HTTP layer that delegates to the QuoteEngine and services.

Routes:
  GET  /health                  → API health check
  GET  /api/scenarios           → Registered pricing scenarios
  GET  /api/scenarios/presets   → Assumption presets
  GET  /api/scenarios/{id}      → One scenario
  GET  /api/quote/defaults      → Baseline assumption sheet
  POST /api/quote               → Compute a quote
  POST /api/quote/compare       → Same inputs under every scenario
  POST /api/quote/validate      → Validation errors and warnings only
  POST /api/quote/export        → Quote document for download
  GET  /api/baseline            → Baseline snapshot
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from quote_engine.config import get_settings
from quote_engine.models.inputs import Inputs, ScenarioConfig
from quote_engine.models.schemas import QuoteModel, ValidationReport
from quote_engine.orchestration.engine import QuoteEngine
from quote_engine.pricing.presets import ASSUMPTION_PRESETS, AssumptionPreset, apply_preset, default_inputs
from quote_engine.services.baseline_service import BaselineService
from quote_engine.services.comparison_service import ScenarioComparisonRow, compare_scenarios
from quote_engine.services.export_service import ExportService

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
scenario_router = APIRouter()
quote_router = APIRouter()
baseline_router = APIRouter()


@lru_cache()
def get_engine() -> QuoteEngine:
    """Shared engine (and its memo) for the process."""
    return QuoteEngine()


# ── Request schemas ──────────────────────────────────────

class QuoteRequest(BaseModel):
    inputs: Inputs = Field(default_factory=default_inputs)
    scenario_id: Optional[str] = None
    preset_id: Optional[str] = None  # applied on top of `inputs`


class CompareRequest(BaseModel):
    inputs: Inputs = Field(default_factory=default_inputs)
    preset_id: Optional[str] = None


def _resolve_inputs(inputs: Inputs, preset_id: Optional[str]) -> Inputs:
    if preset_id is None:
        return inputs
    try:
        return apply_preset(inputs, preset_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=exc.args[0]) from exc


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check():
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.app_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Scenarios & presets ──────────────────────────────────

@scenario_router.get("", response_model=list[ScenarioConfig])
def list_scenarios(engine: QuoteEngine = Depends(get_engine)):
    return engine.registry.all()


@scenario_router.get("/presets", response_model=list[AssumptionPreset])
def list_presets():
    return list(ASSUMPTION_PRESETS.values())


@scenario_router.get("/{scenario_id}", response_model=ScenarioConfig)
def get_scenario(scenario_id: str, engine: QuoteEngine = Depends(get_engine)):
    return engine.registry.get(scenario_id)


# ── Quotes ───────────────────────────────────────────────

@quote_router.get("/defaults", response_model=Inputs)
def get_defaults():
    return default_inputs()


@quote_router.post("", response_model=QuoteModel)
def compute_quote(request: QuoteRequest, engine: QuoteEngine = Depends(get_engine)):
    scenario_id = request.scenario_id or get_settings().default_scenario
    inputs = _resolve_inputs(request.inputs, request.preset_id)
    model = engine.compute(inputs, scenario_id)
    logger.info(
        f"Quote computed [{scenario_id}]: CAPEX £{model.capex.price:,.2f}, "
        f"OPEX £{model.opex_annual.price:,.2f}/yr"
    )
    return model


@quote_router.post("/compare", response_model=list[ScenarioComparisonRow])
def compare_quote(request: CompareRequest, engine: QuoteEngine = Depends(get_engine)):
    return compare_scenarios(engine, _resolve_inputs(request.inputs, request.preset_id))


@quote_router.post("/validate", response_model=ValidationReport)
def validate_quote(inputs: Inputs, engine: QuoteEngine = Depends(get_engine)):
    return engine.validate(inputs)


@quote_router.post("/export")
def export_quote(request: QuoteRequest, engine: QuoteEngine = Depends(get_engine)):
    scenario_id = request.scenario_id or get_settings().default_scenario
    scenario = engine.registry.get(scenario_id)
    inputs = _resolve_inputs(request.inputs, request.preset_id)
    model = engine.compute_for(inputs, scenario)

    exporter = ExportService()
    document = exporter.build_document(inputs, scenario, model)
    return JSONResponse(
        content=document,
        headers={"Content-Disposition": f'attachment; filename="{exporter.filename(scenario_id)}"'},
    )


# ── Baseline ─────────────────────────────────────────────

@baseline_router.get("")
def get_baseline(engine: QuoteEngine = Depends(get_engine)) -> dict[str, Any]:
    return BaselineService(registry=engine.registry).build_snapshot()
