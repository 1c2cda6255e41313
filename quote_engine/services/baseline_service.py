"""
Baseline Service — snapshot of the reference assumptions (default inputs,
scenario table, assumption presets) for documentation, optionally with
the runtime state of a live quote.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from quote_engine.config import get_settings
from quote_engine.models.inputs import Inputs
from quote_engine.models.schemas import QuoteModel
from quote_engine.pricing.presets import ASSUMPTION_PRESETS, default_inputs
from quote_engine.pricing.scenarios import ScenarioRegistry, default_registry
from quote_engine.services.export_service import EXPORT_VERSION

logger = logging.getLogger(__name__)


class BaselineService:
    def __init__(self, registry: Optional[ScenarioRegistry] = None):
        self.settings = get_settings()
        self.registry = registry or default_registry()

    def build_snapshot(
        self,
        inputs: Optional[Inputs] = None,
        model: Optional[QuoteModel] = None,
        scenario_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """Return the snapshot dict.  `runtime_state` is None unless a runtime argument is given."""
        runtime_state = None
        if inputs is not None or model is not None or scenario_id is not None:
            runtime_state = {
                "inputs": inputs.model_dump(mode="json") if inputs is not None else None,
                "scenario_id": scenario_id,
                "model": model.model_dump(mode="json") if model is not None else None,
            }

        return {
            "metadata": {
                "exported_at": datetime.now(timezone.utc).isoformat(),
                "version": EXPORT_VERSION,
                "source": self.settings.app_name,
                "description": "Baseline values for the pricing model",
            },
            "default_inputs": default_inputs().model_dump(mode="json"),
            "scenario_configs": {
                s.scenario_id: s.model_dump(mode="json") for s in self.registry
            },
            "assumption_presets": {
                pid: p.model_dump(mode="json") for pid, p in ASSUMPTION_PRESETS.items()
            },
            "runtime_state": runtime_state,
        }

    def default_path(self) -> Path:
        return Path(self.settings.baseline_dir) / self.settings.baseline_filename

    def export(
        self,
        path: Optional[str | Path] = None,
        inputs: Optional[Inputs] = None,
        model: Optional[QuoteModel] = None,
        scenario_id: Optional[str] = None,
    ) -> Path:
        """Write the snapshot as indented JSON, creating parent directories.  Returns the path."""
        target = Path(path) if path is not None else self.default_path()
        target.parent.mkdir(parents=True, exist_ok=True)

        snapshot = self.build_snapshot(inputs=inputs, model=model, scenario_id=scenario_id)
        target.write_text(json.dumps(snapshot, indent=2, ensure_ascii=False), encoding="utf-8")

        logger.info(f"Baseline snapshot written to {target}")
        return target
