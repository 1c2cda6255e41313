"""
Export Service — serialise a quote together with the inputs and scenario
that produced it, fingerprinted so a saved quote can be traced back to
its exact assumptions.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from quote_engine.models.inputs import Inputs, ScenarioConfig
from quote_engine.models.schemas import QuoteModel
from quote_engine.utils.hashing import fingerprint

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0.0"


def inputs_fingerprint(inputs: Inputs) -> str:
    return fingerprint(inputs.model_dump(mode="json"))


class ExportService:
    """Builds JSON-ready quote documents.  Performs no file I/O."""

    def build_document(
        self,
        inputs: Inputs,
        scenario: ScenarioConfig,
        model: QuoteModel,
        exported_at: Optional[datetime] = None,
    ) -> dict[str, Any]:
        exported_at = exported_at or datetime.now(timezone.utc)
        doc = {
            "metadata": {
                "exported_at": exported_at.isoformat(),
                "version": EXPORT_VERSION,
                "scenario_id": scenario.scenario_id,
                "inputs_fingerprint": inputs_fingerprint(inputs),
            },
            "inputs": inputs.model_dump(mode="json"),
            "scenario": scenario.model_dump(mode="json"),
            "model": model.model_dump(mode="json"),
        }
        logger.debug(
            f"Export document built for '{scenario.scenario_id}' "
            f"(inputs {doc['metadata']['inputs_fingerprint'][:12]}…)"
        )
        return doc

    def to_json(self, document: dict[str, Any], indent: int = 2) -> str:
        return json.dumps(document, indent=indent, ensure_ascii=False)

    def filename(self, scenario_id: str, exported_at: Optional[datetime] = None) -> str:
        exported_at = exported_at or datetime.now(timezone.utc)
        return f"quote_{scenario_id}_{exported_at.date().isoformat()}.json"
