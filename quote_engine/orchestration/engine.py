"""
QuoteEngine — the public entry point for pricing.

Wraps the compiled graph with the configuration guards, the scenario
registry and an LRU memo keyed on (inputs, scenario).  Inputs and
scenarios are frozen models, so the key is their value.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from quote_engine.config import get_settings
from quote_engine.models.inputs import Inputs, ScenarioConfig
from quote_engine.models.schemas import QuoteModel, ValidationReport
from quote_engine.orchestration.graph import build_graph, compute_model
from quote_engine.pricing.guards import check_configuration
from quote_engine.pricing.scenarios import ScenarioRegistry, default_registry
from quote_engine.pricing.validation import validate_inputs

logger = logging.getLogger(__name__)


class QuoteEngine:
    def __init__(self, registry: Optional[ScenarioRegistry] = None, cache_size: Optional[int] = None):
        self.registry = registry or default_registry()
        if cache_size is None:
            cache_size = get_settings().quote_cache_size
        self._graph = build_graph()
        self._cached = lru_cache(maxsize=cache_size)(self._compute_uncached)

    def _compute_uncached(self, inputs: Inputs, scenario: ScenarioConfig) -> QuoteModel:
        return compute_model(inputs, scenario, self._graph)

    def compute(self, inputs: Inputs, scenario_id: str) -> QuoteModel:
        """Price `inputs` under a registered scenario."""
        return self.compute_for(inputs, self.registry.get(scenario_id))

    def compute_for(self, inputs: Inputs, scenario: ScenarioConfig) -> QuoteModel:
        """Price `inputs` under an explicit scenario.  Raises ConfigurationError up front."""
        check_configuration(inputs, scenario)
        model = self._cached(inputs, scenario)
        return model.model_copy(deep=True)

    def compute_all(self, inputs: Inputs) -> dict[str, QuoteModel]:
        return {s.scenario_id: self.compute_for(inputs, s) for s in self.registry}

    def validate(self, inputs: Inputs) -> ValidationReport:
        return validate_inputs(inputs)

    def cache_info(self):
        return self._cached.cache_info()

    def clear_cache(self) -> None:
        self._cached.cache_clear()
