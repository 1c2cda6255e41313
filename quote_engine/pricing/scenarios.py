"""
Scenario registry — immutable lookup of named pricing positions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from quote_engine.models.inputs import DayRates, ScenarioConfig
from quote_engine.pricing.guards import UnknownScenarioError

DEFAULT_SCENARIOS: tuple[ScenarioConfig, ...] = (
    ScenarioConfig(
        scenario_id="conservative",
        name="Conservative",
        description="Internal team, 40% target margin",
        day_rates=DayRates(),
        labor_margin=0.47,
        passthrough_margin=0.12,
        target_margin=0.40,
    ),
    ScenarioConfig(
        scenario_id="standard",
        name="Standard",
        description="Hybrid contractors, 50% target margin",
        day_rates=DayRates(),
        labor_margin=0.58,
        passthrough_margin=0.13,
        target_margin=0.50,
    ),
    ScenarioConfig(
        scenario_id="aggressive",
        name="Aggressive",
        description="Value-based pricing, 60% target margin",
        day_rates=DayRates(),
        labor_margin=0.68,
        passthrough_margin=0.15,
        target_margin=0.60,
    ),
)


class ScenarioRegistry:
    """Read-only mapping of scenario_id → ScenarioConfig, in registration order."""

    def __init__(self, scenarios: Iterable[ScenarioConfig]):
        table: dict[str, ScenarioConfig] = {}
        for scenario in scenarios:
            if scenario.scenario_id in table:
                raise ValueError(f"Duplicate scenario id '{scenario.scenario_id}'")
            table[scenario.scenario_id] = scenario
        self._scenarios: Mapping[str, ScenarioConfig] = MappingProxyType(table)

    def get(self, scenario_id: str) -> ScenarioConfig:
        try:
            return self._scenarios[scenario_id]
        except KeyError:
            raise UnknownScenarioError(
                f"Unknown scenario '{scenario_id}'. Available: {', '.join(self.ids())}"
            ) from None

    def ids(self) -> list[str]:
        return list(self._scenarios)

    def all(self) -> list[ScenarioConfig]:
        return list(self._scenarios.values())

    def __contains__(self, scenario_id: object) -> bool:
        return scenario_id in self._scenarios

    def __iter__(self) -> Iterator[ScenarioConfig]:
        return iter(self._scenarios.values())

    def __len__(self) -> int:
        return len(self._scenarios)


def default_registry() -> ScenarioRegistry:
    return ScenarioRegistry(DEFAULT_SCENARIOS)
