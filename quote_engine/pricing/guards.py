"""
Configuration guards — reject inputs that would turn the arithmetic into
Infinity/NaN before any stage runs.

These are distinct from `validation.validate_inputs`, which only reports
advisory problems and never blocks a computation.
"""

from __future__ import annotations

import logging
import math

from quote_engine.models.inputs import Inputs, ScanningAssumptions, ScenarioConfig

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """A configuration that the engine refuses to compute."""


class UnknownScenarioError(KeyError):
    """Raised when a scenario id is not present in the registry."""


def check_margin(rate: float, label: str = "margin") -> None:
    if not math.isfinite(rate) or rate < 0.0 or rate >= 1.0:
        raise ConfigurationError(f"{label} must be in [0, 1), got {rate!r}")


def check_scanning_throughput(scanning: ScanningAssumptions) -> None:
    """Scanning capacity must be strictly positive when scanning is enabled."""
    for label, value in (
        ("scanner speed", scanning.scanner_speed_ppm),
        ("scanner count", scanning.scanner_count),
        ("working hours per day", scanning.hours_per_day),
    ):
        if not math.isfinite(value) or value <= 0:
            raise ConfigurationError(
                f"Scanning is enabled but {label} is {value!r}; daily capacity must be positive"
            )


def check_configuration(inputs: Inputs, scenario: ScenarioConfig) -> None:
    """Raise ConfigurationError if this (inputs, scenario) pair cannot be priced."""
    check_margin(scenario.labor_margin, "labor_margin")
    check_margin(scenario.passthrough_margin, "passthrough_margin")
    check_margin(scenario.target_margin, "target_margin")

    if inputs.scanning.enabled:
        check_scanning_throughput(inputs.scanning)

    logger.debug(f"Configuration accepted for scenario '{scenario.scenario_id}'")
