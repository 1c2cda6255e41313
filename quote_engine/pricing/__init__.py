from .aggregation import aggregate
from .build import calculate_build
from .guards import ConfigurationError, UnknownScenarioError, check_configuration
from .ingestion import calculate_ingestion
from .line_items import generate_line_items
from .margin import blended_margin, margin_for, price_components, price_for
from .opex import calculate_opex
from .presets import ASSUMPTION_PRESETS, AssumptionPreset, apply_preset, default_inputs
from .scanning import estimate_scanning
from .scenarios import ScenarioRegistry, default_registry
from .validation import validate_inputs
from .volumes import derive_volumes

__all__ = [
    "aggregate",
    "calculate_build",
    "ConfigurationError",
    "UnknownScenarioError",
    "check_configuration",
    "calculate_ingestion",
    "generate_line_items",
    "blended_margin",
    "margin_for",
    "price_components",
    "price_for",
    "calculate_opex",
    "ASSUMPTION_PRESETS",
    "AssumptionPreset",
    "apply_preset",
    "default_inputs",
    "estimate_scanning",
    "ScenarioRegistry",
    "default_registry",
    "validate_inputs",
    "derive_volumes",
]
