"""
Tests: Scenario registry and assumption presets.

Run with:
    pytest quote_engine/tests/test_scenarios_presets.py -v
"""

import pytest

from quote_engine.models.inputs import Inputs
from quote_engine.pricing.guards import UnknownScenarioError
from quote_engine.pricing.presets import ASSUMPTION_PRESETS, apply_preset, default_inputs
from quote_engine.pricing.scenarios import DEFAULT_SCENARIOS, ScenarioRegistry, default_registry


class TestRegistry:
    def test_default_scenarios(self):
        registry = default_registry()
        assert registry.ids() == ["conservative", "standard", "aggressive"]
        standard = registry.get("standard")
        assert (standard.labor_margin, standard.passthrough_margin, standard.target_margin) == (0.58, 0.13, 0.50)
        assert standard.day_rates.solution_architect == 488
        assert standard.day_rates.analyst_hourly == 44

    def test_unknown_id_is_key_error(self):
        with pytest.raises(KeyError):
            default_registry().get("nope")
        with pytest.raises(UnknownScenarioError, match="conservative"):
            default_registry().get("nope")

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            ScenarioRegistry([DEFAULT_SCENARIOS[0], DEFAULT_SCENARIOS[0]])

    def test_registry_is_read_only(self):
        registry = default_registry()
        with pytest.raises(TypeError):
            registry._scenarios["x"] = DEFAULT_SCENARIOS[0]
        assert "x" not in registry
        assert len(registry) == 3


class TestPresets:
    def test_default_inputs_match_excellent_preset(self):
        assert apply_preset(default_inputs(), "excellent") == default_inputs()

    def test_low_preset_overrides(self):
        inputs = apply_preset(Inputs(), "low")
        assert inputs.quality.tier_shares.poor == 0.25
        assert inputs.quality.review_rates.poor == 0.45
        assert inputs.quality.review_minutes == 30
        assert inputs.quality.client_handled_review_pct == 10
        assert (inputs.volume.min_docs_per_site, inputs.volume.max_docs_per_site) == (8, 15)

    def test_unnamed_fields_untouched(self):
        original = Inputs()
        inputs = apply_preset(original, "high")
        assert inputs.quality.conflict_minutes == original.quality.conflict_minutes
        assert inputs.extraction == original.extraction
        assert inputs.scanning == original.scanning
        assert original.quality.review_minutes == 5

    def test_presets_are_valid_distributions(self):
        for preset in ASSUMPTION_PRESETS.values():
            assert preset.tier_shares.total() == pytest.approx(1.0)

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            apply_preset(Inputs(), "perfect")
