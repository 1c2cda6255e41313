"""
Tests: Margin Pricer, margin tags and configuration guards.

Run with:
    pytest quote_engine/tests/test_margin.py -v
"""

import pytest
from pydantic import ValidationError

from quote_engine.models.enums import CostCategory, MarginKind
from quote_engine.models.inputs import Inputs, MarginTag, ScanningAssumptions, ScenarioConfig
from quote_engine.models.schemas import CostComponent
from quote_engine.pricing.guards import ConfigurationError, check_configuration
from quote_engine.pricing.margin import blended_margin, margin_for, price_components, price_for
from quote_engine.pricing.scenarios import default_registry

STANDARD = default_registry().get("standard")


class TestMarginTags:
    def test_tags_resolve_against_scenario(self):
        assert margin_for(MarginTag.labor(), STANDARD) == 0.58
        assert margin_for(MarginTag.passthrough(), STANDARD) == 0.13
        assert margin_for(MarginTag.client_direct(), STANDARD) == 0.0
        assert margin_for(MarginTag.fixed(0.5), STANDARD) == 0.5

    def test_fixed_override_requires_rate(self):
        with pytest.raises(ValidationError):
            MarginTag(kind=MarginKind.FIXED_OVERRIDE)

    def test_rate_only_allowed_on_override(self):
        with pytest.raises(ValidationError):
            MarginTag(kind=MarginKind.LABOR, rate=0.3)


class TestPricing:
    def test_price_formula(self):
        assert price_for(100, 0.5) == pytest.approx(200)
        assert price_for(100, 0.0) == 100

    @pytest.mark.parametrize("margin", [1.0, 1.5, -0.1, float("nan")])
    def test_out_of_range_margin_rejected(self, margin):
        with pytest.raises(ConfigurationError):
            price_for(100, margin)

    def test_price_components_keeps_order_and_tags(self):
        components = [
            CostComponent(key="a", category=CostCategory.BUILD, cost=53, tag=MarginTag.labor()),
            CostComponent(key="b", category=CostCategory.OPEX, cost=10, tag=MarginTag.client_direct()),
        ]
        priced = price_components(components, STANDARD)
        assert [p.key for p in priced] == ["a", "b"]
        assert priced[0].price == pytest.approx(53 / 0.42)
        assert priced[1].price == 10

    def test_blended_margin(self):
        assert blended_margin(60, 100) == pytest.approx(0.4)
        assert blended_margin(0, 0) == 0.0


class TestConfigurationGuard:
    def test_default_configuration_accepted(self):
        check_configuration(Inputs(), STANDARD)

    def test_margin_of_one_rejected(self):
        broken = ScenarioConfig.model_construct(
            scenario_id="broken", name="Broken",
            day_rates=STANDARD.day_rates,
            labor_margin=1.0, passthrough_margin=0.1, target_margin=0.4,
        )
        with pytest.raises(ConfigurationError, match="labor_margin"):
            check_configuration(Inputs(), broken)

    def test_scenario_model_rejects_margin_of_one(self):
        with pytest.raises(ValidationError):
            ScenarioConfig(
                scenario_id="x", name="X",
                labor_margin=1.0, passthrough_margin=0.1, target_margin=0.4,
            )

    def test_zero_scanners_rejected_only_when_scanning_enabled(self):
        with pytest.raises(ConfigurationError):
            check_configuration(Inputs(scanning=ScanningAssumptions(scanner_count=0)), STANDARD)
        check_configuration(
            Inputs(scanning=ScanningAssumptions(enabled=False, scanner_count=0)), STANDARD,
        )
