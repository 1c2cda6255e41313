"""
Tests: Build and Opex Cost Calculators.

Run with:
    pytest quote_engine/tests/test_build_opex.py -v
"""

import pytest

from quote_engine.models.enums import MarginKind
from quote_engine.models.inputs import BuildTeamAssumptions, OpexAssumptions, VolumeAssumptions
from quote_engine.pricing import build, opex
from quote_engine.pricing.scenarios import default_registry
from quote_engine.pricing.volumes import derive_volumes

CONSERVATIVE = default_registry().get("conservative")


class TestBuild:
    def test_baseline_labor(self):
        b = build.calculate_build(BuildTeamAssumptions(), CONSERVATIVE)
        assert b.labor_cost == pytest.approx(94_492)
        assert b.passthrough_cost == 12_000
        assert b.total_cost == pytest.approx(106_492)

    def test_one_component_per_role_plus_pen_test(self):
        b = build.calculate_build(BuildTeamAssumptions(), CONSERVATIVE)
        assert len(b.components) == 8
        labor = [c for c in b.components if c.tag.kind == MarginKind.LABOR]
        assert len(labor) == 7
        assert b.components[-1].key == build.PEN_TEST
        assert b.components[-1].tag.kind == MarginKind.PASSTHROUGH

    def test_zero_days_is_zero_labor(self):
        team = BuildTeamAssumptions(
            solution_architect=0, ml_engineer=0, backend_engineer=0, frontend_engineer=0,
            devops_engineer=0, qa_engineer=0, project_manager=0, pen_test_fee=0,
        )
        assert build.calculate_build(team, CONSERVATIVE).total_cost == 0


class TestOpex:
    def setup_method(self):
        self.volumes = derive_volumes(VolumeAssumptions())
        self.costs = opex.calculate_opex(OpexAssumptions(), self.volumes)

    def test_platform_total(self):
        assert self.costs.platform_cost == pytest.approx(1378)

    def test_storage_and_queries(self):
        assert self.costs.storage_gb == pytest.approx(1_861_500 * 0.3 / 1024)
        assert self.costs.storage_cost == pytest.approx(self.costs.storage_gb * 0.0142)
        assert self.costs.queries == pytest.approx(34_000)
        assert self.costs.query_cost == pytest.approx(170)

    def test_client_direct_and_vendor_billed_split(self):
        c = self.costs
        assert c.client_direct_cost == pytest.approx(c.platform_cost + c.storage_cost + c.query_cost)
        assert c.vendor_billed_cost == pytest.approx(1000 + 30.19 * 50)
        assert c.monthly_total_cost == pytest.approx(c.client_direct_cost + c.vendor_billed_cost)
        assert c.annual_total_cost == pytest.approx(c.monthly_total_cost * 12)

    def test_support_uses_fixed_margin(self):
        support = next(x for x in self.costs.components if x.key == opex.OPEX_SUPPORT)
        assert support.tag.kind == MarginKind.FIXED_OVERRIDE
        assert support.tag.rate == 0.5

    def test_components_cover_monthly_total(self):
        assert sum(x.cost for x in self.costs.components) == pytest.approx(self.costs.monthly_total_cost)
