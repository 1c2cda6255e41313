"""
Tests: Scanning Cost Estimator and its throughput guard.

Run with:
    pytest quote_engine/tests/test_scanning.py -v
"""

import pytest

from quote_engine.models.inputs import ScanningAssumptions, VolumeAssumptions
from quote_engine.pricing.guards import ConfigurationError
from quote_engine.pricing.scanning import daily_capacity, estimate_scanning
from quote_engine.pricing.scenarios import default_registry
from quote_engine.pricing.volumes import derive_volumes

CONSERVATIVE = default_registry().get("conservative")


def _estimate(n_sites=17_000, **scanning):
    volumes = derive_volumes(VolumeAssumptions(n_sites=n_sites))
    return estimate_scanning(ScanningAssumptions(**scanning), volumes, CONSERVATIVE)


class TestTimeline:
    def test_daily_capacity_applies_derate(self):
        # 75 ppm × 2 scanners × 60 × 6 h × 0.70
        assert daily_capacity(ScanningAssumptions()) == pytest.approx(37_800)

    def test_baseline_timeline(self):
        s = _estimate()
        assert s.days_needed == 50
        assert s.weeks_needed == 10
        assert s.months_needed == 3

    def test_timeline_values_are_whole_numbers(self):
        s = _estimate(n_sites=1234)
        assert isinstance(s.days_needed, int)
        assert isinstance(s.months_needed, int)


class TestCosts:
    def test_baseline_hours(self):
        s = _estimate()
        assert s.prep_hours == pytest.approx(4250)
        assert s.scanning_hours == pytest.approx(300)
        assert s.qa_hours == pytest.approx(155.125)
        assert s.management_hours == pytest.approx(112)

    def test_baseline_cost_breakdown(self):
        s = _estimate()
        assert s.operator_labor_cost == pytest.approx(70_576.875)
        assert s.management_cost == pytest.approx(5_768)
        assert s.equipment_cost == pytest.approx(6_000)
        assert s.overhead_cost == pytest.approx(20_586.21875)
        assert s.facility_cost == pytest.approx(4_500)
        assert s.total_cost == pytest.approx(116_477.6484375)

    def test_buckets_partition_total(self):
        s = _estimate()
        assert s.passthrough_bucket == pytest.approx(s.equipment_cost)
        assert s.labor_bucket + s.passthrough_bucket == pytest.approx(s.total_cost)

    def test_doubling_sites_roughly_doubles_scanning(self):
        base = _estimate()
        doubled = _estimate(n_sites=34_000)
        assert 2 * base.days_needed - 1 <= doubled.days_needed <= 2 * base.days_needed
        assert 2 * base.months_needed - 1 <= doubled.months_needed <= 2 * base.months_needed
        assert 1.8 < doubled.total_cost / base.total_cost < 2.1

    def test_no_pages_has_zero_cost_per_page(self):
        s = _estimate(n_sites=0)
        assert s.days_needed == 0
        assert s.cost_per_page == 0.0


class TestThroughputGuard:
    @pytest.mark.parametrize("field", ["scanner_speed_ppm", "scanner_count", "hours_per_day"])
    def test_zero_throughput_rejected(self, field):
        with pytest.raises(ConfigurationError):
            _estimate(**{field: 0})

    def test_negative_throughput_rejected(self):
        with pytest.raises(ConfigurationError):
            _estimate(scanner_count=-1)

    def test_non_finite_throughput_rejected(self):
        with pytest.raises(ConfigurationError):
            _estimate(scanner_speed_ppm=float("inf"))
