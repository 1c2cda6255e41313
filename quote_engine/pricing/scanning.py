"""
Scanning Cost Estimator — physical scanning operation cost and timeline.

Only runs when scanning is enabled.  The constants below are fixed policy
and are not exposed as assumptions.

Bucket split for margining:
  labor bucket       = labor + overhead + facility + logistics + risk buffer
                       (operational work, priced at the scenario labor margin)
  passthrough bucket = scanner leases
                       (published third-party cost, priced at the passthrough margin)
"""

from __future__ import annotations

import logging
import math

from quote_engine.models.inputs import ScanningAssumptions, ScenarioConfig
from quote_engine.models.schemas import ScanningResult, VolumeResult
from quote_engine.pricing.guards import check_scanning_throughput

logger = logging.getLogger(__name__)

EFFICIENCY_DERATE = 0.70
WORKING_DAYS_PER_MONTH = 20
WORKING_DAYS_PER_WEEK = 5
QA_PAGES_PER_HOUR = 1200
WEEKLY_OVERSIGHT_HOURS = 8
SETUP_CLOSEOUT_HOURS = 32
PM_HOURS_PER_DAY = 8
OVERHEAD_RATE = 0.25


def daily_capacity(scanning: ScanningAssumptions) -> float:
    """Pages per working day across all scanners, after the efficiency derate."""
    pages_per_minute = scanning.scanner_speed_ppm * scanning.scanner_count
    return pages_per_minute * 60 * scanning.hours_per_day * EFFICIENCY_DERATE


def estimate_scanning(
    scanning: ScanningAssumptions,
    volumes: VolumeResult,
    scenario: ScenarioConfig,
) -> ScanningResult:
    """Compute the scanning timeline, hours and cost breakdown."""
    check_scanning_throughput(scanning)

    total_pages = volumes.total_pages
    capacity = daily_capacity(scanning)

    # Timeline
    days_needed = math.ceil(total_pages / capacity)
    months_needed = math.ceil(days_needed / WORKING_DAYS_PER_MONTH)
    weeks_needed = math.ceil(days_needed / WORKING_DAYS_PER_WEEK)

    # Hours
    prep_hours = sum(
        count * scanning.prep_minutes.get(doc_type) / 60
        for doc_type, count in volumes.documents_by_type.items()
    )
    scanning_hours = days_needed * scanning.hours_per_day
    qa_hours = (total_pages * scanning.qa_review_pct / 100) / QA_PAGES_PER_HOUR
    management_hours = weeks_needed * WEEKLY_OVERSIGHT_HOURS + SETUP_CLOSEOUT_HOURS
    operator_labor_hours = prep_hours + scanning_hours + qa_hours

    # Labor
    operator_labor_cost = operator_labor_hours * scanning.operator_hourly_rate
    pm_hourly_rate = scenario.day_rates.project_manager / PM_HOURS_PER_DAY
    management_cost = management_hours * pm_hourly_rate
    labor_cost = operator_labor_cost + management_cost

    # Equipment, overhead, project costs
    equipment_cost = scanning.scanner_count * scanning.scanner_monthly_lease * months_needed
    overhead_cost = (labor_cost + equipment_cost) * OVERHEAD_RATE
    facility_cost = scanning.facility_monthly_cost * months_needed
    logistics_cost = scanning.logistics_cost

    subtotal = labor_cost + equipment_cost + overhead_cost + facility_cost + logistics_cost
    risk_buffer_cost = subtotal * scanning.risk_buffer_pct / 100
    total_cost = subtotal + risk_buffer_cost

    labor_bucket = labor_cost + overhead_cost + facility_cost + logistics_cost + risk_buffer_cost
    passthrough_bucket = equipment_cost

    logger.debug(
        f"Scanning: {total_pages:,.0f} pages @ {capacity:,.0f}/day → "
        f"{days_needed} days / {months_needed} months, total £{total_cost:,.2f}"
    )

    return ScanningResult(
        daily_capacity=capacity,
        days_needed=days_needed,
        weeks_needed=weeks_needed,
        months_needed=months_needed,
        prep_hours=prep_hours,
        scanning_hours=scanning_hours,
        qa_hours=qa_hours,
        management_hours=management_hours,
        operator_labor_hours=operator_labor_hours,
        total_labor_hours=operator_labor_hours + management_hours,
        operator_labor_cost=operator_labor_cost,
        management_cost=management_cost,
        labor_cost=labor_cost,
        equipment_cost=equipment_cost,
        overhead_cost=overhead_cost,
        facility_cost=facility_cost,
        logistics_cost=logistics_cost,
        subtotal_cost=subtotal,
        risk_buffer_cost=risk_buffer_cost,
        total_cost=total_cost,
        labor_bucket=labor_bucket,
        passthrough_bucket=passthrough_bucket,
        total_pages=total_pages,
        cost_per_page=total_cost / total_pages if total_pages > 0 else 0.0,
    )
