"""
Opex Cost Calculator — recurring monthly platform, storage, query and support.

Client-direct costs (platform subscriptions, storage, queries) are paid
straight to the third parties and carry no vendor margin.  Vendor-billed
costs are the pen-test retainer (passthrough margin) and support, which
is always priced at a fixed 50% margin whatever the scenario.
"""

from __future__ import annotations

from quote_engine.models.enums import CostCategory
from quote_engine.models.inputs import MarginTag, OpexAssumptions
from quote_engine.models.schemas import CostComponent, OpexCosts, VolumeResult

SUPPORT_MARGIN = 0.50
MONTHS_PER_YEAR = 12
MB_PER_GB = 1024

# Fixed platform subscriptions: (component key, field name)
PLATFORM_SERVICES: tuple[tuple[str, str], ...] = (
    ("opex_search", "search"),
    ("opex_hosting", "app_hosting"),
    ("opex_monitoring", "monitoring"),
    ("opex_database", "database_services"),
    ("opex_security", "security_services"),
)
OPEX_PEN_TEST = "opex_pen_test"
OPEX_STORAGE = "opex_storage"
OPEX_QUERIES = "opex_queries"
OPEX_SUPPORT = "opex_support"


def calculate_opex(opex: OpexAssumptions, volumes: VolumeResult) -> OpexCosts:
    components = [
        CostComponent(
            key=key, category=CostCategory.OPEX,
            cost=getattr(opex, field), tag=MarginTag.client_direct(),
        )
        for key, field in PLATFORM_SERVICES
    ]
    platform_cost = sum(c.cost for c in components)

    storage_gb = volumes.total_pages * opex.mb_per_page / MB_PER_GB
    storage_cost = storage_gb * opex.cost_per_gb_month
    queries = (volumes.n_sites / 1000) * opex.queries_per_1000_sites
    query_cost = queries * opex.cost_per_query
    support_cost = opex.support_hours * opex.support_rate

    components.extend([
        CostComponent(key=OPEX_PEN_TEST, category=CostCategory.OPEX,
                      cost=opex.pen_test_monthly, tag=MarginTag.passthrough()),
        CostComponent(key=OPEX_STORAGE, category=CostCategory.OPEX,
                      cost=storage_cost, tag=MarginTag.client_direct()),
        CostComponent(key=OPEX_QUERIES, category=CostCategory.OPEX,
                      cost=query_cost, tag=MarginTag.client_direct()),
        CostComponent(key=OPEX_SUPPORT, category=CostCategory.OPEX,
                      cost=support_cost, tag=MarginTag.fixed(SUPPORT_MARGIN)),
    ])

    client_direct = platform_cost + storage_cost + query_cost
    vendor_billed = opex.pen_test_monthly + support_cost
    monthly_total = client_direct + vendor_billed

    return OpexCosts(
        platform_cost=platform_cost,
        storage_gb=storage_gb,
        storage_cost=storage_cost,
        queries=queries,
        query_cost=query_cost,
        pen_test_cost=opex.pen_test_monthly,
        support_cost=support_cost,
        client_direct_cost=client_direct,
        vendor_billed_cost=vendor_billed,
        monthly_total_cost=monthly_total,
        annual_total_cost=monthly_total * MONTHS_PER_YEAR,
        components=components,
    )
