"""
Margin Pricer — the only place a cost is turned into a client price.

    price = cost / (1 - margin),   margin ∈ [0, 1)

Every component carries a MarginTag; the scenario resolves LABOR and
PASSTHROUGH, CLIENT_DIRECT is always 0 and FIXED_OVERRIDE brings its own
rate.  Blended margins are for display only and are never priced with.
"""

from __future__ import annotations

from quote_engine.models.enums import MarginKind
from quote_engine.models.inputs import MarginTag, ScenarioConfig
from quote_engine.models.schemas import CostComponent, PricedComponent
from quote_engine.pricing.guards import check_margin


def margin_for(tag: MarginTag, scenario: ScenarioConfig) -> float:
    if tag.kind == MarginKind.LABOR:
        return scenario.labor_margin
    if tag.kind == MarginKind.PASSTHROUGH:
        return scenario.passthrough_margin
    if tag.kind == MarginKind.CLIENT_DIRECT:
        return 0.0
    return tag.rate


def price_for(cost: float, margin: float) -> float:
    check_margin(margin)
    return cost / (1.0 - margin)


def price_component(component: CostComponent, scenario: ScenarioConfig) -> PricedComponent:
    margin = margin_for(component.tag, scenario)
    return PricedComponent(
        **component.model_dump(),
        margin=margin,
        price=price_for(component.cost, margin),
    )


def price_components(
    components: list[CostComponent], scenario: ScenarioConfig
) -> list[PricedComponent]:
    return [price_component(c, scenario) for c in components]


def blended_margin(cost: float, price: float) -> float:
    """Realized margin of a price; 0 when nothing is charged."""
    if price == 0:
        return 0.0
    return (price - cost) / price
