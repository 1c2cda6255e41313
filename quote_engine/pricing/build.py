"""
Build Cost Calculator — one-time engineering labor plus the security test.
"""

from __future__ import annotations

from quote_engine.models.enums import BuildRole, CostCategory
from quote_engine.models.inputs import BuildTeamAssumptions, MarginTag, ScenarioConfig
from quote_engine.models.schemas import BuildCosts, CostComponent

PEN_TEST = "build_pen_test"

ROLE_TITLES: dict[BuildRole, str] = {
    BuildRole.SOLUTION_ARCHITECT: "Solution Architect",
    BuildRole.ML_ENGINEER: "ML Engineer",
    BuildRole.BACKEND_ENGINEER: "Backend Engineer",
    BuildRole.FRONTEND_ENGINEER: "Frontend Engineer",
    BuildRole.DEVOPS_ENGINEER: "DevOps Engineer",
    BuildRole.QA_ENGINEER: "QA Engineer",
    BuildRole.PROJECT_MANAGER: "Project Manager",
}


def role_key(role: BuildRole) -> str:
    return f"build_{role.value}"


def calculate_build(team: BuildTeamAssumptions, scenario: ScenarioConfig) -> BuildCosts:
    components = [
        CostComponent(
            key=role_key(role),
            category=CostCategory.BUILD,
            cost=team.days_for(role) * scenario.day_rates.rate_for(role),
            tag=MarginTag.labor(),
        )
        for role in BuildRole
    ]
    labor_cost = sum(c.cost for c in components)

    components.append(CostComponent(
        key=PEN_TEST, category=CostCategory.BUILD,
        cost=team.pen_test_fee, tag=MarginTag.passthrough(),
    ))

    return BuildCosts(
        labor_cost=labor_cost,
        passthrough_cost=team.pen_test_fee,
        total_cost=labor_cost + team.pen_test_fee,
        components=components,
    )
