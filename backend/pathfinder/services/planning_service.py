"""Planning calculators service — income, growth, and goal allocation."""
from __future__ import annotations

from pathfinder.engine.allocation import calculate_allocations
from pathfinder.engine.growth import calculate_projections
from pathfinder.engine.income import calculate_net_income
from pathfinder.models.goal import AllocationRequest, AllocationResult
from pathfinder.models.investment import Investment, PortfolioProjection
from pathfinder.models.tax import NetIncomeRequest, NetIncomeResult


def net_income(request: NetIncomeRequest) -> NetIncomeResult:
    return calculate_net_income(request.gross_annual_income, request.tax_settings, request.benefits)


def project_investments(investments: list[Investment]) -> PortfolioProjection:
    return calculate_projections(investments)


def allocate_goals(request: AllocationRequest) -> AllocationResult:
    """Split monthly income across goals, pinned to ``as_of`` when given."""
    return calculate_allocations(request.goals, request.net_monthly_income, request.as_of)
