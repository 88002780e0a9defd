"""Income, investment growth, and goal allocation calculators."""
from fastapi import APIRouter

from pathfinder.models.goal import AllocationRequest, AllocationResult
from pathfinder.models.investment import Investment, PortfolioProjection
from pathfinder.models.tax import NetIncomeRequest, NetIncomeResult
from pathfinder.services.planning_service import allocate_goals, net_income, project_investments

router = APIRouter(tags=["planning"])


@router.post("/income/net", response_model=NetIncomeResult)
def net_income_endpoint(request: NetIncomeRequest):
    return net_income(request)


@router.post("/investments/projections", response_model=PortfolioProjection)
def investment_projections_endpoint(investments: list[Investment]):
    return project_investments(investments)


@router.post("/goals/allocations", response_model=AllocationResult)
def goal_allocations_endpoint(request: AllocationRequest):
    return allocate_goals(request)
