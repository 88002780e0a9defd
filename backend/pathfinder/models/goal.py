from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Goal(BaseModel):
    goal_id: str
    goal_name: str = ""
    target_amount: float = Field(ge=0)
    current_amount: float = Field(default=0.0, ge=0)
    target_date: date
    priority: int = Field(default=3, ge=1, le=5)  # 5 = highest
    monthly_budget: float = Field(default=0.0, ge=0)


class GoalAllocation(BaseModel):
    """Monthly allocation decided for one goal."""
    goal_id: str
    goal_name: str
    needed: float
    allocated: float
    shortfall: float
    priority: int


class AllocationResult(BaseModel):
    allocations: list[GoalAllocation]
    total_shortfall: float
    remaining_income: float


class AllocationRequest(BaseModel):
    goals: list[Goal] = []
    net_monthly_income: float = 0.0
    as_of: Optional[date] = None
