from typing import Optional

from pydantic import BaseModel, Field


class CareerInputs(BaseModel):
    """Personal baseline the career simulator starts from."""
    starting_savings: float = 0.0
    monthly_lifestyle_cost: float = 0.0


class CareerSummary(BaseModel):
    total_earnings: float
    total_cost: float
    peak_debt: float
    net_cash_at_horizon: float


class CareerSimulation(BaseModel):
    yearly_income: list[float]
    yearly_education_cost: list[float]
    yearly_living_cost: list[float]
    yearly_net_cash: list[float]
    cumulative_net_cash: list[float]
    yearly_debt: list[float]
    break_even_year: Optional[int] = None
    summary: CareerSummary


class CareerPathResult(BaseModel):
    template_id: str
    template_name: str
    simulation: CareerSimulation


class CareerCompareRequest(BaseModel):
    inputs: CareerInputs
    selected_templates: list[str] = Field(min_length=1)
    horizon_years: int = Field(default=10, ge=1, le=100)


class CareerCompareResponse(BaseModel):
    paths: list[CareerPathResult]
    horizon_years: int
