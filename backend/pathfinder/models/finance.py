"""Financial state and projection models for the timeline engine."""
from typing import Optional

from pydantic import BaseModel, Field

from pathfinder.models.events import TimelineEvent


class DebtObligation(BaseModel):
    """An amortizing debt carried in the financial state."""
    amount: float = Field(default=0.0, ge=0)
    interest_rate: Optional[float] = None  # falls back to settings.debt_interest_rate
    monthly_payment: float = Field(default=0.0, ge=0)

    model_config = {"frozen": True}


class InvestmentVehicle(BaseModel):
    """An investment position; inactive vehicles compound without contributions."""
    value: float = 0.0
    monthly_contribution: float = Field(default=0.0, ge=0)
    return_rate: Optional[float] = None  # falls back to settings.default_investment_return
    active: bool = True

    model_config = {"frozen": True}


class FinancialState(BaseModel):
    """Snapshot of a household's finances at the start of a simulated year."""
    cash: float = 0.0
    debts: list[DebtObligation] = []
    income: float = 0.0
    spending: float = 0.0
    investments: list[InvestmentVehicle] = []
    career_path: Optional[str] = None

    model_config = {"frozen": True}


class ProjectionSettings(BaseModel):
    """Fixed-rate assumptions for a projection run."""
    inflation_rate: float = 0.02
    default_investment_return: float = 0.07
    tax_rate: float = 0.20
    debt_interest_rate: float = 0.05


class ProjectionConfig(BaseModel):
    """Input to run_projection."""
    base_year: int
    years: int = 30
    starting_state: FinancialState = Field(default_factory=FinancialState)
    timeline_events: list[TimelineEvent] = []
    settings: ProjectionSettings = Field(default_factory=ProjectionSettings)


class YearlyDebugState(BaseModel):
    """Unrounded per-year figures recorded alongside the output series."""
    year: int
    year_index: int
    career_path: Optional[str] = None
    income: float
    spending: float
    taxes: float
    required_debt_service: float
    cashflow: float
    total_contributed: float
    surplus_cash: float
    cash: float
    investments: float
    debts: float
    net_worth: float


class ProjectionResult(BaseModel):
    """Year-aligned output series of a projection run."""
    years: list[int]
    income: list[float]
    spending: list[float]
    cashflow: list[float]
    total_investments: list[float]
    total_debts: list[float]
    net_worth: list[float]
    yearly_debug_states: list[YearlyDebugState]
