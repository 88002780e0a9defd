from typing import Optional

from pydantic import BaseModel


class Investment(BaseModel):
    """A held investment as recorded by the investment tracker."""
    ticker: Optional[str] = None
    asset_type: str = "other"
    current_value: float = 0.0
    expected_annual_return: float = 0.0
    monthly_contribution: float = 0.0


class InvestmentProjection(BaseModel):
    ticker: Optional[str] = None
    projections: dict[int, float]


class PortfolioProjection(BaseModel):
    """Future values keyed by horizon in years (1, 5, 10, 20, 30)."""
    total_portfolio: dict[int, float]
    by_investment: list[InvestmentProjection]
