"""Compound growth projector — future value of investments at fixed horizons.

FV = PV * (1+i)^n + PMT * ((1+i)^n - 1) / i,  with i = r/12 and n = 12y.
"""
from __future__ import annotations

from pathfinder.models.investment import Investment, InvestmentProjection, PortfolioProjection

PROJECTION_HORIZONS = (1, 5, 10, 20, 30)


def future_value(present_value: float, monthly_payment: float, annual_return: float, years: int) -> float:
    """Future value with monthly compounding and end-of-month contributions."""
    n = 12 * years
    i = annual_return / 12.0
    if i == 0:
        return present_value + monthly_payment * n
    factor = (1.0 + i) ** n
    return present_value * factor + monthly_payment * ((factor - 1.0) / i)


def calculate_projections(investments: list[Investment]) -> PortfolioProjection:
    """Project each investment and the portfolio total at every horizon."""
    total_portfolio: dict[int, float] = {y: 0.0 for y in PROJECTION_HORIZONS}
    by_investment: list[InvestmentProjection] = []

    for inv in investments:
        projections: dict[int, float] = {}
        for y in PROJECTION_HORIZONS:
            fv = future_value(inv.current_value, inv.monthly_contribution, inv.expected_annual_return, y)
            projections[y] = fv
            total_portfolio[y] += fv

        by_investment.append(InvestmentProjection(
            ticker=inv.ticker or inv.asset_type,
            projections=projections,
        ))

    return PortfolioProjection(total_portfolio=total_portfolio, by_investment=by_investment)
