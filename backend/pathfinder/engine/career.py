"""Career path simulator — cash and debt trajectory for one path template.

School years spread the education cost evenly and carry training living
costs with no income. Work years earn a salary that grows from the first
working year. A yearly surplus repays debt before adding to cash; a
shortfall drains cash before borrowing.
"""
from __future__ import annotations

import json
import logging

from pathfinder.engine.rounding import round_half_up
from pathfinder.models.career import CareerInputs, CareerSimulation, CareerSummary
from pathfinder.models.path import PathTemplate

logger = logging.getLogger(__name__)

_CACHE_MAX_ENTRIES = 256
_cache: dict[str, CareerSimulation] = {}


def _cache_key(inputs: CareerInputs, template: PathTemplate, horizon_years: int) -> str:
    return json.dumps({
        "inputs": inputs.model_dump(),
        "template": template.model_dump(),
        "horizon_years": horizon_years,
    }, sort_keys=True)


def clear_cache() -> None:
    _cache.clear()


def _settle_year(cash: float, debt: float, net_flow: float) -> tuple[float, float]:
    """Apply a year's net flow to (cash, debt)."""
    if net_flow >= 0:
        repayment = min(debt, net_flow)
        return cash + (net_flow - repayment), debt - repayment

    shortfall = -net_flow
    if cash >= shortfall:
        return cash - shortfall, debt
    return 0.0, debt + (shortfall - cash)


def _run(inputs: CareerInputs, template: PathTemplate, horizon_years: int) -> CareerSimulation:
    years_of_school = template.duration_years
    annual_education_cost = template.education_cost / years_of_school if years_of_school > 0 else 0.0
    lifestyle_cost = inputs.monthly_lifestyle_cost * 12
    training_cost = template.default_expenses or lifestyle_cost

    yearly_income: list[float] = []
    yearly_education_cost: list[float] = []
    yearly_living_cost: list[float] = []
    yearly_net_cash: list[float] = []
    cumulative_net_cash: list[float] = []
    yearly_debt: list[float] = []

    cash = inputs.starting_savings
    debt = 0.0
    peak_debt = 0.0
    break_even_year = None

    for year in range(1, horizon_years + 1):
        if year <= years_of_school:
            income = 0.0
            education = annual_education_cost
            living = training_cost
        else:
            years_working = year - years_of_school
            income = template.starting_salary * (1.0 + template.salary_growth_rate) ** (years_working - 1)
            education = 0.0
            living = lifestyle_cost

        net_flow = income - living - education
        cash, debt = _settle_year(cash, debt, net_flow)
        peak_debt = max(peak_debt, debt)

        net_cash = cash - debt
        if break_even_year is None and net_cash >= inputs.starting_savings:
            break_even_year = year

        yearly_income.append(round_half_up(income))
        yearly_education_cost.append(round_half_up(education))
        yearly_living_cost.append(round_half_up(living))
        yearly_net_cash.append(round_half_up(net_flow))
        cumulative_net_cash.append(round_half_up(net_cash))
        yearly_debt.append(round_half_up(debt))

    return CareerSimulation(
        yearly_income=yearly_income,
        yearly_education_cost=yearly_education_cost,
        yearly_living_cost=yearly_living_cost,
        yearly_net_cash=yearly_net_cash,
        cumulative_net_cash=cumulative_net_cash,
        yearly_debt=yearly_debt,
        break_even_year=break_even_year,
        summary=CareerSummary(
            total_earnings=sum(yearly_income),
            total_cost=sum(yearly_education_cost) + sum(yearly_living_cost),
            peak_debt=round_half_up(peak_debt),
            net_cash_at_horizon=cumulative_net_cash[-1] if cumulative_net_cash else inputs.starting_savings,
        ),
    )


def simulate_career_path(
    inputs: CareerInputs,
    template: PathTemplate,
    horizon_years: int = 10,
) -> CareerSimulation:
    """Simulate a path over ``horizon_years``; identical calls are memoised."""
    key = _cache_key(inputs, template, horizon_years)
    cached = _cache.get(key)
    if cached is not None:
        return cached.model_copy(deep=True)

    result = _run(inputs, template, horizon_years)
    if len(_cache) >= _CACHE_MAX_ENTRIES:
        _cache.clear()
        logger.debug("Career simulation cache reset after %d entries", _CACHE_MAX_ENTRIES)
    _cache[key] = result
    return result.model_copy(deep=True)
