"""Timeline simulation engine — deterministic year-by-year projection.

Runs a single pass over ``clamp(years, 1, 100) + 1`` years. Each year:
  1. Apply that year's timeline events
  2. Flat-rate tax on gross income and required debt service
  3. Throttled investment contributions and growth
  4. Surplus (or draw-down) to cash
  5. Debt interest accrual and in-order payment
  6. Net worth
Every year yields a fresh FinancialState; nothing is mutated in place.
"""
from __future__ import annotations

import logging

from pathfinder.engine.events import apply_events, events_for_year
from pathfinder.engine.rounding import round_half_up
from pathfinder.models.finance import (
    DebtObligation,
    FinancialState,
    InvestmentVehicle,
    ProjectionConfig,
    ProjectionResult,
    ProjectionSettings,
    YearlyDebugState,
)

logger = logging.getLogger(__name__)

MIN_YEARS = 1
MAX_YEARS = 100
_DEBT_EPSILON = 0.01  # Balances at or below this are rounding dust


def clamp_years(years: int) -> int:
    """Clamp a requested horizon to [MIN_YEARS, MAX_YEARS]."""
    return min(max(MIN_YEARS, years), MAX_YEARS)


def required_debt_service(debts: list[DebtObligation]) -> float:
    """Annual payments owed across all debts."""
    return sum(d.monthly_payment * 12 for d in debts)


def update_investments(
    investments: list[InvestmentVehicle],
    cashflow: float,
    default_return: float,
) -> tuple[list[InvestmentVehicle], float]:
    """Grow every vehicle and add contributions throttled to positive cashflow.

    Returns the new vehicles and the total actually contributed, which never
    exceeds max(0, cashflow).
    """
    desired = sum(inv.monthly_contribution * 12 for inv in investments if inv.active)
    available = max(0.0, cashflow)
    ratio = min(1.0, available / desired) if desired > 0 else 0.0

    updated: list[InvestmentVehicle] = []
    total_contributed = 0.0
    for inv in investments:
        rate = inv.return_rate if inv.return_rate is not None else default_return
        value = inv.value * (1.0 + rate)
        if inv.active:
            contribution = inv.monthly_contribution * 12 * ratio
            value += contribution
            total_contributed += contribution
        updated.append(inv.model_copy(update={"value": value}))

    return updated, total_contributed


def update_debts(
    debts: list[DebtObligation],
    payment_pool: float,
    default_rate: float,
) -> list[DebtObligation]:
    """Accrue interest, then pay debts in list order from a shared pool.

    Earlier debts get payment priority; paid-off debts are dropped.
    """
    remaining = payment_pool
    updated: list[DebtObligation] = []
    for debt in debts:
        rate = debt.interest_rate if debt.interest_rate is not None else default_rate
        amount = debt.amount * (1.0 + rate)
        payment = min(remaining, amount)
        amount = max(0.0, amount - payment)
        remaining -= payment
        if amount > _DEBT_EPSILON:
            updated.append(debt.model_copy(update={"amount": amount}))
    return updated


def _simulate_year(
    state: FinancialState,
    settings: ProjectionSettings,
    year: int,
    year_index: int,
) -> tuple[FinancialState, YearlyDebugState]:
    gross_income = state.income
    spending = state.spending
    taxes = gross_income * settings.tax_rate
    debt_service = required_debt_service(state.debts)
    cashflow = gross_income - spending - taxes - debt_service

    investments, total_contributed = update_investments(
        state.investments, cashflow, settings.default_investment_return,
    )
    surplus_cash = cashflow - total_contributed
    cash = state.cash + surplus_cash
    debts = update_debts(state.debts, debt_service, settings.debt_interest_rate)

    total_investments = sum(inv.value for inv in investments)
    total_debts = sum(d.amount for d in debts)
    net_worth = cash + total_investments - total_debts

    new_state = state.model_copy(update={
        "cash": cash,
        "investments": investments,
        "debts": debts,
    })
    snapshot = YearlyDebugState(
        year=year,
        year_index=year_index,
        career_path=state.career_path,
        income=gross_income,
        spending=spending,
        taxes=taxes,
        required_debt_service=debt_service,
        cashflow=cashflow,
        total_contributed=total_contributed,
        surplus_cash=surplus_cash,
        cash=cash,
        investments=total_investments,
        debts=total_debts,
        net_worth=net_worth,
    )
    return new_state, snapshot


def run_projection(config: ProjectionConfig) -> ProjectionResult:
    """Project a financial state forward year by year.

    Pure: identical configs produce identical results. Output series hold
    whole-dollar values; ``yearly_debug_states`` keeps the unrounded figures.
    """
    n_years = clamp_years(config.years)
    if n_years != config.years:
        logger.debug("Projection horizon %d clamped to %d", config.years, n_years)

    state = config.starting_state
    snapshots: list[YearlyDebugState] = []

    for year_index in range(n_years + 1):
        year = config.base_year + year_index
        state = apply_events(state, events_for_year(config.timeline_events, year_index))
        state, snapshot = _simulate_year(state, config.settings, year, year_index)
        snapshots.append(snapshot)

    return ProjectionResult(
        years=[s.year for s in snapshots],
        income=[round_half_up(s.income) for s in snapshots],
        spending=[round_half_up(s.spending) for s in snapshots],
        cashflow=[round_half_up(s.cashflow) for s in snapshots],
        total_investments=[round_half_up(s.investments) for s in snapshots],
        total_debts=[round_half_up(s.debts) for s in snapshots],
        net_worth=[round_half_up(s.net_worth) for s in snapshots],
        yearly_debug_states=snapshots,
    )
