"""Timeline event application.

Each event produces a new FinancialState from the previous one; events
sharing a year offset are applied in list order so later events see the
effects of earlier ones.
"""
from __future__ import annotations

import logging

from pathfinder.models.events import (
    AssetAdd,
    AssetSale,
    CareerPathChange,
    DebtAdd,
    DebtPayoff,
    EventAction,
    IncomeChange,
    InvestmentStart,
    InvestmentStop,
    LifestyleChange,
    SpendingChange,
    TimelineEvent,
)
from pathfinder.models.finance import DebtObligation, FinancialState, InvestmentVehicle

logger = logging.getLogger(__name__)


def events_for_year(events: list[TimelineEvent], year_index: int) -> list[TimelineEvent]:
    """Events scheduled at ``year_index``, in their original order."""
    return [e for e in events if e.year_offset == year_index]


def apply_event(state: FinancialState, action: EventAction) -> FinancialState:
    """Return the state that results from a single parsed event."""
    if isinstance(action, IncomeChange):
        if action.new_income is None:
            return state
        return state.model_copy(update={"income": action.new_income})

    if isinstance(action, (SpendingChange, LifestyleChange)):
        if action.new_spending is None:
            return state
        return state.model_copy(update={"spending": action.new_spending})

    if isinstance(action, AssetAdd):
        return state.model_copy(update={"cash": state.cash + action.amount})

    if isinstance(action, AssetSale):
        return state.model_copy(update={"cash": state.cash - action.amount})

    if isinstance(action, DebtAdd):
        debt = DebtObligation(
            amount=action.amount,
            interest_rate=action.interest_rate,
            monthly_payment=action.monthly_payment,
        )
        return state.model_copy(update={"debts": [*state.debts, debt]})

    if isinstance(action, DebtPayoff):
        # Only the first debt is eligible, and only when fully covered.
        if state.debts and state.debts[0].amount <= action.amount:
            return state.model_copy(update={"debts": state.debts[1:]})
        return state

    if isinstance(action, InvestmentStart):
        vehicle = InvestmentVehicle(
            value=action.initial_value,
            monthly_contribution=action.monthly_contribution,
            return_rate=action.return_rate,
            active=True,
        )
        return state.model_copy(update={"investments": [*state.investments, vehicle]})

    if isinstance(action, InvestmentStop):
        stopped = [
            inv.model_copy(update={"active": False, "monthly_contribution": 0.0})
            for inv in state.investments
        ]
        return state.model_copy(update={"investments": stopped})

    if isinstance(action, CareerPathChange):
        update: dict = {"career_path": action.career_path}
        if action.new_income is not None:
            update["income"] = action.new_income
        return state.model_copy(update=update)

    return state


def apply_events(state: FinancialState, events: list[TimelineEvent]) -> FinancialState:
    """Apply events in order, skipping unrecognised types."""
    for event in events:
        action = event.action
        if action is None:
            logger.warning(
                "Ignoring unknown timeline event type %r at year offset %d",
                event.type, event.year_offset,
            )
            continue
        state = apply_event(state, action)
    return state
