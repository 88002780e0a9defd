"""Goal allocation engine — greedy, priority-ordered split of monthly income.

Goals are funded in order of priority (5 highest), ties broken by the nearer
target date. Each goal takes min(remaining, needed); there is no rebalancing
pass, so a lower-priority goal can be starved entirely.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pathfinder.models.goal import AllocationResult, Goal, GoalAllocation


@dataclass
class _GoalNeed:
    goal: Goal
    months_remaining: int
    amount_needed: float
    needed_monthly: float


def months_between(start: date, end: date) -> int:
    """Calendar-month difference, ignoring day of month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def _goal_need(goal: Goal, today: date) -> _GoalNeed:
    months = max(1, months_between(today, goal.target_date))
    amount_needed = max(0.0, goal.target_amount - goal.current_amount)
    return _GoalNeed(
        goal=goal,
        months_remaining=months,
        amount_needed=amount_needed,
        needed_monthly=amount_needed / months,
    )


def calculate_allocations(
    goals: list[Goal],
    net_monthly_income: float,
    today: date | None = None,
) -> AllocationResult:
    """Allocate ``net_monthly_income`` across goals by priority."""
    today = today or date.today()
    needs = [_goal_need(g, today) for g in goals]
    needs.sort(key=lambda n: (-n.goal.priority, n.goal.target_date))

    remaining = net_monthly_income or 0.0
    total_shortfall = 0.0
    allocations: list[GoalAllocation] = []

    for need in needs:
        allocated = min(remaining, need.needed_monthly) if remaining > 0 else 0.0
        remaining -= allocated
        shortfall = max(0.0, need.needed_monthly - allocated)
        total_shortfall += shortfall

        allocations.append(GoalAllocation(
            goal_id=need.goal.goal_id,
            goal_name=need.goal.goal_name,
            needed=need.needed_monthly,
            allocated=allocated,
            shortfall=shortfall,
            priority=need.goal.priority,
        ))

    return AllocationResult(
        allocations=allocations,
        total_shortfall=total_shortfall,
        remaining_income=remaining,
    )
