from datetime import date

import pytest
from pydantic import ValidationError

from pathfinder.models.finance import DebtObligation, FinancialState, ProjectionConfig
from pathfinder.models.goal import Goal
from pathfinder.models.path import ComparisonRequest, PathTemplate, Profile


def test_projection_config_minimal():
    config = ProjectionConfig(base_year=2025)
    assert config.years == 30
    assert config.starting_state.cash == 0.0
    assert config.timeline_events == []
    assert config.settings.tax_rate == 0.20
    assert config.settings.default_investment_return == 0.07
    assert config.settings.debt_interest_rate == 0.05
    assert config.settings.inflation_rate == 0.02


def test_financial_state_is_frozen():
    state = FinancialState(cash=100.0)
    with pytest.raises(ValidationError):
        state.cash = 200.0


def test_negative_debt_rejected():
    with pytest.raises(ValidationError):
        DebtObligation(amount=-1.0)


def test_goal_priority_bounds():
    with pytest.raises(ValidationError):
        Goal(goal_id="G", target_amount=100, target_date=date(2026, 1, 1), priority=6)
    goal = Goal(goal_id="G", target_amount=100, target_date=date(2026, 1, 1))
    assert goal.priority == 3
    assert goal.current_amount == 0.0


def test_path_template_defaults():
    template = PathTemplate(template_id="x", template_name="Custom")
    assert template.duration_years == 4
    assert template.default_expenses is None
    assert template.default_benefits.employer_match == 0.0
    assert not template.military_specific


def test_comparison_request_requires_selection():
    with pytest.raises(ValidationError):
        ComparisonRequest(profile=Profile(profile_id="P"), selected_templates=[])
