"""Tests for the career path simulator."""
from pathfinder.engine.career import simulate_career_path
from pathfinder.models.career import CareerInputs
from pathfinder.models.path import PathTemplate


def _make_template(**overrides) -> PathTemplate:
    defaults = dict(
        template_id="school",
        template_name="School",
        duration_years=2,
        starting_salary=50_000.0,
        salary_growth_rate=0.10,
        education_cost=20_000.0,
    )
    defaults.update(overrides)
    return PathTemplate(**defaults)


def _inputs() -> CareerInputs:
    return CareerInputs(starting_savings=10_000, monthly_lifestyle_cost=2_000)


def test_school_years_borrow_after_savings_run_out():
    result = simulate_career_path(_inputs(), _make_template(), 5)
    assert result.yearly_income == [0, 0, 50_000, 55_000, 60_500]
    assert result.yearly_education_cost == [10_000, 10_000, 0, 0, 0]
    assert result.yearly_living_cost == [24_000] * 5
    assert result.yearly_net_cash == [-34_000, -34_000, 26_000, 31_000, 36_500]
    assert result.yearly_debt == [24_000, 58_000, 32_000, 1_000, 0]
    assert result.cumulative_net_cash == [-24_000, -58_000, -32_000, -1_000, 35_500]


def test_break_even_when_net_cash_recovers_savings():
    result = simulate_career_path(_inputs(), _make_template(), 5)
    assert result.break_even_year == 5
    assert result.summary.peak_debt == 58_000
    assert result.summary.total_earnings == 165_500
    assert result.summary.total_cost == 20_000 + 120_000
    assert result.summary.net_cash_at_horizon == 35_500


def test_training_living_cost_uses_template_expenses():
    result = simulate_career_path(_inputs(), _make_template(default_expenses=12_000), 3)
    assert result.yearly_living_cost == [12_000, 12_000, 24_000]


def test_no_school_path_breaks_even_in_first_year():
    template = _make_template(duration_years=0, education_cost=0.0)
    result = simulate_career_path(_inputs(), template, 3)
    assert result.yearly_education_cost == [0, 0, 0]
    assert result.break_even_year == 1
    assert result.summary.peak_debt == 0


def test_repeated_calls_are_equal_and_independent():
    first = simulate_career_path(_inputs(), _make_template(), 5)
    first.yearly_income.append(999)
    second = simulate_career_path(_inputs(), _make_template(), 5)
    assert len(second.yearly_income) == 5
    assert second == simulate_career_path(_inputs(), _make_template(), 5)
