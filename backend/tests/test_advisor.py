"""Tests for career advisor scoring and recommendations."""
import pytest
from pydantic import ValidationError

from pathfinder.engine.advisor import (
    combine_scores,
    find_tradeoffs,
    recommend,
    score_alignment,
    score_financial,
    score_lifestyle,
    score_path,
    score_time_independence,
)
from pathfinder.models.advisor import DimensionScores, PreferenceWeights, ScoredPath, UserProfile
from pathfinder.models.career import CareerSimulation, CareerSummary
from pathfinder.models.path import PathTemplate, PathTraits


def _make_simulation(break_even_year=5, **summary) -> CareerSimulation:
    values = dict(total_earnings=250_000, total_cost=0, peak_debt=50_000, net_cash_at_horizon=100_000)
    values.update(summary)
    return CareerSimulation(
        yearly_income=[],
        yearly_education_cost=[],
        yearly_living_cost=[],
        yearly_net_cash=[],
        cumulative_net_cash=[],
        yearly_debt=[],
        break_even_year=break_even_year,
        summary=CareerSummary(**values),
    )


def _make_template(**traits) -> PathTemplate:
    return PathTemplate(
        template_id="school",
        template_name="School",
        duration_years=4,
        traits=PathTraits(**traits),
    )


def _scored(template_id, financial, lifestyle, time_independence, alignment, overall) -> ScoredPath:
    return ScoredPath(
        template_id=template_id,
        template_name=template_id.title(),
        scores=DimensionScores(
            financial=financial,
            lifestyle=lifestyle,
            time_independence=time_independence,
            alignment=alignment,
        ),
        overall_score=overall,
    )


# --- Dimension scores ---


def test_financial_score_blends_four_factors():
    # 50 on every factor
    assert score_financial(_make_simulation()) == 50


def test_financial_score_floors_at_zero():
    simulation = _make_simulation(
        break_even_year=None, total_earnings=0, peak_debt=150_000, net_cash_at_horizon=-20_000,
    )
    assert score_financial(simulation) == 0


def test_financial_score_caps_net_cash_and_income():
    simulation = _make_simulation(
        break_even_year=1, total_earnings=900_000, peak_debt=0, net_cash_at_horizon=400_000,
    )
    assert score_financial(simulation) == 40 + 30 + 18 + 10


def test_lifestyle_neutral_traits_and_preferences():
    # 50 + 15 + 12.5 + 0 + 0 rounds half up
    assert score_lifestyle(UserProfile(), _make_template()) == 78


def test_lifestyle_penalises_structure_mismatch():
    profile = UserProfile(structure_preference=10)
    template = _make_template(structure=1)
    # structure match 10 -> (10 - 50) * 0.3 = -12
    assert score_lifestyle(profile, template) == 51


def test_lifestyle_is_clamped_to_100():
    profile = UserProfile(work_life_importance=10, location_importance=10)
    template = _make_template(work_life_balance=10, location_flexibility=10)
    assert score_lifestyle(profile, template) == 100


def test_time_independence_uses_break_even_and_school_years():
    # 50 * 0.6 + (100 - 4 * 16.67) * 0.4 = 43.328
    assert score_time_independence(_make_simulation(), _make_template()) == 43


def test_time_independence_without_break_even():
    template = PathTemplate(template_id="now", template_name="Now", duration_years=0)
    assert score_time_independence(_make_simulation(break_even_year=None), template) == 40


def test_alignment_defaults():
    # 50 + 20 (skill met) + 0 (neutral interest) + 12.5 (same risk)
    assert score_alignment(UserProfile(), _make_template()) == 83


@pytest.mark.parametrize("tolerance, level, expected", [
    ("medium", "high", 75),
    ("high", "medium", 75),
    ("low", "high", 65),
    ("high", "high", 83),
])
def test_alignment_risk_match(tolerance, level, expected):
    profile = UserProfile(risk_tolerance=tolerance)
    assert score_alignment(profile, _make_template(risk_level=level)) == expected


def test_alignment_skill_shortfall_and_interest():
    profile = UserProfile(
        skill_confidence=4, interest_alignment="high", primary_interest="medicine",
    )
    template = _make_template(skill_requirement=8, interest_area="medicine")
    # 50 + (50 - 50) * 0.4 + 50 * 0.35 + 12.5
    assert score_alignment(profile, template) == 80


def test_high_interest_in_another_area_is_neutral():
    profile = UserProfile(interest_alignment="high", primary_interest="art")
    assert score_alignment(profile, _make_template(interest_area="medicine")) == 83


# --- Combining ---


def test_combine_scores_default_weights():
    scores = DimensionScores(financial=50, lifestyle=78, time_independence=43, alignment=83)
    assert combine_scores(scores, PreferenceWeights()) == 60


def test_combine_scores_normalises_weights():
    scores = DimensionScores(financial=100, lifestyle=0, time_independence=0, alignment=0)
    weights = PreferenceWeights(financial_weight=1, lifestyle_weight=1, time_weight=0, alignment_weight=0)
    assert combine_scores(scores, weights) == 50


def test_all_zero_weights_rejected():
    with pytest.raises(ValidationError):
        PreferenceWeights(financial_weight=0, lifestyle_weight=0, time_weight=0, alignment_weight=0)


def test_score_path_collects_dimensions():
    path = score_path(UserProfile(), _make_template(), _make_simulation(), PreferenceWeights())
    assert path.template_id == "school"
    assert path.scores == DimensionScores(financial=50, lifestyle=78, time_independence=43, alignment=83)
    assert path.overall_score == 60


# --- Recommendation ---


def _three_paths() -> list[ScoredPath]:
    return [
        _scored("alpha", 90, 40, 60, 50, 70),
        _scored("beta", 50, 80, 80, 70, 65),
        _scored("gamma", 30, 60, 50, 90, 50),
    ]


def test_recommend_picks_category_winners():
    rec = recommend(_three_paths(), PreferenceWeights())
    assert rec.best_overall.template_id == "alpha"
    assert rec.best_financial.template_id == "alpha"
    assert rec.best_financial.score == 90
    assert rec.best_lifestyle.template_id == "beta"
    # low-risk: 0.4 alignment + 0.4 lifestyle + 0.2 financial
    assert rec.best_low_risk.template_id == "beta"
    assert rec.best_low_risk.score == 70
    assert [p.template_id for p in rec.all_ranked] == ["alpha", "beta", "gamma"]


def test_recommend_reasoning_mentions_strengths_and_priority():
    rec = recommend(_three_paths(), PreferenceWeights())
    assert "**Alpha** is your best overall match with a score of 70/100" in rec.reasoning
    assert "strong financial outcomes (90/100)" in rec.reasoning
    assert "lifestyle adjustments may be needed (40/100)" in rec.reasoning
    assert rec.reasoning.endswith("this path delivers strong returns.")


def test_reasoning_skips_priority_line_when_top_dimension_is_weak():
    weights = PreferenceWeights(lifestyle_weight=90)
    rec = recommend(_three_paths(), weights)
    assert "top priority" not in rec.reasoning


def test_overall_ties_keep_request_order():
    paths = [_scored("first", 50, 50, 50, 50, 60), _scored("second", 50, 50, 50, 50, 60)]
    rec = recommend(paths, PreferenceWeights())
    assert rec.best_overall.template_id == "first"
    assert rec.best_lifestyle.template_id == "first"


def test_tradeoffs_need_wide_margin_and_cap_at_three():
    paths = _three_paths() + [_scored("delta", 0, 100, 0, 0, 10)]
    tradeoffs = find_tradeoffs(paths, paths[0])
    assert [(t.path, t.dimension) for t in tradeoffs] == [
        ("Beta", "lifestyle"),
        ("Beta", "time"),
        ("Gamma", "lifestyle"),
    ]
    assert tradeoffs[0].insight.startswith("Beta provides 40 points better lifestyle fit")


def test_recommend_with_no_paths():
    rec = recommend([], PreferenceWeights())
    assert rec.best_overall is None
    assert rec.best_low_risk is None
    assert rec.reasoning == "No paths available for recommendation."
    assert rec.tradeoffs == []
