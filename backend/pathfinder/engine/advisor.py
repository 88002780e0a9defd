"""Career advisor: scores simulated career paths and picks recommendations.

Every path is scored 0-100 on four dimensions:

- financial: net cash at the horizon, peak debt, break-even speed, total income
- lifestyle: template traits against the user's structure, creativity,
  work-life and location preferences
- time_independence: break-even year and years spent in school
- alignment: skill confidence, interest and risk tolerance

The overall score is the weighted mean of the four, using the caller's
preference weights normalised to sum to one.
"""
from __future__ import annotations

from pathfinder.engine.rounding import round_half_up
from pathfinder.models.advisor import (
    CategoryPick,
    DimensionScores,
    PreferenceWeights,
    Recommendation,
    ScoredPath,
    Tradeoff,
    UserProfile,
)
from pathfinder.models.career import CareerSimulation
from pathfinder.models.path import PathTemplate

EXCELLENT_NET_CASH = 200_000.0
MAX_ACCEPTABLE_DEBT = 100_000.0
EXCELLENT_TOTAL_INCOME = 500_000.0
BREAK_EVEN_BASELINE_YEARS = 10
SCHOOL_YEAR_PENALTY = 16.67  # six years of school scores zero

STRENGTH_THRESHOLD = 70
CONCERN_THRESHOLD = 50
TRADEOFF_MARGIN = 15
MAX_TRADEOFFS = 3


def _clamp_score(value: float) -> int:
    return round_half_up(min(100.0, max(0.0, value)))


def _break_even_score(break_even_year: int | None) -> float:
    if break_even_year is None:
        return 0.0
    return max(0.0, 100.0 - break_even_year / BREAK_EVEN_BASELINE_YEARS * 100.0)


def score_financial(simulation: CareerSimulation) -> int:
    """Weighted 40/30/20/10 blend of net cash, low peak debt, break-even speed and income."""
    summary = simulation.summary
    net_cash = min(100.0, max(0.0, summary.net_cash_at_horizon / EXCELLENT_NET_CASH * 100.0))
    debt = max(0.0, 100.0 - summary.peak_debt / MAX_ACCEPTABLE_DEBT * 100.0)
    income = min(100.0, summary.total_earnings / EXCELLENT_TOTAL_INCOME * 100.0)
    score = (
        net_cash * 0.4
        + debt * 0.3
        + _break_even_score(simulation.break_even_year) * 0.2
        + income * 0.1
    )
    return round_half_up(score)


def _closeness(path_value: int, preference: int) -> float:
    return 100.0 - abs(path_value - preference) * 10.0


def score_lifestyle(profile: UserProfile, template: PathTemplate) -> int:
    traits = template.traits
    score = 50.0
    score += (_closeness(traits.structure, profile.structure_preference) - 50.0) * 0.3
    score += (_closeness(traits.creativity, profile.creativity_preference) - 50.0) * 0.25
    score += (traits.work_life_balance * profile.work_life_importance * 2 - 50.0) * 0.25
    score += (traits.location_flexibility * profile.location_importance * 2 - 50.0) * 0.2
    return _clamp_score(score)


def score_time_independence(simulation: CareerSimulation, template: PathTemplate) -> int:
    """Break-even speed (60%) and short schooling (40%)."""
    school = max(0.0, 100.0 - template.duration_years * SCHOOL_YEAR_PENALTY)
    return round_half_up(_break_even_score(simulation.break_even_year) * 0.6 + school * 0.4)


def _risk_match(tolerance: str, level: str) -> float:
    if tolerance == level:
        return 100.0
    if "medium" in (tolerance, level):
        return 70.0
    return 30.0


def _interest_score(profile: UserProfile, template: PathTemplate) -> float:
    if profile.interest_alignment == "high" and template.traits.interest_area == profile.primary_interest:
        return 100.0
    if profile.interest_alignment == "medium":
        return 70.0
    if profile.interest_alignment == "low":
        return 30.0
    return 50.0


def score_alignment(profile: UserProfile, template: PathTemplate) -> int:
    traits = template.traits
    if profile.skill_confidence >= traits.skill_requirement:
        skill = 100.0
    else:
        skill = profile.skill_confidence / traits.skill_requirement * 100.0

    score = 50.0
    score += (skill - 50.0) * 0.4
    score += (_interest_score(profile, template) - 50.0) * 0.35
    score += (_risk_match(profile.risk_tolerance, traits.risk_level) - 50.0) * 0.25
    return _clamp_score(score)


def combine_scores(scores: DimensionScores, weights: PreferenceWeights) -> int:
    total = weights.total
    combined = (
        scores.financial * weights.financial_weight
        + scores.lifestyle * weights.lifestyle_weight
        + scores.time_independence * weights.time_weight
        + scores.alignment * weights.alignment_weight
    ) / total
    return round_half_up(combined)


def score_path(
    profile: UserProfile,
    template: PathTemplate,
    simulation: CareerSimulation,
    weights: PreferenceWeights,
) -> ScoredPath:
    scores = DimensionScores(
        financial=score_financial(simulation),
        lifestyle=score_lifestyle(profile, template),
        time_independence=score_time_independence(simulation, template),
        alignment=score_alignment(profile, template),
    )
    return ScoredPath(
        template_id=template.template_id,
        template_name=template.template_name,
        scores=scores,
        overall_score=combine_scores(scores, weights),
    )


def _low_risk_score(path: ScoredPath) -> float:
    s = path.scores
    return s.alignment * 0.4 + s.lifestyle * 0.4 + s.financial * 0.2


def _reasoning(best: ScoredPath, weights: PreferenceWeights) -> str:
    s = best.scores
    text = (
        f"Based on your profile and preferences, **{best.template_name}** is your best "
        f"overall match with a score of {best.overall_score}/100.\n\n"
    )

    strengths = []
    if s.financial >= STRENGTH_THRESHOLD:
        strengths.append(f"strong financial outcomes ({s.financial}/100)")
    if s.lifestyle >= STRENGTH_THRESHOLD:
        strengths.append(f"excellent lifestyle fit ({s.lifestyle}/100)")
    if s.time_independence >= STRENGTH_THRESHOLD:
        strengths.append(f"fast path to independence ({s.time_independence}/100)")
    if s.alignment >= STRENGTH_THRESHOLD:
        strengths.append(f"great alignment with your skills and interests ({s.alignment}/100)")
    if strengths:
        text += f"**Key Strengths**: This path offers {', '.join(strengths)}.\n\n"

    concerns = []
    if s.financial < CONCERN_THRESHOLD:
        concerns.append(f"moderate financial returns ({s.financial}/100)")
    if s.lifestyle < CONCERN_THRESHOLD:
        concerns.append(f"lifestyle adjustments may be needed ({s.lifestyle}/100)")
    if s.time_independence < CONCERN_THRESHOLD:
        concerns.append(f"longer time to financial independence ({s.time_independence}/100)")
    if s.alignment < CONCERN_THRESHOLD:
        concerns.append(f"some skill development required ({s.alignment}/100)")
    if concerns:
        text += f"**Considerations**: {', '.join(concerns)}.\n\n"

    # Ties go to the earlier dimension.
    ordered = [
        ("financial", weights.financial_weight),
        ("lifestyle", weights.lifestyle_weight),
        ("time", weights.time_weight),
        ("alignment", weights.alignment_weight),
    ]
    top = max(ordered, key=lambda item: item[1])[0]
    if top == "financial" and s.financial >= STRENGTH_THRESHOLD:
        text += "Since financial outcomes are your top priority, this path delivers strong returns."
    elif top == "lifestyle" and s.lifestyle >= STRENGTH_THRESHOLD:
        text += "Since lifestyle fit is your top priority, this path aligns well with your preferences."
    elif top == "time" and s.time_independence >= STRENGTH_THRESHOLD:
        text += "Since quick independence is your top priority, this path gets you there faster."
    return text


def find_tradeoffs(paths: list[ScoredPath], best: ScoredPath) -> list[Tradeoff]:
    """Up to three dimensions where another path beats the best by a wide margin."""
    tradeoffs: list[Tradeoff] = []
    top = best.scores
    for path in paths:
        if path.template_id == best.template_id:
            continue
        s, name = path.scores, path.template_name
        if s.financial > top.financial + TRADEOFF_MARGIN:
            tradeoffs.append(Tradeoff(
                path=name, dimension="financial",
                insight=f"{name} offers {s.financial - top.financial} points better financial "
                        f"outcomes, but scores lower overall.",
            ))
        if s.lifestyle > top.lifestyle + TRADEOFF_MARGIN:
            tradeoffs.append(Tradeoff(
                path=name, dimension="lifestyle",
                insight=f"{name} provides {s.lifestyle - top.lifestyle} points better lifestyle "
                        f"fit, but may have other tradeoffs.",
            ))
        if s.time_independence > top.time_independence + TRADEOFF_MARGIN:
            tradeoffs.append(Tradeoff(
                path=name, dimension="time",
                insight=f"{name} gets you to independence "
                        f"{s.time_independence - top.time_independence} points faster, "
                        f"worth considering if speed is critical.",
            ))
    return tradeoffs[:MAX_TRADEOFFS]


def _pick(path: ScoredPath, score: float) -> CategoryPick:
    return CategoryPick(template_id=path.template_id, template_name=path.template_name, score=round_half_up(score))


def recommend(paths: list[ScoredPath], weights: PreferenceWeights) -> Recommendation:
    """Best overall, best per category, and tradeoffs.

    Sorts are stable, so ties keep the order paths were given in.
    """
    if not paths:
        return Recommendation(reasoning="No paths available for recommendation.")

    ranked = sorted(paths, key=lambda p: p.overall_score, reverse=True)
    best = ranked[0]
    best_financial = max(paths, key=lambda p: p.scores.financial)
    best_lifestyle = max(paths, key=lambda p: p.scores.lifestyle)
    best_low_risk = max(paths, key=_low_risk_score)

    return Recommendation(
        best_overall=best,
        best_financial=_pick(best_financial, best_financial.scores.financial),
        best_lifestyle=_pick(best_lifestyle, best_lifestyle.scores.lifestyle),
        best_low_risk=_pick(best_low_risk, _low_risk_score(best_low_risk)),
        reasoning=_reasoning(best, weights),
        tradeoffs=find_tradeoffs(paths, best),
        all_ranked=ranked,
    )
