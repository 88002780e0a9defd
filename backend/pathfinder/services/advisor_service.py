"""Career advisor service.

Simulates each requested path with the user's finances, scores it, and
builds the recommendation.
"""
from __future__ import annotations

import logging

from pathfinder.engine.advisor import recommend, score_path
from pathfinder.engine.career import simulate_career_path
from pathfinder.models.advisor import AdvisorRequest, AdvisorResponse
from pathfinder.models.career import CareerInputs
from pathfinder.services.template_service import resolve_templates

logger = logging.getLogger(__name__)

ADVISOR_HORIZON_YEARS = 10


def evaluate_career_paths(request: AdvisorRequest) -> AdvisorResponse:
    profile = request.user_profile
    templates = resolve_templates(request.paths)
    inputs = CareerInputs(
        starting_savings=profile.starting_savings,
        monthly_lifestyle_cost=profile.monthly_lifestyle_cost,
    )

    scored = [
        score_path(
            profile,
            template,
            simulate_career_path(inputs, template, ADVISOR_HORIZON_YEARS),
            request.preference_weights,
        )
        for template in templates
    ]
    recommendation = recommend(scored, request.preference_weights)
    logger.info(
        "Evaluated %d career paths; best overall %s",
        len(scored),
        recommendation.best_overall.template_id if recommendation.best_overall else None,
    )
    return AdvisorResponse(recommendation=recommendation, scored_paths=scored)
