"""Path comparison service.

Resolves stored templates for a request and dispatches to the
opportunity-cost comparator or the career path simulator.
"""
from __future__ import annotations

import logging

from pathfinder.engine.career import simulate_career_path
from pathfinder.engine.opportunity_cost import compare_paths
from pathfinder.models.career import CareerCompareRequest, CareerCompareResponse, CareerPathResult
from pathfinder.models.path import ComparisonRequest, PathComparison
from pathfinder.services.template_service import resolve_templates

logger = logging.getLogger(__name__)


def compare_selected_paths(request: ComparisonRequest) -> PathComparison:
    """Opportunity-cost comparison over the selected templates.

    Template order follows the request, which decides the pair used for
    break-even detection.
    """
    templates = resolve_templates(request.selected_templates)
    comparison = compare_paths(request.profile, templates, request.projection_years)
    logger.info(
        "Compared %d paths over %d years for profile %s (break-even: %s)",
        len(templates), request.projection_years,
        request.profile.profile_id, comparison.break_even_year,
    )
    return comparison


def compare_career_paths(request: CareerCompareRequest) -> CareerCompareResponse:
    """Cash/debt simulation for each selected template."""
    templates = resolve_templates(request.selected_templates)
    paths = [
        CareerPathResult(
            template_id=t.template_id,
            template_name=t.template_name,
            simulation=simulate_career_path(request.inputs, t, request.horizon_years),
        )
        for t in templates
    ]
    return CareerCompareResponse(paths=paths, horizon_years=request.horizon_years)
