"""Projection orchestration service.

Runs the timeline engine and logs a one-line summary of the outcome.
"""
from __future__ import annotations

import logging

from pathfinder.engine.timeline import run_projection
from pathfinder.models.finance import ProjectionConfig, ProjectionResult

logger = logging.getLogger(__name__)


def run_timeline_projection(config: ProjectionConfig) -> ProjectionResult:
    result = run_projection(config)
    logger.info(
        "Projection %d-%d: %d events, final net worth %s",
        result.years[0], result.years[-1],
        len(config.timeline_events), result.net_worth[-1],
    )
    return result
