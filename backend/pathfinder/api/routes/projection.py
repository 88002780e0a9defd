from fastapi import APIRouter

from pathfinder.models.finance import ProjectionConfig, ProjectionResult
from pathfinder.services.projection_service import run_timeline_projection

router = APIRouter(tags=["projection"])


@router.post("/projection/run", response_model=ProjectionResult)
def run_projection_endpoint(config: ProjectionConfig):
    """Run a multi-year projection from an inline starting state and events.

    Horizons beyond 100 years are capped silently.
    """
    return run_timeline_projection(config)
