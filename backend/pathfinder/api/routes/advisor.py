from fastapi import APIRouter, HTTPException

from pathfinder.models.advisor import AdvisorRequest, AdvisorResponse
from pathfinder.services.advisor_service import evaluate_career_paths

router = APIRouter(tags=["advisor"])


@router.post("/career-advisor/evaluate", response_model=AdvisorResponse)
def evaluate_career_paths_endpoint(request: AdvisorRequest):
    """Score at least two templates against the user's profile and recommend one."""
    try:
        return evaluate_career_paths(request)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
