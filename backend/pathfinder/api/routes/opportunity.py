from fastapi import APIRouter, HTTPException

from pathfinder.models.career import CareerCompareRequest, CareerCompareResponse
from pathfinder.models.path import ComparisonRequest, PathComparison, PathTemplate
from pathfinder.services.comparison_service import compare_career_paths, compare_selected_paths
from pathfinder.services.template_service import get_template, list_templates

router = APIRouter(tags=["opportunity"])


@router.get("/opportunity/templates", response_model=list[PathTemplate])
def get_templates():
    return list_templates()


@router.get("/opportunity/templates/{key}", response_model=PathTemplate)
def get_single_template(key: str):
    template = get_template(key)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Template {key} not found")
    return template


@router.post("/opportunity/compare", response_model=PathComparison)
def compare_paths_endpoint(request: ComparisonRequest):
    """Compare selected templates; break-even uses the first two in request order."""
    try:
        return compare_selected_paths(request)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/career-paths/compare", response_model=CareerCompareResponse)
def compare_career_paths_endpoint(request: CareerCompareRequest):
    try:
        return compare_career_paths(request)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
