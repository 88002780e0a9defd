from fastapi import APIRouter

from pathfinder.services.template_service import get_template_status

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "templates": get_template_status(),
    }
