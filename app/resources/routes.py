from fastapi import APIRouter
from .schemas import HealthResourcesResponse
from .utils import list_health_resources

router = APIRouter(prefix="/v1/resources", tags=["resources"])

@router.get("", response_model=HealthResourcesResponse)
async def get_health_resources():
    """Curated list of trusted health information sites"""
    return HealthResourcesResponse(success=True, resources=list_health_resources())
