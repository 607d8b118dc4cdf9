from fastapi import APIRouter, HTTPException, status
from .schemas import HealthAnalyticsRequest, HealthAnalyticsResponse
from .utils import run_health_analytics
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/analytics", tags=["analytics"])

@router.post("/health", response_model=HealthAnalyticsResponse)
async def health_analytics(request: HealthAnalyticsRequest):
    """
    Predictive health analytics: risk assessment, insights, recommendations and health score.

    Args:
        request: HealthAnalyticsRequest with patient data and analysis type

    Returns:
        HealthAnalyticsResponse with the analytics
    """
    try:
        analytics = await run_health_analytics(request.patient_data, request.analysis_type)
        return HealthAnalyticsResponse(success=True, data=analytics)

    except Exception as e:
        await log_error(
            error=e,
            location="analytics/routes.py - health_analytics",
            additional_info={"analysis_type": request.analysis_type}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to complete health analysis. Please try again later."
        )
