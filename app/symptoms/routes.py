from fastapi import APIRouter, HTTPException, status
from .schemas import SymptomAnalysisRequest, SymptomAnalysisResponse
from .utils import analyze_symptoms
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/symptoms", tags=["symptoms"])

@router.post("/analyze", response_model=SymptomAnalysisResponse)
async def analyze_symptoms_route(request: SymptomAnalysisRequest):
    """
    Analyze a patient's symptoms and return potential conditions.

    Model failures are absorbed by analyze_symptoms and answered with a fallback analysis.

    Args:
        request: SymptomAnalysisRequest with the symptom description

    Returns:
        SymptomAnalysisResponse with the structured analysis
    """
    try:
        analysis = await analyze_symptoms(request.symptoms)
        return SymptomAnalysisResponse(success=True, data=analysis)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="symptoms/routes.py - analyze_symptoms_route",
            additional_info={"symptoms_length": len(request.symptoms)}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while analyzing symptoms. Please try again later."
        )
