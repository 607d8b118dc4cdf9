from fastapi import APIRouter, HTTPException, status
from .schemas import PrescriptionRequest, PrescriptionResponse
from .utils import generate_prescription
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/prescriptions", tags=["prescriptions"])

@router.post("/generate", response_model=PrescriptionResponse)
async def generate_prescription_route(request: PrescriptionRequest):
    """
    Generate an AI sample prescription (not a real prescription).

    Args:
        request: PrescriptionRequest with name, age, gender and symptoms

    Returns:
        PrescriptionResponse with diagnosis, medicines, precautions and disclaimer
    """
    try:
        prescription = await generate_prescription(request)
        return PrescriptionResponse(success=True, data=prescription)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        # Patient name is left out of the error log
        await log_error(
            error=e,
            location="prescriptions/routes.py - generate_prescription_route",
            additional_info={"age": request.age, "gender": request.gender.value}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while generating the prescription. Please try again later."
        )
