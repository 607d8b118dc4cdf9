from fastapi import APIRouter, HTTPException, status
from .schemas import MedicineInfoRequest, MedicineInfoResponse
from .utils import get_medicine_info
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/medicines", tags=["medicines"])

@router.post("/info", response_model=MedicineInfoResponse)
async def medicine_info(request: MedicineInfoRequest):
    """
    Get usage, dosage, side effects and precautions for a medicine.

    Args:
        request: MedicineInfoRequest with the medicine name

    Returns:
        MedicineInfoResponse with the medicine details
    """
    try:
        info = await get_medicine_info(request.medicine_name)
        return MedicineInfoResponse(
            success=True,
            medicine_name=request.medicine_name.strip(),
            data=info
        )

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="medicines/routes.py - medicine_info",
            additional_info=request.model_dump()
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while fetching medicine information. Please try again later."
        )
