from fastapi import APIRouter, HTTPException, status
from .schemas import DoctorChatRequest, DoctorChatResponse
from .utils import talk_to_doctor
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/doctor", tags=["doctor"])

@router.post("/chat", response_model=DoctorChatResponse)
async def doctor_chat(request: DoctorChatRequest):
    """
    Talk to the AI doctor.

    Args:
        request: DoctorChatRequest with the user's message

    Returns:
        DoctorChatResponse with the doctor's reply
    """
    try:
        reply = await talk_to_doctor(request.prompt)
        return DoctorChatResponse(success=True, response=reply)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="doctor/routes.py - doctor_chat",
            additional_info={"prompt_length": len(request.prompt)}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="The AI doctor is unavailable right now. Please try again later."
        )
