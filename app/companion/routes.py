from fastapi import APIRouter, HTTPException, status
from .schemas import CompanionChatRequest, CompanionChatResponse
from .utils import talk_to_companion
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/companion", tags=["companion"])

@router.post("/chat", response_model=CompanionChatResponse)
async def companion_chat(request: CompanionChatRequest):
    """
    Talk to the mental health companion.

    Args:
        request: CompanionChatRequest with the latest message and recent history

    Returns:
        CompanionChatResponse with the reply and mood assessment
    """
    try:
        reply, mood = await talk_to_companion(request.prompt, request.history)
        return CompanionChatResponse(success=True, response=reply, mood=mood)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="companion/routes.py - companion_chat",
            additional_info={"history_length": len(request.history)}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get a response from the companion. Please try again later."
        )
