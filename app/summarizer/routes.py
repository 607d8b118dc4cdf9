from fastapi import APIRouter, HTTPException, status
from .schemas import TopicSummaryRequest, TopicSummaryResponse
from .utils import summarize_topic
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/summaries", tags=["summaries"])

@router.post("/topic", response_model=TopicSummaryResponse)
async def summarize_topic_route(request: TopicSummaryRequest):
    """
    Summarize a medical topic and list source links.

    Args:
        request: TopicSummaryRequest with the topic

    Returns:
        TopicSummaryResponse with summary and source links
    """
    try:
        summary = await summarize_topic(request.topic)
        return TopicSummaryResponse(success=True, topic=request.topic.strip(), data=summary)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="summarizer/routes.py - summarize_topic_route",
            additional_info=request.model_dump()
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while summarizing the topic. Please try again later."
        )
