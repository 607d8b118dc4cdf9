from fastapi import APIRouter, HTTPException, UploadFile, File, status
from .schemas import SkinLesionAnalysisRequest, SkinLesionAnalysisResponse
from .utils import analyze_skin_lesion, image_bytes_to_data_uri
from app.core.config import settings
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/skin", tags=["skin"])

ANALYSIS_FAILED = "An unexpected error occurred while analyzing the image. Please try again later."

@router.post("/analyze", response_model=SkinLesionAnalysisResponse)
async def analyze_skin_lesion_route(request: SkinLesionAnalysisRequest):
    """
    Preliminary analysis of a skin lesion photo sent as a data URI.

    Args:
        request: SkinLesionAnalysisRequest with the photo data URI

    Returns:
        SkinLesionAnalysisResponse with condition, description and next steps
    """
    try:
        analysis = await analyze_skin_lesion(request.photo_data_uri)
        return SkinLesionAnalysisResponse(success=True, data=analysis)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="skin/routes.py - analyze_skin_lesion_route",
            additional_info={"data_uri_length": len(request.photo_data_uri)}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ANALYSIS_FAILED
        )

@router.post("/analyze/upload", response_model=SkinLesionAnalysisResponse)
async def analyze_skin_lesion_upload(file: UploadFile = File(...)):
    """
    Preliminary analysis of an uploaded skin lesion photo (multipart form).

    Args:
        file: Image file

    Returns:
        SkinLesionAnalysisResponse with condition, description and next steps
    """
    try:
        # Reads at most one byte past the limit
        content = await file.read(settings.MAX_IMAGE_BYTES + 1)
        data_uri = image_bytes_to_data_uri(content, file.content_type or "")
        analysis = await analyze_skin_lesion(data_uri)
        return SkinLesionAnalysisResponse(success=True, data=analysis)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="skin/routes.py - analyze_skin_lesion_upload",
            additional_info={
                "filename": file.filename,
                "content_type": file.content_type
            }
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ANALYSIS_FAILED
        )
