from pydantic import BaseModel, Field

class SkinLesionAnalysisRequest(BaseModel):
    """Skin lesion photo as a base64 data URI"""
    photo_data_uri: str = Field(
        ...,
        description="Photo of a skin lesion. Expected format: 'data:<mimetype>;base64,<encoded_data>'"
    )

class SkinLesionAnalysis(BaseModel):
    """Preliminary (non-diagnostic) skin lesion assessment"""
    potential_condition: str = Field(..., description="Most likely potential condition")
    description: str = Field(..., description="Short description including an urgency assessment")
    next_steps: str = Field(..., description="Recommended next steps for the user")

class SkinLesionAnalysisResponse(BaseModel):
    success: bool
    data: SkinLesionAnalysis
