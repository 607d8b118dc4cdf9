from pydantic import BaseModel, Field

class DoctorChatRequest(BaseModel):
    """User's question or statement to the AI doctor"""
    prompt: str = Field(..., description="The user's message to the doctor")

class DoctorChatResponse(BaseModel):
    """AI doctor's text reply"""
    success: bool
    response: str = Field(..., description="The doctor's text response")
