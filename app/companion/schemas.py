"""
Mental health companion schemas
"""
from pydantic import BaseModel, Field
from enum import Enum
from typing import List

class Mood(str, Enum):
    """Companion's assessment of the user's current mood"""
    positive = "Positive"
    negative = "Negative"
    neutral = "Neutral"
    mixed = "Mixed"

class CompanionChatRequest(BaseModel):
    """User's latest message plus recent history ("user: ..." / "companion: ...")"""
    prompt: str = Field(..., description="The user's message to the companion")
    history: List[str] = Field(default_factory=list, description="Recent conversation history, oldest first")

class CompanionChatResponse(BaseModel):
    """Companion's empathetic reply"""
    success: bool
    response: str
    mood: Mood
