from pydantic import BaseModel, Field
from typing import List

class TopicSummaryRequest(BaseModel):
    topic: str = Field(..., description="The medical topic to summarize (at least 3 characters)")

class TopicSummary(BaseModel):
    summary: str = Field(..., description="A concise summary of the medical topic")
    source_links: List[str] = Field(..., description="Links to source documents")

class TopicSummaryResponse(BaseModel):
    success: bool
    topic: str
    data: TopicSummary
