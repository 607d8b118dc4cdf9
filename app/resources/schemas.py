from pydantic import BaseModel
from typing import List

class HealthResource(BaseModel):
    """Trusted external health information site"""
    title: str
    description: str
    link: str

class HealthResourcesResponse(BaseModel):
    success: bool
    resources: List[HealthResource]
