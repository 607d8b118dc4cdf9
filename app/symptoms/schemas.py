"""
Symptom analyzer schemas
"""
from pydantic import BaseModel, Field
from enum import Enum
from typing import List

class Severity(str, Enum):
    """Severity of a potential condition"""
    mild = "Mild"
    moderate = "Moderate"
    severe = "Severe"
    critical = "Critical"

class Urgency(str, Enum):
    """Overall urgency of the reported symptoms"""
    low = "Low"
    medium = "Medium"
    high = "High"
    immediate = "Immediate"

class SymptomAnalysisRequest(BaseModel):
    """Free-text symptom description from the patient"""
    symptoms: str = Field(..., description="Description of the symptoms (at least 10 characters)")

class PotentialCondition(BaseModel):
    """One potential condition sliced from the model reply"""
    condition: str
    description: str
    severity: Severity = Severity.moderate
    confidence: float = Field(..., ge=0, le=1, description="Model confidence between 0 and 1")
    next_steps: str

class SymptomAnalysis(BaseModel):
    """Structured symptom analysis"""
    analysis: List[PotentialCondition]
    urgency: Urgency
    risk_factors: List[str]
    recommendations: List[str]

class SymptomAnalysisResponse(BaseModel):
    """Response for the symptom analyzer"""
    success: bool
    data: SymptomAnalysis
