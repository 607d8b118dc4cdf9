"""
Predictive health analytics schemas
"""
from pydantic import BaseModel, Field
from enum import Enum
from typing import Optional, List, Dict, Any

class RiskLevel(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"

class Demographics(BaseModel):
    age: Optional[int] = Field(default=None, ge=0, le=130)
    gender: Optional[str] = None
    height: Optional[float] = Field(default=None, gt=0, description="Height in cm")
    weight: Optional[float] = Field(default=None, gt=0, description="Weight in kg")
    ethnicity: Optional[str] = None

class Vitals(BaseModel):
    blood_pressure: Optional[str] = Field(default=None, description="e.g. 120/80")
    heart_rate: Optional[float] = None
    temperature: Optional[float] = Field(default=None, description="Body temperature in °C")
    oxygen_saturation: Optional[float] = None
    bmi: Optional[float] = None

class LabResults(BaseModel):
    blood_sugar: Optional[float] = Field(default=None, description="mg/dL")
    cholesterol: Optional[Dict[str, Any]] = None
    kidney_function: Optional[Dict[str, Any]] = None
    liver_function: Optional[Dict[str, Any]] = None

class Lifestyle(BaseModel):
    smoking: bool = False
    alcohol: Optional[str] = None
    exercise: Optional[str] = None
    diet: Optional[str] = None
    sleep: Optional[float] = Field(default=None, description="Hours per night")

class MedicalHistory(BaseModel):
    conditions: List[str] = Field(default_factory=list)
    medications: List[str] = Field(default_factory=list)
    surgeries: List[str] = Field(default_factory=list)
    family_history: List[str] = Field(default_factory=list)

class PatientData(BaseModel):
    demographics: Demographics = Field(default_factory=Demographics)
    vitals: Vitals = Field(default_factory=Vitals)
    lab_results: LabResults = Field(default_factory=LabResults)
    lifestyle: Lifestyle = Field(default_factory=Lifestyle)
    medical_history: MedicalHistory = Field(default_factory=MedicalHistory)

class HealthAnalyticsRequest(BaseModel):
    patient_data: PatientData
    analysis_type: str = Field(default="comprehensive", min_length=1)

class RiskAssessment(BaseModel):
    overall_risk: RiskLevel
    risk_score: int = Field(..., ge=0, le=100)
    risk_factors: List[str]
    protective_factors: List[str]

class PredictiveInsights(BaseModel):
    short_term: List[str]
    long_term: List[str]
    trends: List[str]

class HealthRecommendations(BaseModel):
    immediate: List[str]
    lifestyle: List[str]
    screening: List[str]
    monitoring: List[str]

class HealthScore(BaseModel):
    current: int = Field(..., ge=0, le=100)
    projected: int = Field(..., ge=0, le=100)
    components: Dict[str, int]

class HealthAnalytics(BaseModel):
    bmi: Optional[float] = None
    risk_assessment: RiskAssessment
    predictive_insights: PredictiveInsights
    recommendations: HealthRecommendations
    health_score: HealthScore

class HealthAnalyticsResponse(BaseModel):
    success: bool
    data: HealthAnalytics
