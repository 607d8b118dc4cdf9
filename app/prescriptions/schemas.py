"""
Sample prescription schemas
"""
from pydantic import BaseModel, Field
from enum import Enum
from typing import List

class Gender(str, Enum):
    male = "Male"
    female = "Female"
    other = "Other"

class PrescriptionRequest(BaseModel):
    """Patient details for a sample prescription"""
    name: str = Field(..., description="The user's full name (at least 2 characters)")
    age: int = Field(..., ge=0, le=130, description="The user's age in years")
    gender: Gender
    symptoms: str = Field(..., description="Detailed description of the symptoms (at least 10 characters)")

class PrescribedMedicine(BaseModel):
    name: str = Field(..., description="The name of the medicine")
    dosage: str = Field(..., description='Dosage, e.g. "500mg", "10ml"')
    frequency: str = Field(..., description='How often, e.g. "Twice a day", "Before bed"')
    duration: str = Field(..., description='How long, e.g. "7 days", "As needed"')

class Prescription(BaseModel):
    """AI-generated sample prescription (not a real prescription)"""
    patient_name: str
    age: int
    gender: Gender
    date: str = Field(..., description='Generation date in "Month Day, Year" format')
    diagnosis: str
    medicines: List[PrescribedMedicine]
    precautions: List[str]
    disclaimer: str

class PrescriptionResponse(BaseModel):
    success: bool
    data: Prescription
