"""
Medicine information schemas
"""
from pydantic import BaseModel, Field

class MedicineInfoRequest(BaseModel):
    """Medicine lookup request"""
    medicine_name: str = Field(..., description="Name of the medicine (at least 2 characters)")

class MedicineInfo(BaseModel):
    """Medicine information sliced from the model reply"""
    usage: str = Field(..., description="What the medicine is typically used for")
    dosage: str = Field(..., description="General dosage information")
    side_effects: str = Field(..., description="Common side effects")
    precautions: str = Field(..., description="Important precautions and warnings")
    disclaimer: str = Field(..., description="Not-medical-advice disclaimer")

class MedicineInfoResponse(BaseModel):
    """Response for a medicine lookup"""
    success: bool
    medicine_name: str
    data: MedicineInfo
