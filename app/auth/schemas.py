"""
Mock account schemas
"""
from pydantic import BaseModel, Field
from typing import Optional

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

class RegisterRequest(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN, description="Account email, unique")
    password: str = Field(..., min_length=6, description="Plain password, stored as a bcrypt hash")
    name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)

class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class UserDB(BaseModel):
    """Stored user record"""
    user_id: str
    email: str
    password_hash: str
    name: str
    phone: Optional[str] = None

class UserPublic(BaseModel):
    """User details safe to return to the client (no password)"""
    user_id: str
    email: str
    name: str
    phone: Optional[str] = None

class AuthResponse(BaseModel):
    success: bool
    user: UserPublic
    token: str
