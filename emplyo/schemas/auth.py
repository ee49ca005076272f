"""
Pydantic schemas for authentication endpoints.
"""
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from emplyo.db.models.enums import Department


def _check_password_bytes(v: str) -> str:
    """bcrypt only looks at the first 72 bytes, so longer passwords are rejected."""
    password_bytes = v.encode("utf-8")
    if len(password_bytes) > 72:
        raise ValueError("Password must be 72 bytes or fewer")
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters")
    return v


class SignupRequest(BaseModel):
    """Request schema for self sign-up."""
    full_name: str = Field(..., min_length=1, max_length=200, description="User's full name")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's password (8 characters to 72 bytes)")
    department: Optional[Department] = Field(default=None, description="Department (optional)")

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        return _check_password_bytes(v)

    class Config:
        json_schema_extra = {
            "example": {
                "full_name": "John Doe",
                "email": "john.doe@example.com",
                "password": "SecurePass123",
                "department": "Engineering"
            }
        }


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class SessionResponse(BaseModel):
    """The caller's identity and roles."""
    user_id: str
    email: str
    roles: List[str]
