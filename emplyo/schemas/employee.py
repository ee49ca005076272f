"""
Pydantic schemas for employee profiles.
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator

from emplyo.db.models.enums import Department
from emplyo.schemas.auth import _check_password_bytes


class EmployeeCreate(BaseModel):
    """Admin-side sign-up of a new employee."""
    email: EmailStr
    password: str
    full_name: str = Field(..., min_length=1, max_length=200)
    department: Optional[Department] = None
    salary: Optional[float] = Field(None, ge=0)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        return _check_password_bytes(v)


class EmployeeUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    department: Optional[Department] = None
    salary: Optional[float] = Field(None, ge=0)


class ProfileResponse(BaseModel):
    id: str
    full_name: str
    email: str
    department: Optional[Department] = None
    salary: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
