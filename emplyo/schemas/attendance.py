"""
Pydantic schemas for attendance endpoints.
"""
from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel


class AttendanceResponse(BaseModel):
    id: str
    user_id: str
    date: date
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    status: Optional[str] = None

    class Config:
        from_attributes = True


class AttendanceOverviewItem(BaseModel):
    """A day's attendance row with the employee's name, for admins."""
    id: str
    user_id: str
    full_name: str
    date: date
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    status: Optional[str] = None
