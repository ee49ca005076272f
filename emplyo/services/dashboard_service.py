"""
Headline numbers for the admin and employee dashboards.
"""
from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from emplyo.db.models.profile import Profile
from emplyo.schemas.dashboard import AdminStats, EmployeeStats
from emplyo.services import attendance_service


def admin_stats(db: Session, today: Optional[date] = None) -> AdminStats:
    employees = db.query(func.count(Profile.id)).scalar() or 0
    return AdminStats(
        employees=employees,
        present_today=attendance_service.count_present(db, today),
    )


def employee_stats(db: Session, user_id: str, today: Optional[date] = None) -> EmployeeStats:
    today = today or attendance_service.utc_today()
    month_start = today.replace(day=1)
    return EmployeeStats(
        attendance_this_month=attendance_service.count_since(db, user_id, month_start),
    )
