"""
Attendance endpoints: employee check-in/out and the admin daily overview.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from emplyo.core.auth_dependency import get_auth_session, get_db, require_admin
from emplyo.core.roles import AuthSession
from emplyo.schemas.attendance import AttendanceOverviewItem, AttendanceResponse
from emplyo.services import attendance_service

router = APIRouter(prefix="/attendance", tags=["Attendance"])


@router.post("/check-in", response_model=AttendanceResponse)
def check_in(
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
):
    return AttendanceResponse.model_validate(attendance_service.check_in(db, session.user_id))


@router.post("/check-out", response_model=AttendanceResponse)
def check_out(
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
):
    return AttendanceResponse.model_validate(attendance_service.check_out(db, session.user_id))


@router.get("/today", response_model=Optional[AttendanceResponse])
def today(
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
):
    """Today's record for the caller, or null before check-in."""
    record = attendance_service.get_today(db, session.user_id)
    return AttendanceResponse.model_validate(record) if record else None


@router.get("/history", response_model=List[AttendanceResponse])
def history(
    limit: int = Query(30, ge=1, le=365),
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
):
    return [
        AttendanceResponse.model_validate(record)
        for record in attendance_service.history(db, session.user_id, limit)
    ]


@router.get("/overview", response_model=List[AttendanceOverviewItem])
def overview(
    day: Optional[date] = Query(None, description="Defaults to today (UTC)"),
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return [
        AttendanceOverviewItem(
            id=record.id,
            user_id=record.user_id,
            full_name=full_name,
            date=record.date,
            check_in=record.check_in,
            check_out=record.check_out,
            status=record.status,
        )
        for record, full_name in attendance_service.overview(db, day)
    ]
