"""
Attendance check-in / check-out.

Per employee and UTC day the record moves through
``not checked in -> checked in -> checked out``. There is at most one
record per (user, day): an explicit state check runs before the insert and
a unique constraint backs it up.
"""
import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from emplyo.db.models.attendance import Attendance
from emplyo.db.models.profile import Profile

logger = logging.getLogger(__name__)

PRESENT = "present"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_today() -> date:
    return utc_now().date()


def get_today(db: Session, user_id: str, today: Optional[date] = None) -> Optional[Attendance]:
    today = today or utc_today()
    return db.query(Attendance).filter(
        Attendance.user_id == user_id,
        Attendance.date == today,
    ).first()


def check_in(db: Session, user_id: str, now: Optional[datetime] = None) -> Attendance:
    """
    Open today's attendance record.

    Raises:
        HTTPException: 409 if the employee already checked in today
    """
    now = now or utc_now()
    if get_today(db, user_id, now.date()) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Already checked in today")

    record = Attendance(user_id=user_id, date=now.date(), check_in=now, status=PRESENT)
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent check-in
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Already checked in today")
    db.refresh(record)

    logger.info(f"Checked in: user_id={user_id}, date={record.date}")
    return record


def check_out(db: Session, user_id: str, now: Optional[datetime] = None) -> Attendance:
    """
    Close today's record. check_in is left untouched.

    Raises:
        HTTPException: 404 without a check-in today, 409 if already closed
    """
    now = now or utc_now()
    record = get_today(db, user_id, now.date())
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No check-in found for today")
    if record.check_out is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Already checked out today")

    record.check_out = now
    db.commit()
    db.refresh(record)

    logger.info(f"Checked out: user_id={user_id}, date={record.date}")
    return record


def history(db: Session, user_id: str, limit: int = 30) -> List[Attendance]:
    return db.query(Attendance).filter(
        Attendance.user_id == user_id
    ).order_by(Attendance.date.desc()).limit(limit).all()


def overview(db: Session, day: Optional[date] = None) -> List[Tuple[Attendance, str]]:
    """Records for ``day`` with each employee's name, latest check-in first."""
    day = day or utc_today()
    return db.query(Attendance, Profile.full_name).join(
        Profile, Profile.id == Attendance.user_id
    ).filter(
        Attendance.date == day
    ).order_by(Attendance.check_in.desc()).all()


def count_present(db: Session, day: Optional[date] = None) -> int:
    day = day or utc_today()
    return db.query(func.count(Attendance.id)).filter(
        Attendance.date == day,
        Attendance.status == PRESENT,
    ).scalar() or 0


def count_since(db: Session, user_id: str, start: date) -> int:
    return db.query(func.count(Attendance.id)).filter(
        Attendance.user_id == user_id,
        Attendance.date >= start,
    ).scalar() or 0
