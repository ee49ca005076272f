"""
Employee (profile) management.
"""
import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from emplyo.core.roles import grant_role
from emplyo.core.security import hash_password
from emplyo.db.models.enums import AppRole
from emplyo.db.models.profile import Profile
from emplyo.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)


def create_employee(db: Session, data: EmployeeCreate, role: AppRole = AppRole.EMPLOYEE) -> Profile:
    """
    Sign up a profile and grant it ``role``.

    Raises:
        HTTPException: 409 if the email is already registered
    """
    email = data.email.lower()
    if db.query(Profile).filter(Profile.email == email).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    profile = Profile(
        full_name=data.full_name,
        email=email,
        password_hash=hash_password(data.password),
        department=data.department,
        salary=data.salary,
    )
    db.add(profile)
    try:
        db.flush()
        grant_role(db, profile.id, role)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Profile insert rejected: {e.orig}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    db.refresh(profile)

    logger.info(f"Profile created: user_id={profile.id}, role={role.value}")
    return profile


def list_employees(db: Session) -> List[Profile]:
    return db.query(Profile).order_by(Profile.created_at.desc(), Profile.id).all()


def get_employee(db: Session, employee_id: str) -> Profile:
    profile = db.query(Profile).filter(Profile.id == employee_id).first()
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return profile


def update_employee(db: Session, profile: Profile, data: EmployeeUpdate) -> Profile:
    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "full_name" and value is None:
            continue
        setattr(profile, field, value)
    db.commit()
    db.refresh(profile)
    logger.info(f"Profile updated: user_id={profile.id}")
    return profile


def delete_employee(db: Session, profile: Profile) -> None:
    """Delete the profile along with its roles, attendance and enrollments."""
    profile_id = profile.id
    db.delete(profile)
    db.commit()
    logger.info(f"Profile deleted: user_id={profile_id}")
