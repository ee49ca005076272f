"""
Employee management endpoints.

Listing, creating, editing and deleting employees is admin-only; every
signed-in user can read their own profile.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from emplyo.core.auth_dependency import get_current_profile, get_db, require_admin
from emplyo.core.roles import AuthSession
from emplyo.db.models.profile import Profile
from emplyo.schemas.employee import EmployeeCreate, EmployeeUpdate, ProfileResponse
from emplyo.services import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])


@router.get("/employees", response_model=List[ProfileResponse])
def list_employees(
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """All profiles, newest first."""
    return [ProfileResponse.model_validate(p) for p in employee_service.list_employees(db)]


@router.post("/employees", status_code=status.HTTP_201_CREATED, response_model=ProfileResponse)
def create_employee(
    data: EmployeeCreate,
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    profile = employee_service.create_employee(db, data)
    logger.info(f"Employee added by admin: admin_id={admin.user_id}, user_id={profile.id}")
    return ProfileResponse.model_validate(profile)


@router.put("/employees/{employee_id}", response_model=ProfileResponse)
def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    profile = employee_service.get_employee(db, employee_id)
    return ProfileResponse.model_validate(employee_service.update_employee(db, profile, data))


@router.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: str,
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    profile = employee_service.get_employee(db, employee_id)
    employee_service.delete_employee(db, profile)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/profiles/me", response_model=ProfileResponse)
def my_profile(profile: Profile = Depends(get_current_profile)):
    return ProfileResponse.model_validate(profile)
