from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from emplyo.core.auth_dependency import get_auth_session, get_db, require_admin
from emplyo.core.roles import AuthSession
from emplyo.schemas.dashboard import AdminStats, EmployeeStats
from emplyo.services import dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/admin", response_model=AdminStats)
def admin_dashboard(
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return dashboard_service.admin_stats(db)


@router.get("/employee", response_model=EmployeeStats)
def employee_dashboard(
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
):
    return dashboard_service.employee_stats(db, session.user_id)
