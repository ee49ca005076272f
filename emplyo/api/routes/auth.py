from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from emplyo.core.auth_dependency import get_auth_session, get_db
from emplyo.core.roles import AuthSession
from emplyo.core.security import create_access_token, verify_password
from emplyo.db.models.profile import Profile
from emplyo.schemas.auth import SessionResponse, SignupRequest, TokenResponse
from emplyo.schemas.employee import EmployeeCreate, ProfileResponse
from emplyo.services import employee_service

router = APIRouter(prefix="/auth", tags=["Auth"])


# ✅ SELF SIGN-UP (always an employee)
@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=ProfileResponse)
def signup(request: SignupRequest, db: Session = Depends(get_db)):
    profile = employee_service.create_employee(
        db,
        EmployeeCreate(
            email=request.email,
            password=request.password,
            full_name=request.full_name,
            department=request.department,
        ),
    )
    return ProfileResponse.model_validate(profile)


# ✅ OAUTH2 PASSWORD LOGIN (username carries the email)
@router.post("/login", response_model=TokenResponse)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    profile = db.query(Profile).filter(Profile.email == form_data.username.lower()).first()

    if not profile or not verify_password(form_data.password, profile.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return TokenResponse(access_token=create_access_token({"sub": profile.id}))


@router.get("/me", response_model=SessionResponse)
def me(session: AuthSession = Depends(get_auth_session)):
    return SessionResponse(
        user_id=session.user_id,
        email=session.email,
        roles=sorted(role.value for role in session.roles),
    )
