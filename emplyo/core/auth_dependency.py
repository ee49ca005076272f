from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from emplyo.core.roles import AuthSession, is_admin, load_roles
from emplyo.core.security import decode_access_token
from emplyo.db.session import SessionLocal
from emplyo.db.models.profile import Profile

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_auth_session(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> AuthSession:
    """Build the caller's AuthSession from the bearer token."""
    user_id = decode_access_token(token)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    profile = db.query(Profile).filter(Profile.id == user_id).first()
    if not profile:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    return AuthSession(
        user_id=profile.id,
        email=profile.email,
        roles=load_roles(db, profile.id),
    )


def require_admin(session: AuthSession = Depends(get_auth_session)) -> AuthSession:
    """Allow only administrators through."""
    if not is_admin(session):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return session


def get_current_profile(
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
) -> Profile:
    profile = db.query(Profile).filter(Profile.id == session.user_id).first()
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return profile
