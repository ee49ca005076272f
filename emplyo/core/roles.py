"""
Role checks.

The authenticated caller is represented by an explicit ``AuthSession`` that
handlers receive as a dependency. Role checks are pure functions of that
session; ``user_has_role`` and ``user_is_admin`` answer the same question
straight from the store.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Union

from sqlalchemy.orm import Session

from emplyo.db.models.enums import AppRole
from emplyo.db.models.user_role import UserRole


@dataclass(frozen=True)
class AuthSession:
    """Who is calling and what they may do."""
    user_id: str
    email: str
    roles: FrozenSet[AppRole] = field(default_factory=frozenset)


def has_role(session: AuthSession, role: Union[AppRole, str]) -> bool:
    return AppRole(role) in session.roles


def is_admin(session: AuthSession) -> bool:
    return has_role(session, AppRole.ADMIN)


def load_roles(db: Session, user_id: str) -> FrozenSet[AppRole]:
    rows = db.query(UserRole.role).filter(UserRole.user_id == user_id).all()
    return frozenset(AppRole(row[0]) for row in rows)


def user_has_role(db: Session, user_id: str, role: Union[AppRole, str]) -> bool:
    return db.query(UserRole).filter(
        UserRole.user_id == user_id,
        UserRole.role == AppRole(role),
    ).first() is not None


def user_is_admin(db: Session, user_id: str) -> bool:
    return user_has_role(db, user_id, AppRole.ADMIN)


def grant_role(db: Session, user_id: str, role: Union[AppRole, str]) -> UserRole:
    """Add ``role`` to the profile unless it already holds it. Does not commit."""
    existing = db.query(UserRole).filter(
        UserRole.user_id == user_id,
        UserRole.role == AppRole(role),
    ).first()
    if existing:
        return existing
    user_role = UserRole(user_id=user_id, role=AppRole(role))
    db.add(user_role)
    return user_role
