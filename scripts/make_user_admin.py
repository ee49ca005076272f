"""
Script to grant the admin role to an existing profile.
Run: python -m scripts.make_user_admin someone@example.com
"""
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from emplyo.core.roles import grant_role, user_is_admin
from emplyo.db.models import AppRole, Profile
from emplyo.db.session import SessionLocal
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def make_user_admin(email: str) -> bool:
    """Grant the admin role to the profile registered under ``email``."""
    db = SessionLocal()
    try:
        profile = db.query(Profile).filter(Profile.email == email.lower()).first()
        if not profile:
            logger.error(f"User {email} not found. Sign up first, then run this script.")
            return False

        if user_is_admin(db, profile.id):
            logger.info(f"User {email} is already an admin")
            return True

        grant_role(db, profile.id, AppRole.ADMIN)
        db.commit()
        logger.info(f"Granted admin role to {email} (ID: {profile.id})")
        return True
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python -m scripts.make_user_admin <email>")
        sys.exit(2)

    email = sys.argv[1]
    if make_user_admin(email):
        print(f"\n[SUCCESS] User {email} is now an admin")
    else:
        print(f"\n[ERROR] Failed to make {email} an admin")
        sys.exit(1)
