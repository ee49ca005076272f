import logging

from emplyo.db.session import engine
from emplyo.db.base import Base
import emplyo.db.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db():
    """Create all tables that do not exist yet (local development only)."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured")
