# File: app/db/init_db.py

"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

from sqlalchemy.engine import Engine

from app.core.logging import get_logger
from app.db.session import engine as default_engine
from app.models.base import Base
from app.models import user  # noqa: F401

logger = get_logger(__name__)


def init_db(engine: Engine | None = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    bind = engine or default_engine
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ensured on %s", bind.url.render_as_string(hide_password=True))
