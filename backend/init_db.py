from sqlalchemy import inspect
import logging

from database import engine as default_engine, Base
import models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


def init_database(engine=None):
    """
    Create any missing tables.

    Safe to run on every startup; existing tables are left untouched.
    """
    engine = engine or default_engine
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(engine)
    created = set(inspect(engine).get_table_names()) - existing
    if created:
        logger.info(f"Created tables: {', '.join(sorted(created))}")
    else:
        logger.info("Database schema up to date")
    return engine
