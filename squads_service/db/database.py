"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with a test
fallback (SQLite in-memory) and exposes the FastAPI session dependency.
"""
import logging
import os
import sys

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from squads_service.utils.settings import get_settings

logger = logging.getLogger(__name__)


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while an individual test is running,
    so module import time during collection may not see it yet. Presence of
    the pytest package in ``sys.modules`` covers collection. ``PYTEST_RUNNING=1``
    forces the test behaviour explicitly.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
        # One shared connection so the schema survives across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


# Test override strategy:
# 1. If SQUADS_TEST_DB is set, use it.
# 2. Else if running under pytest, force in-memory sqlite.
# 3. Else use the configured DATABASE_URL (default: sqlite:///squads.db).
explicit_test_db = os.getenv("SQUADS_TEST_DB")

if explicit_test_db:
    DATABASE_URL = explicit_test_db
elif _is_pytest_runtime():
    DATABASE_URL = "sqlite+pysqlite:///:memory:"
else:
    DATABASE_URL = get_settings().database_url

engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def safe_database_url() -> str:
    """Return the active database URL with any password masked."""
    return make_url(DATABASE_URL).render_as_string(hide_password=True)


def init_db() -> list:
    """Create any missing tables from the ORM metadata.

    Returns the names of tables that did not exist before the call.
    """
    from squads_service.db import models  # local import to avoid circular import at module load

    existing = set(inspect(engine).get_table_names())
    models.Base.metadata.create_all(bind=engine)
    created = [name for name in models.Base.metadata.tables if name not in existing]
    if created:
        logger.info("init_db: created tables %s on %s", ", ".join(sorted(created)), safe_database_url())
    else:
        logger.info("init_db: schema up to date on %s", safe_database_url())
    return created


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
