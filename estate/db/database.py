"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with an
in-memory SQLite fallback under pytest and exposes FastAPI dependencies.
"""
import os
import sys
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from estate.db.url import database_url_from_env

# Test override strategy:
# 1. If ESTATE_TEST_DB is set, use it.
# 2. Else if running under pytest, force in-memory sqlite.
# 3. Else build the URL from DATABASE_URL / DB_* variables.

explicit_test_db = os.getenv("ESTATE_TEST_DB")


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test is running, so module
    import during collection is detected through ``sys.modules`` instead.
    ``PYTEST_RUNNING=1`` forces the test behaviour explicitly.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    if "pytest" in sys.modules:
        return True
    return False


if explicit_test_db:
    DATABASE_URL = explicit_test_db
    _engine_kwargs = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
elif _is_pytest_runtime():
    # In-memory SQLite with StaticPool so the schema persists across connections
    DATABASE_URL = "sqlite+pysqlite:///:memory:"
    _engine_kwargs = {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool,
    }
else:
    DATABASE_URL = database_url_from_env()
    _engine_kwargs = {"pool_pre_ping": True}

engine = create_engine(DATABASE_URL, **_engine_kwargs)

# Every new connection of the in-memory database shares one StaticPool
# connection, so the schema has to exist before the first session opens.
if DATABASE_URL.startswith("sqlite") and ":memory:" in DATABASE_URL:
    from estate.db import models  # local import to avoid circular import at module load
    models.Base.metadata.create_all(bind=engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
