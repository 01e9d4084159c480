# tests/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from tagcontent.common.settings import get_settings
from tagcontent.database.models import Base  # <-- imports the models/metadata


def _sqlite_engine() -> Engine:
    # one shared in-memory database for the whole session
    return create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture(scope="session")
def db_engine() -> Engine:
    """
    In-memory SQLite by default; a throwaway Postgres container when
    USE_TESTCONTAINERS=1.
    """
    cfg = get_settings()
    if cfg.use_testcontainers:
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer(cfg.test_db_image) as pg:
            # Force psycopg (v3) driver in the URL returned by testcontainers
            url = pg.get_connection_url().replace("psycopg2", "psycopg")
            engine = create_engine(url, future=True)
            Base.metadata.create_all(bind=engine)
            try:
                yield engine
            finally:
                Base.metadata.drop_all(bind=engine)
                engine.dispose()
        return

    engine = _sqlite_engine()
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
