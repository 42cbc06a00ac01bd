#!/usr/bin/env python
"""
ABOUTME: Shared pytest fixtures for the Newsboard API test suite
ABOUTME: Provides a PostgreSQL handle reseeded per test, Flask app/client fixtures and storage doubles
"""

import os
from contextlib import contextmanager

import psycopg
import pytest

# Must be set before the connection string is resolved so the test database is used
os.environ.setdefault("FLASK_ENV", "testing")

from core.postgres_database import PostgresDatabase, get_postgres_connection_string  # noqa: E402
from core.seed import seed  # noqa: E402
from core.seed_data import SAMPLE_DATA  # noqa: E402
from news_server import create_app  # noqa: E402

TEST_APP_CONFIG = {"TESTING": True, "RATELIMIT_ENABLED": False}


@pytest.fixture(scope="session")
def postgres_connection_string():
    """Get PostgreSQL connection string for tests"""
    return get_postgres_connection_string()


@pytest.fixture(scope="module")
def postgres_db(postgres_connection_string):
    """PostgreSQL database for testing (module-scoped, pool closed on teardown)"""
    db = PostgresDatabase(postgres_connection_string, pool_size=4, connection_timeout=5.0, skip_schema_setup=True)
    try:
        if not db.health_check():
            pytest.skip("PostgreSQL not available")
        yield db
    finally:
        db.cleanup()


@pytest.fixture(scope="function")
def seeded_db(postgres_db):
    """Fresh copy of the sample dataset before each test"""
    seed(postgres_db, SAMPLE_DATA, quiet=True)
    yield postgres_db


@pytest.fixture(scope="module")
def flask_app(postgres_db):
    """Flask app bound to the test database"""
    return create_app(postgres_db, TEST_APP_CONFIG)


@pytest.fixture(scope="function")
def api_client(flask_app, seeded_db):
    """Flask test client against a freshly seeded database"""
    with flask_app.test_client() as client:
        yield client


@pytest.fixture
def query_rows(seeded_db):
    """Run a read query directly against storage (bypassing the API)"""

    def run(query: str, params: tuple = ()) -> list[dict]:
        with seeded_db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(query, params)
                return cur.fetchall()

    return run


# ============================================================================
# STORAGE DOUBLES (no PostgreSQL required)
# ============================================================================


class UntouchablePool:
    """Pool that fails the test if any query is attempted."""

    @contextmanager
    def get_connection(self):
        raise AssertionError("storage must not be touched for this request")
        yield


class BrokenPool:
    """Pool whose connections always fail like an unreachable server."""

    @contextmanager
    def get_connection(self):
        raise psycopg.OperationalError("connection to server at 10.0.0.1 failed: secret detail")
        yield


class FakeDatabase:
    def __init__(self, pool, healthy: bool = False):
        self.pool = pool
        self.healthy = healthy

    def health_check(self) -> bool:
        return self.healthy


@pytest.fixture
def untouchable_db():
    return FakeDatabase(UntouchablePool())


@pytest.fixture
def broken_db():
    return FakeDatabase(BrokenPool())


@pytest.fixture
def offline_client(untouchable_db):
    """Client whose storage must never be reached (validation-only requests)"""
    app = create_app(untouchable_db, TEST_APP_CONFIG)
    with app.test_client() as client:
        yield client


@pytest.fixture
def broken_client(broken_db):
    """Client whose storage always fails"""
    app = create_app(broken_db, TEST_APP_CONFIG)
    with app.test_client() as client:
        yield client
