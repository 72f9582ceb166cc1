# tests/conftest.py

import os

# Settings are read at import time; give the app a self-contained test setup.
os.environ.setdefault("ENV", "local")
os.environ.setdefault("DATABASE_URL_LOCAL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("ADMIN_API_KEY", "nwf_test_admin_api_key_0123456789abcdef")
os.environ.setdefault("ADMIN_EMAILS", "admin@norwedfilm.no")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy_utils import create_database, database_exists, drop_database

from norwedfilm.main import app
from norwedfilm.api import deps
from norwedfilm.db.session import get_db
from norwedfilm.models import Base
from norwedfilm.schemas.token import TokenPayload
from norwedfilm.services.query_cache import QueryCache

from tests.utils.cache import FakeRedis


# --- Test Database Setup ---
# In-memory SQLite by default; set TEST_DATABASE_URL to run against Postgres.
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")

if TEST_DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    is_server_db = not TEST_DATABASE_URL.startswith("sqlite")
    if is_server_db:
        if database_exists(engine.url):
            drop_database(engine.url)
        create_database(engine.url)
    yield
    if is_server_db:
        drop_database(engine.url)


@pytest.fixture(scope="function")
def db_session():
    # CRUD methods commit, so every test gets freshly created tables.
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def fake_redis():
    return FakeRedis()


@pytest.fixture(scope="function")
def query_cache(fake_redis):
    return QueryCache(fake_redis)


# --- Mock Dependencies Setup ---
def override_get_current_admin():
    return TokenPayload(
        sub="user_admin",
        exp=9999999999,
        email="admin@norwedfilm.no",
        first_name="Nora",
    )


# --- Test Client Fixtures ---
@pytest.fixture(scope="function")
def anon_client(db_session, query_cache):
    """
    TestClient on the test database with the real admin authentication.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_query_cache] = lambda: query_cache

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(anon_client):
    """Same as anon_client, signed in as an admin."""
    app.dependency_overrides[deps.get_current_admin] = override_get_current_admin
    yield anon_client
