"""Pytest configuration and fixtures."""

import os

import pytest

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/catalog", "/catalog_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

# The app engine reads its URL from settings at import time
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

from fastapi.testclient import TestClient  # noqa: E402

from catalog.client import CatalogClient  # noqa: E402
from catalog.database import (  # noqa: E402
    Base,
    get_db,
    init_db,
    make_engine,
    make_session_factory,
)
from catalog.main import app  # noqa: E402

engine = make_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = make_session_factory(engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    init_db(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def api(client):
    """Catalog client driven through the test client's transport."""
    return CatalogClient(http_client=client)


@pytest.fixture
def category(client):
    """Create a category and return its JSON body."""
    response = client.post(
        "/category",
        json={"name": "Electronics", "description": "Devices and accessories"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product(client, category):
    """Create a product in the ``category`` fixture and return its JSON body."""
    response = client.post(
        "/product",
        json={
            "name": "Phone",
            "description": "A smart phone",
            "price": 499.99,
            "quantity": 5,
            "categoryId": category["_id"],
        },
    )
    assert response.status_code == 201
    return response.json()
