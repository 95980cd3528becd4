"""Test configuration and fixtures for the catalog API."""

import os

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.api.dependencies.db import get_session
from catalog.db import models  # noqa: F401
from catalog.db.base import Base
from catalog.main import app


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory database shared by every connection of one test."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(name="client")
def client_fixture(engine):
    """Create a test client whose requests use the in-memory database."""
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_session():
        db = TestingSession()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="product")
def product_fixture(client):
    response = client.post("/products", json={"sku": "TSHIRT-1", "name": "T-Shirt"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture(name="category")
def category_fixture(client):
    response = client.post("/categories", json={"name": "Apparel"})
    assert response.status_code == 201
    return response.json()
