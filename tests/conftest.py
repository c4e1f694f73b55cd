import pytest
from fastapi.testclient import TestClient

from product_api.db.base import SessionLocal
from product_api.db.init_db import reset_db
from product_api.main import app


@pytest.fixture(autouse=True)
def clean_db():
    """Recreate the products table so every test starts from id 1."""
    reset_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)
