import os

# Must be set before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("STRICT_CONTENT_DECODING", "false")

import pytest
from fastapi.testclient import TestClient

from app.db.database import Base, SessionLocal, engine, init_db
from app.db.seed import seed_demo_user
from app.main import app


@pytest.fixture
def db_session():
    init_db()
    session = SessionLocal()
    seed_demo_user(session)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def demo_user(db_session):
    return seed_demo_user(db_session)


@pytest.fixture
def client(db_session):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_plan(client):
    def _create(**overrides):
        payload = {"name": "Bakery Launch", "template": "standard", "status": "draft"}
        payload.update(overrides)
        response = client.post("/api/business-plans", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
