import os

# must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SERVICE_ROLE_KEY"] = "test-service-key"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_EMAIL"] = "admin@gmail.com"
os.environ["ADMIN_PASSWORD"] = "admin123"

import pytest
from fastapi.testclient import TestClient

from app.db.session import Base, SessionLocal, engine
from main import app

SERVICE_HEADERS = {"Authorization": "Bearer test-service-key"}


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def service_headers():
    return dict(SERVICE_HEADERS)


@pytest.fixture
def admin_headers(client):
    resp = client.post("/api/auth/admin/login", json={"email": "admin@gmail.com", "password": "admin123"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def create_property(client, service_headers):
    def _create(**fields):
        body = {"title": "Sunny Villa", "location": "Lakeview", "description": "Nice house"}
        body.update(fields)
        resp = client.post("/manage-properties", json=body, headers=service_headers)
        assert resp.status_code == 200, resp.text
        return resp.json()["property"]
    return _create
