import os

# Must be set before the app (and its cached settings) is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RUN_MIGRATIONS", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from inventory_system.main import app
from inventory_system.infrastructure.db import engine, SessionLocal
from inventory_system.domain.models import Base

@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def customer(client):
    resp = client.post('/customers', json={'name': 'Ada Lovelace'})
    assert resp.status_code == 200
    return resp.json()

@pytest.fixture
def item(client):
    resp = client.post('/inventory', json={'name': 'Widget', 'quantity': 10})
    assert resp.status_code == 200
    return resp.json()
