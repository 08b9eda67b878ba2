"""
Shared fixtures: in-memory database and an authenticated test client.
"""
import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker
from hikingbuddy.db.base import Base
from hikingbuddy.db.session import get_db
from hikingbuddy.main import app
import hikingbuddy.models  # noqa: F401

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, username="hiker", email="hiker@example.com", password="trailmix123"):
    return client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password}
    )


@pytest.fixture
def auth_headers(client):
    token = register(client).json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(client):
    token = register(client, username="other", email="other@example.com").json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def hike(client, auth_headers):
    response = client.post(
        "/api/hikes",
        json={
            "name": "West Highland Way",
            "totalDistance": 100,
            "preHikeBudget": 50,
            "onTrailBudget": 200
        },
        headers=auth_headers
    )
    assert response.status_code == 201
    return response.json()


def entry_payload(**overrides):
    payload = {
        "date": "2024-06-01",
        "kmTravelled": 20,
        "rpe": 6,
        "mood": 7,
        "sleepQuality": 5,
        "overallFeeling": 8,
        "caloriesSpent": 3200,
        "weatherTemp": "Mild",
        "weatherType": "Cloudy",
        "notes": "Loch Lomond side",
        "expenses": [
            {"category": "Food", "amount": 30},
            {"category": "Pre-Hike", "amount": 10}
        ]
    }
    payload.update(overrides)
    return payload
