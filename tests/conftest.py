"""
Shared fixtures: a throwaway SQLite file per test and an app bound to it.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from core.db import Database
from main import create_app

ENV_VARS = (
    "DATABASE_PATH",
    "CORS_ORIGINS",
    "ADMIN_USERNAME",
    "ADMIN_DEFAULT_PASSWORD",
    "ADMIN_PASSWORD_SCHEME",
    "ADMIN_TOKEN_MODE",
    "JWT_SECRET",
    "JWT_ALG",
    "ACCESS_TOKEN_EXPIRE_MIN",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def db(tmp_path) -> Database:
    database = Database(tmp_path / "salaries.sqlite")
    database.init_schema()
    return database


@pytest.fixture
def client(db):
    app = create_app(db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_payload():
    def _make(**overrides):
        payload = {
            "position": "General Dentist",
            "location": "Austin, TX",
            "company": "Bright Smiles",
            "baseSalary": 180000,
            "totalComp": 210000,
            "experience": 5,
            "selfEmployed": "no",
            "clinicalHoursPerWeek": "32-40",
            "benefits": ["Health Insurance", "Dental Insurance"],
            "additionalNotes": "Four day week.",
            "submittedAt": "2024-03-01T12:00:00.000Z",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def admin_headers(client) -> dict:
    response = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
