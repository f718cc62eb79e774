import pytest
from fastapi.testclient import TestClient

from common.database import ConnectionCheckResult
from main import create_app
from settings.config import get_settings


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
    assert res.headers["Cache-Control"] == "no-store"


def test_strength_endpoint(client):
    res = client.post("/api/password/strength", json={"password": "Abc12345"})
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Success"
    assert body["data"] == {
        "score": 3,
        "label": "강함",
        "color": "#22c55e",
        "suggestions": ["특수문자를 포함하세요"],
    }


def test_strength_endpoint_accepts_empty(client):
    res = client.post("/api/password/strength", json={"password": ""})
    assert res.status_code == 200
    assert res.json()["data"]["score"] == 0
    assert len(res.json()["data"]["suggestions"]) == 4


def test_strength_endpoint_rejects_oversized_body(client):
    res = client.post("/api/password/strength", json={"password": "a" * 2000})
    assert res.status_code == 422


def test_strength_endpoint_requires_password(client):
    res = client.post("/api/password/strength", json={})
    assert res.status_code == 422


def test_validate_endpoint_valid(client):
    res = client.post(
        "/api/password/validate",
        json={"password": "Abc123!@", "confirm_password": "Abc123!@"},
    )
    assert res.status_code == 200
    assert res.json()["data"] == {"is_valid": True, "errors": [], "score": 4}


def test_validate_endpoint_reports_errors(client):
    res = client.post("/api/password/validate", json={"password": "abcdefgh"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["is_valid"] is False
    assert data["score"] == 2
    assert data["errors"] == [
        "비밀번호는 숫자를 포함해야 합니다.",
        "비밀번호는 특수문자를 포함해야 합니다.",
    ]


def test_validate_endpoint_mismatch(client):
    res = client.post(
        "/api/password/validate",
        json={"password": "Abc123!@", "confirm_password": "Abc123!#"},
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Password and confirmation do not match."


def test_health_db_ok(client):
    res = client.get("/health/db")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["server_time"]


def test_health_db_unavailable(client, monkeypatch):
    async def _failing_check():
        return ConnectionCheckResult(ok=False, error="connection refused")

    monkeypatch.setattr("apps.health.router.check_database_connection", _failing_check)
    res = client.get("/health/db")
    assert res.status_code == 503
    assert res.json() == {"message": "Database connection failed", "details": "connection refused"}


@pytest.fixture
def unreachable_db(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:////nonexistent-dir/nested/check.db")
    get_settings.cache_clear()
    yield
    monkeypatch.undo()
    get_settings.cache_clear()


def test_health_db_unreachable_database(unreachable_db, client):
    res = client.get("/health/db")
    assert res.status_code == 503
    body = res.json()
    assert body["message"] == "Database connection failed"
    assert body["details"]
