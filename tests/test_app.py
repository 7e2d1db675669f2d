import pytest
from fastapi import status
from fastapi.testclient import TestClient

from app.core.limiter import limiter
from app.main import app
from app.services.company_service import CompanyService


def test_not_found_route(client):
    response = client.get("/no-such-path")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": {"message": "Not Found", "status": 404}}


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


def test_request_id_is_generated(client):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]
    assert "X-Process-Time" in response.headers


def test_validation_errors_name_the_field(client, seed, admin_headers):
    response = client.post("/companies", json={"handle": "x", "name": "X"}, headers=admin_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()["error"]
    assert body["status"] == 400
    assert any(msg.startswith("description:") for msg in body["message"])


def test_unhandled_error_is_500(db_session, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("database on fire")

    monkeypatch.setattr(CompanyService, "find_all", staticmethod(boom))
    with TestClient(app, raise_server_exceptions=False) as c:
        response = c.get("/companies", headers={"X-Request-ID": "failing-request"})
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {
        "error": {"message": "An unexpected server error occurred.", "status": 500}
    }
    assert response.headers["X-Request-ID"] == "failing-request"
    assert "X-Process-Time" in response.headers


@pytest.fixture
def login_limit_on():
    limiter.reset()
    limiter.enabled = True
    yield
    limiter.enabled = False
    limiter.reset()


def test_login_rate_limited(client, seed, login_limit_on):
    credentials = {"username": "u1", "password": "wrong-password"}
    for _ in range(10):
        assert client.post("/auth/token", json=credentials).status_code == status.HTTP_401_UNAUTHORIZED

    response = client.post("/auth/token", json=credentials)
    assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
    assert response.json() == {
        "error": {"message": "Rate limit exceeded: 10 per 1 minute", "status": 429}
    }
