"""Tests for health domain router."""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlmodel import Session

from equinox.db.engine import get_session
from equinox.main import app
from equinox.user.models import User


def test_health_endpoint_database_healthy(session: Session):
    """Test GET /health returns ok status and counts users when database is healthy."""
    app.dependency_overrides[get_session] = lambda: session

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/health")

    app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "database": "ok",
        "user_count": 0,
        "env": "test",
    }


def test_health_endpoint_counts_users(client: TestClient, admin_user: User, viewer_user: User):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["user_count"] == 2


def test_health_endpoint_database_unhealthy():
    """Test GET /health returns 503 when database is unreachable."""
    mock_session = MagicMock(spec=Session)
    mock_session.exec.side_effect = Exception("Connection refused")

    app.dependency_overrides[get_session] = lambda: mock_session

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/health")

    app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "database": "error"}
