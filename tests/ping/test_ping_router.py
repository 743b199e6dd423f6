"""Tests for the ping router."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from equinox.main import app
from equinox.ping.router import PING_MESSAGE, MonotonicClock


@pytest.fixture(name="ping_client")
def ping_client_fixture():
    return TestClient(app)


def _parse(timestamp: str) -> datetime:
    return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))


@pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
@pytest.mark.parametrize(
    "target",
    [
        "/ping",
        "/ping/",
        "/ping/api/anything",
        "/ping/a/b?x=1&y=two",
        "/ping/a%20b",
        "/ping/a%3Fb?x=1",
        "/ping/caf%C3%A9",
    ],
)
def test_ping_answers_every_method_and_path(ping_client: TestClient, method, target):
    """Any method on any path under /ping returns 200 and echoes the request."""
    response = ping_client.request(method, target)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "pong"
    assert body["message"] == PING_MESSAGE
    assert body["method"] == method
    assert body["url"] == target


def test_ping_head_returns_200(ping_client: TestClient):
    response = ping_client.head("/ping/health")

    assert response.status_code == 200


def test_ping_body_has_exactly_the_documented_fields(ping_client: TestClient):
    body = ping_client.get("/ping").json()

    assert set(body) == {"status", "message", "url", "method", "timestamp"}


def test_ping_timestamp_is_iso8601_utc(ping_client: TestClient):
    before = datetime.now(UTC) - timedelta(seconds=1)
    timestamp = ping_client.get("/ping").json()["timestamp"]

    assert timestamp.endswith("Z")
    parsed = _parse(timestamp)
    assert parsed.tzinfo is not None
    assert parsed >= before.replace(microsecond=0)


def test_ping_timestamps_never_decrease(ping_client: TestClient):
    stamps = [_parse(ping_client.get("/ping").json()["timestamp"]) for _ in range(20)]

    assert stamps == sorted(stamps)


def test_ping_does_not_need_the_database(ping_client: TestClient):
    """Ping has no session dependency, so a broken database cannot fail it."""
    from equinox.db.engine import get_session

    def broken_session():
        raise RuntimeError("database down")

    app.dependency_overrides[get_session] = broken_session
    try:
        response = ping_client.get("/ping")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200


class TestMonotonicClock:
    def test_clock_step_back_repeats_last_value(self):
        t0 = datetime(2026, 1, 19, 12, 0, 0, tzinfo=UTC)
        ticks = iter([t0, t0 - timedelta(seconds=5), t0 + timedelta(seconds=1)])
        clock = MonotonicClock(now=lambda: next(ticks))

        assert clock.now() == t0
        assert clock.now() == t0
        assert clock.now() == t0 + timedelta(seconds=1)

    def test_isoformat_uses_milliseconds_and_z_suffix(self):
        moment = datetime(2026, 1, 19, 12, 34, 56, 789123, tzinfo=UTC)
        clock = MonotonicClock(now=lambda: moment)

        assert clock.isoformat() == "2026-01-19T12:34:56.789Z"
