"""Tests for the global exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import OperationalError

from equinox.core.exception_handlers import (
    format_validation_errors,
    register_exception_handlers,
)
from equinox.user.exceptions import EmailExistsError


class Payload(BaseModel):
    count: int


@pytest.fixture(name="error_client")
def error_client_fixture():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/conflict")
    def conflict():
        raise EmailExistsError()

    @app.get("/db-down")
    def db_down():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    @app.post("/payload")
    def payload(data: Payload):
        return data

    return TestClient(app, raise_server_exceptions=False)


def test_app_exception(error_client: TestClient):
    response = error_client.get("/conflict")

    assert response.status_code == 409
    assert response.json() == {
        "type": "email_exists",
        "message": "A user with this email already exists",
    }


def test_operational_error_is_503(error_client: TestClient):
    response = error_client.get("/db-down")

    assert response.status_code == 503
    assert response.json()["type"] == "database_unavailable"


def test_unhandled_error_is_500(error_client: TestClient):
    response = error_client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"type": "internal_error", "message": "An unexpected error occurred"}


def test_not_found_route(error_client: TestClient):
    response = error_client.get("/nowhere")

    assert response.status_code == 404
    assert response.json()["type"] == "http_error"


def test_validation_error(error_client: TestClient):
    response = error_client.post("/payload", json={"count": "many"})

    assert response.status_code == 422
    assert response.json()["message"].startswith("count: ")


def test_format_validation_errors():
    errors = [
        {"loc": ("body", "email"), "msg": "value is not a valid email address"},
        {"loc": ("body",), "msg": "Field required"},
    ]

    assert (
        format_validation_errors(errors)
        == "email: value is not a valid email address; Field required"
    )
