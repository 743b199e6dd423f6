"""Tests for equinox/core/settings.py."""

import pytest

from equinox.core.settings import Settings


def make_settings(**overrides) -> Settings:
    overrides.setdefault("database_url", "sqlite://")
    return Settings(_env_file=None, **overrides)


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgres://u:p@db:5432/equinox", "postgresql+psycopg://u:p@db:5432/equinox"),
        ("postgresql://u:p@db/equinox", "postgresql+psycopg://u:p@db/equinox"),
        ("postgresql+psycopg://u@db/equinox", "postgresql+psycopg://u@db/equinox"),
        ("sqlite:///./equinox.db", "sqlite:///./equinox.db"),
    ],
)
def test_database_url_driver(url, expected):
    assert make_settings(database_url=url).database_url == expected


def test_database_url_is_required(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_cors_origins_list():
    settings = make_settings(cors_origins=" http://localhost:5173 , https://fleet.example.com,, ")

    assert settings.cors_origins_list == ["http://localhost:5173", "https://fleet.example.com"]


@pytest.mark.parametrize(
    ("env_name", "secure"),
    [("development", False), ("Local", False), ("test", False), ("production", True)],
)
def test_is_secure_cookie(env_name, secure):
    assert make_settings(env_name=env_name).is_secure_cookie is secure


def test_session_max_age_in_seconds():
    assert make_settings(session_max_age_hours=2).session_max_age == 7200


def test_ops_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("OPS_ADMIN_EMAIL", "OPS_ADMIN_PASSWORD", "OPS_RESET_PASSWORD"):
        monkeypatch.delenv(name, raising=False)

    settings = make_settings()

    assert settings.ops_admin_email == "ai@admin.com"
    assert settings.ops_admin_password == "password123"
    assert settings.ops_reset_password == "123456"


def test_bcrypt_rounds_bounds():
    with pytest.raises(ValueError):
        make_settings(bcrypt_rounds=3)
