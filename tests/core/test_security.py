"""Tests for equinox/core/security.py - bcrypt password hashing."""

import bcrypt
import pytest

from equinox.core.security import (
    hash_password,
    looks_hashed,
    password_too_long,
    verify_password,
)


def test_hash_and_verify():
    hashed = hash_password("password123", rounds=4)

    assert hashed.startswith("$2b$04$")
    assert verify_password("password123", hashed)
    assert not verify_password("password124", hashed)


def test_hash_uses_configured_rounds():
    # conftest sets BCRYPT_ROUNDS=4
    assert hash_password("password123").startswith("$2b$04$")


def test_verify_accepts_2a_hashes():
    legacy = bcrypt.hashpw(b"123456", bcrypt.gensalt(rounds=4, prefix=b"2a")).decode()

    assert legacy.startswith("$2a$")
    assert verify_password("123456", legacy)


@pytest.mark.parametrize("stored", ["123456", "", "$2b$04$truncated"])
def test_verify_rejects_unusable_hashes(stored):
    assert verify_password("123456", stored) is False


def test_looks_hashed():
    assert looks_hashed(hash_password("x", rounds=4))
    assert not looks_hashed("password123")


def test_password_too_long_counts_bytes():
    assert not password_too_long("a" * 72)
    assert password_too_long("a" * 73)
    assert password_too_long("€" * 25)
