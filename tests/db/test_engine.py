"""Tests for equinox/db/engine.py - Database engine and session management."""

import contextlib

from sqlmodel import Session

from equinox.db.engine import engine, get_session


def test_get_session():
    """Test get_session() yields a session bound to the app engine."""
    gen = get_session()
    session = next(gen)

    assert isinstance(session, Session)
    assert session.get_bind() is engine

    # Clean up - complete the generator
    with contextlib.suppress(StopIteration):
        next(gen)
