"""Tests for equinox/auth/dependencies.py - session-backed user lookup."""

import uuid
from unittest.mock import MagicMock

import pytest

from equinox.auth.dependencies import get_admin_user, get_current_user
from equinox.auth.exceptions import AdminRequiredError, NotAuthenticatedError
from equinox.core.sessions import SESSION_USER_ID
from equinox.user.exceptions import UserNotFoundError


def make_request(session_data: dict):
    mock_request = MagicMock()
    mock_request.session = session_data
    return mock_request


def test_get_current_user_from_session(session, viewer_user):
    request = make_request({SESSION_USER_ID: str(viewer_user.id)})

    result = get_current_user(request, session)

    assert result.id == viewer_user.id


def test_get_current_user_without_session(session):
    with pytest.raises(NotAuthenticatedError) as exc_info:
        get_current_user(make_request({}), session)

    assert exc_info.value.status_code == 401


def test_get_current_user_garbage_id_clears_session(session):
    data = {SESSION_USER_ID: "not-a-uuid", "user_role": "Admin"}

    with pytest.raises(NotAuthenticatedError):
        get_current_user(make_request(data), session)

    assert data == {}


def test_get_current_user_unknown_id(session):
    request = make_request({SESSION_USER_ID: str(uuid.uuid4())})

    with pytest.raises(UserNotFoundError) as exc_info:
        get_current_user(request, session)

    assert exc_info.value.status_code == 404


def test_get_admin_user(admin_user, viewer_user):
    assert get_admin_user(admin_user) is admin_user

    with pytest.raises(AdminRequiredError) as exc_info:
        get_admin_user(viewer_user)

    assert exc_info.value.status_code == 403
