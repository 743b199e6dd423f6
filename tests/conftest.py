import inspect
import os

# equinox.db.engine reads settings at import time: point everything at a
# throwaway database and cheap bcrypt rounds before the app is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV_NAME"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

from equinox.core.security import hash_password  # noqa: E402
from equinox.db.engine import get_session  # noqa: E402
from equinox.main import app  # noqa: E402
from equinox.user.models import User, UserRole  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with the full schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="ops_engine")
def ops_engine_fixture(engine, monkeypatch: pytest.MonkeyPatch):
    """Make the operator tools open their sessions on the test engine."""
    monkeypatch.setattr("equinox.ops.runner.engine", engine)
    return engine


def _make_user(session: Session, **fields) -> User:
    user = User(**fields)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="admin_user")
def admin_user_fixture(session: Session):
    """Admin account; password is ``admin-password``."""
    return _make_user(
        session,
        email="ai@admin.com",
        name="Admin User",
        role=UserRole.Admin,
        password=hash_password("admin-password"),
    )


@pytest.fixture(name="viewer_user")
def viewer_user_fixture(session: Session):
    """Viewer account; password is ``viewer-password``."""
    return _make_user(
        session,
        email="viewer@example.com",
        name="Vera Viewer",
        role=UserRole.Viewer,
        password=hash_password("viewer-password"),
    )


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Test client whose routes use the test session."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="admin_client")
def admin_client_fixture(client: TestClient, admin_user: User):
    """Client holding a logged-in admin session cookie."""
    response = client.post(
        "/auth/login", json={"email": admin_user.email, "password": "admin-password"}
    )
    assert response.status_code == 200
    return client


@pytest.fixture(name="viewer_client")
def viewer_client_fixture(client: TestClient, viewer_user: User):
    """Client holding a logged-in viewer session cookie."""
    response = client.post(
        "/auth/login", json={"email": viewer_user.email, "password": "viewer-password"}
    )
    assert response.status_code == 200
    return client
