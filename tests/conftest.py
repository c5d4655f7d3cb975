"""Shared pytest fixtures for goal tracker test suites."""

from collections.abc import Callable
from collections.abc import Generator
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
import sys

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from goaltracker.core.config import Settings  # noqa: E402
from goaltracker.db.base import build_session_factory  # noqa: E402
from goaltracker.db.base import get_db_session  # noqa: E402
from goaltracker.db.models import Base  # noqa: E402

TEST_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"


@dataclass
class RecordingMailer:
    """Mailer double that keeps every sign-in link it was asked to send."""

    sent: list[tuple[str, str]] = field(default_factory=list)

    def send_magic_link(self, *, email: str, url: str) -> None:
        self.sent.append((email, url))

    def last_url_for(self, email: str) -> str:
        for recipient, url in reversed(self.sent):
            if recipient == email:
                return url
        raise AssertionError(f"No sign-in link sent to {email}")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        secret_key=TEST_SECRET_KEY,
        base_url="http://testserver",
        cookie_secure=False,
    )


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(test_engine)
    yield test_engine
    Base.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return build_session_factory(engine)


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture
def app(settings: Settings, mailer: RecordingMailer, session_factory: sessionmaker[Session]) -> FastAPI:
    from goaltracker.main import create_app

    application = create_app(settings, mailer=mailer)

    def _override_db_session() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[get_db_session] = _override_db_session
    return application


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Provide an anonymous API test client."""
    with TestClient(app) as test_client:
        yield test_client


def sign_in(test_client: TestClient, mailer: RecordingMailer, email: str) -> TestClient:
    """Sign ``test_client`` in through the emailed magic link."""
    response = test_client.post("/api/auth/signin/email", json={"email": email})
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"email": email}}

    callback = test_client.get(mailer.last_url_for(email), follow_redirects=False)
    assert callback.status_code == 302
    return test_client


@pytest.fixture
def make_user_client(app: FastAPI, mailer: RecordingMailer) -> Generator[Callable[[str], TestClient], None, None]:
    """Build signed-in clients sharing one app and database."""
    clients: list[TestClient] = []

    def _make(email: str) -> TestClient:
        test_client = TestClient(app)
        test_client.__enter__()
        clients.append(test_client)
        return sign_in(test_client, mailer, email)

    yield _make
    for test_client in clients:
        test_client.__exit__(None, None, None)


@pytest.fixture
def user_client(make_user_client: Callable[[str], TestClient]) -> TestClient:
    return make_user_client("alice@example.com")
