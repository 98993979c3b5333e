"""Shared fixtures: an in-memory database and an app wired to it."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import codeai.models  # noqa: F401
from codeai.agents.subagents.cohere_ai_subagent import CloudGenerationError, get_cloud_backend
from codeai.db.config import enable_sqlite_foreign_keys, get_session, get_session_factory
from codeai.main import app


class FakeCloudBackend:
    """Stand-in for the Cohere subagent.

    Yields the given chunks; with fail_after=N it raises `error` after N chunks.
    """

    def __init__(self, chunks=None, enabled=True, fail_after=None, error=None):
        self.chunks = list(chunks or [])
        self.enabled = enabled
        self.fail_after = fail_after
        self.error = error or CloudGenerationError("upstream unavailable")
        self.calls = []

    @property
    def ai_mode(self):
        return "cloud" if self.enabled else "local"

    def stream_chat(self, message, history=()):
        self.calls.append((message, list(history)))
        for index, chunk in enumerate(self.chunks):
            if self.fail_after is not None and index >= self.fail_after:
                raise self.error
            yield chunk
        if self.fail_after is not None and self.fail_after >= len(self.chunks):
            raise self.error


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
def session(engine):
    with Session(engine) as db:
        yield db


@pytest.fixture
def cloud_backend():
    """Local mode unless a test swaps in an enabled backend."""
    return FakeCloudBackend(enabled=False)


@pytest.fixture
def client(engine, cloud_backend):
    def _get_session():
        with Session(engine) as db:
            yield db

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_session_factory] = lambda: (lambda: Session(engine))
    app.dependency_overrides[get_cloud_backend] = lambda: cloud_backend
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def conversation_id(client):
    response = client.post("/conversations", json={"title": "Test project"})
    assert response.status_code == 201
    return response.json()["id"]
