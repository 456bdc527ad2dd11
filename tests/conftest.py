"""
Shared fixtures.

Settings are read from the environment at import time, so the test database
and limiter storage are configured here before anything from ``app`` is
imported.
"""

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="journal-board-tests-")

os.environ["DB_CONNECTION"] = "sqlite"
os.environ["DB_DATABASE"] = os.path.join(_TMP_DIR, "test.db")
os.environ["REDIS_URL"] = "memory://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "false"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ["ADMIN_DEFAULT_USERNAME"] = "admin"
os.environ["ADMIN_DEFAULT_PASSWORD"] = "changeme123"
os.environ["ALLOW_REMODERATION"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.database import Base, SessionLocal, engine
from app.core.init import initialize_application
from app.models import Post
from main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "changeme123"


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        initialize_application(db)
    finally:
        db.close()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_token(client):
    response = client.post(
        "/api/admin/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def allow_remoderation(monkeypatch):
    monkeypatch.setattr(settings, "allow_remoderation", True)


@pytest.fixture
def make_post(db):
    """Insert a post directly, bypassing the submission pipeline."""

    def _make_post(content="A quiet walk today", approval_status="pending"):
        post = Post(content=content, approval_status=approval_status)
        db.add(post)
        db.commit()
        db.refresh(post)
        return post

    return _make_post
