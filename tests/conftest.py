"""Shared fixtures: a fresh in-memory store for every test."""
import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from string_analyzer.database import SessionLocal, reset_db  # noqa: E402
from string_analyzer.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_store():
    reset_db()
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
    with TestClient(app) as c:
        yield c
