"""Pytest fixtures for Fix My Campus API tests."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """Test client backed by a fresh SQLite file.

    Used as a context manager so the lifespan runs and creates the schema.
    """
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
    app = create_app(f"sqlite+aiosqlite:///{tmp_path / 'campus.db'}")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> Callable[[], datetime]:
    """Deterministic clock: every call is one second after the previous one."""
    start = datetime(2026, 1, 1, 9, 0, 0, tzinfo=timezone.utc)
    ticks = iter(range(10_000))

    def fake_now() -> datetime:
        return start + timedelta(seconds=next(ticks))

    monkeypatch.setattr("fixmycampus.database.models.utcnow", fake_now)
    return fake_now


@pytest.fixture
def issue(client: TestClient) -> dict:
    """A stored issue to hang comments and solutions on."""
    response = client.post(
        "/api/issues",
        json={
            "title": "Wi-Fi drops in the library",
            "description": "Connection lost every few minutes on the second floor.",
            "category": "tech",
        },
    )
    assert response.status_code == 201
    return response.json()["issue"]
