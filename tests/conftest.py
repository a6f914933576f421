from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from daybound.clock import Clock, fixed_clock, get_clock
from daybound.settings import reset_settings


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep the developer env, ``.env`` file and host zone out of the default timezone."""
    monkeypatch.delenv("DAYBOUND_DEFAULT_TIMEZONE", raising=False)
    monkeypatch.delenv("TZ", raising=False)
    monkeypatch.setattr("daybound.timezones.LOCALTIME_PATH", str(tmp_path / "localtime"))
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def clock_at():
    def _clock_at(value: str) -> Clock:
        return fixed_clock(datetime.fromisoformat(value))

    return _clock_at


@pytest.fixture
def make_client(clock_at):
    from daybound.main import app

    def _make(now: str) -> TestClient:
        clock = clock_at(now)
        app.dependency_overrides[get_clock] = lambda: clock
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
