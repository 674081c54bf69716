from __future__ import annotations

import pytest

from assembler.preview_store import PreviewStore
from preview_server import create_app


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> PreviewStore:
    return PreviewStore(ttl_seconds=30 * 60, sweep_interval_seconds=5 * 60, clock=clock)


@pytest.fixture
def app(store):
    app = create_app(store=store, start_sweeper=False)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def no_log_files(monkeypatch):
    # The CLIs call setup_logging(); keep tests from attaching a FileHandler
    monkeypatch.setattr("assembler.utils._configured", True)
