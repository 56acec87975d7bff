"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers.fake_logger import FakeLogger

_FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return the directory holding YAML and JSON test fixtures."""
    return _FIXTURES


@pytest.fixture(scope="session")
def jobs_snapshot_path(fixtures_dir: Path) -> Path:
    """Return the path to the example job snapshot."""
    return fixtures_dir / "jobs.yaml"


@pytest.fixture(scope="session")
def push_payload_path(fixtures_dir: Path) -> Path:
    """Return the path to a recorded GitBucket push payload."""
    return fixtures_dir / "push_payload.json"


@pytest.fixture
def dispatch_logger(monkeypatch: pytest.MonkeyPatch) -> FakeLogger:
    """Replace the dispatch observability logger with a recording fake."""
    fake = FakeLogger()
    monkeypatch.setattr("gbhook.dispatch.observability.logger", fake)
    return fake


@pytest.fixture
def extraction_logger(monkeypatch: pytest.MonkeyPatch) -> FakeLogger:
    """Replace the SCM extraction logger with a recording fake."""
    fake = FakeLogger()
    monkeypatch.setattr("gbhook.scm.extraction.logger", fake)
    return fake


@pytest.fixture
def receiver_logger(monkeypatch: pytest.MonkeyPatch) -> FakeLogger:
    """Replace the webhook receiver logger with a recording fake."""
    fake = FakeLogger()
    monkeypatch.setattr("gbhook.webhook.receiver.logger", fake)
    return fake
