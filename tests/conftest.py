import os

import pytest

os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOG_JSON", "false")

pytest_plugins = ["tests.fixtures.notification_fixtures"]


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Keep storage settings out of tests unless a test sets them."""
    monkeypatch.setenv("ENV", "test")
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("OUTPUT_BUCKET", raising=False)
    monkeypatch.delenv("UPLOAD_CONCURRENCY", raising=False)
    yield
