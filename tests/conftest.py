import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep REWIND_* settings from the outer environment out of tests."""
    monkeypatch.delenv("REWIND_EQUALITY", raising=False)
    monkeypatch.delenv("REWIND_LOG_LEVEL", raising=False)
