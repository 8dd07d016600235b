import os
import pytest

# tests/conftest.py

# Keep logging quiet and file-free unless a test opts in
os.environ.setdefault("WORDPOINTS_DEBUG", "0")
os.environ.pop("WORDPOINTS_LOG_DIR", None)

from wordpoints import WordScorer


@pytest.fixture
def scorer() -> WordScorer:
    """Shared stateless scorer."""
    return WordScorer()


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch, tmp_path):
    """
    Pin the environment keys read by wordpoints.config so individual tests
    can monkeypatch them without leaking into each other. Tests run from an
    empty directory so a stray .env can't change settings.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WORDPOINTS_DEBUG", "0")
    monkeypatch.delenv("WORDPOINTS_LOG_DIR", raising=False)
    yield
