"""Root conftest — shared test configuration."""

import pytest

from guardr.config import GuardConfig, get_settings
from guardr.guard import Guard, default_guard


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Drop GUARDR_* variables and cached settings so every test starts from defaults."""
    for name in ("DEFAULT_LABEL", "CAPTURE_LABELS", "LOG_VIOLATIONS", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(f"GUARDR_{name}", raising=False)
    get_settings.cache_clear()
    default_guard.cache_clear()
    yield
    get_settings.cache_clear()
    default_guard.cache_clear()


@pytest.fixture
def guard() -> Guard:
    return Guard(GuardConfig())
