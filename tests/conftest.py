# tests/conftest.py
# Isolate the process-wide canonicalization cache and pin the home directory.

from __future__ import annotations

import pytest

from pathlex.logging import StructuredLogger
from pathlex.paths import CanonicalizeCache, reset_default_cache

HOME = "/home/alice"
_PLX_VARS = (
    "PLX_CACHE_THRESHOLD",
    "PLX_CACHE_FLOOR",
    "PLX_CACHE_ENABLED",
    "PLX_LOG_DIR",
    "PLX_LOG_LEVEL",
    "PLX_LOG_CONSOLE",
)


def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin home and cache settings so results do not depend on the host."""
    monkeypatch.setenv("HOME", HOME)
    monkeypatch.delenv("HOMEDRIVE", raising=False)
    monkeypatch.delenv("HOMEPATH", raising=False)
    for name in _PLX_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def isolated_paths(monkeypatch):
    """Every test starts with a fresh default cache and a known HOME."""
    _set_test_env(monkeypatch)
    reset_default_cache()
    yield
    reset_default_cache()


@pytest.fixture
def quiet_logger() -> StructuredLogger:
    return StructuredLogger("test", enable_console=False)


@pytest.fixture
def cache(quiet_logger) -> CanonicalizeCache:
    """A private cache with a fixed home resolver."""
    return CanonicalizeCache(home_resolver=lambda: HOME, logger=quiet_logger)
