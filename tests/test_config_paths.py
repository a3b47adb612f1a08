"""Tests for pathlex.config.paths module."""

from __future__ import annotations

import pytest

from pathlex.config.paths import resolve_home_directory
from pathlex.errors import HomeDirectoryError


def _clear_home(monkeypatch):
    for name in ("HOME", "HOMEDRIVE", "HOMEPATH"):
        monkeypatch.delenv(name, raising=False)


def test_resolve_home_from_home(monkeypatch):
    """HOME is used as-is when set."""
    monkeypatch.setenv("HOME", "/home/alice")
    assert resolve_home_directory() == "/home/alice"


def test_resolve_home_strips_trailing_separator(monkeypatch):
    monkeypatch.setenv("HOME", "/home/alice/")
    assert resolve_home_directory() == "/home/alice"


def test_resolve_home_keeps_bare_root(monkeypatch):
    monkeypatch.setenv("HOME", "/")
    assert resolve_home_directory() == "/"


def test_resolve_home_windows_fallback(monkeypatch):
    """HOMEDRIVE + HOMEPATH is used when HOME is missing."""
    _clear_home(monkeypatch)
    monkeypatch.setenv("HOMEDRIVE", "C:")
    monkeypatch.setenv("HOMEPATH", "\\Users\\bob")
    assert resolve_home_directory() == "C:/Users/bob"


def test_resolve_home_windows_drive_root(monkeypatch):
    _clear_home(monkeypatch)
    monkeypatch.setenv("HOMEDRIVE", "D:")
    monkeypatch.setenv("HOMEPATH", "\\")
    assert resolve_home_directory() == "D:/"


def test_resolve_home_empty_home_falls_back(monkeypatch):
    monkeypatch.setenv("HOME", "")
    monkeypatch.setenv("HOMEDRIVE", "C:")
    monkeypatch.setenv("HOMEPATH", "\\Users\\bob")
    assert resolve_home_directory() == "C:/Users/bob"


def test_resolve_home_requires_both_windows_parts(monkeypatch):
    _clear_home(monkeypatch)
    monkeypatch.setenv("HOMEDRIVE", "C:")
    with pytest.raises(HomeDirectoryError):
        resolve_home_directory()


def test_resolve_home_unsupported_environment(monkeypatch):
    _clear_home(monkeypatch)
    with pytest.raises(HomeDirectoryError, match="Cannot find the home directory path"):
        resolve_home_directory()
