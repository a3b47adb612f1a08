"""pathlex config defaults.

No side effects on import. Values are read from PLX_* environment variables
each time a defaults object is constructed, so tests can monkeypatch the
environment and build a fresh instance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

ENV_PREFIX = "PLX_"


def _env(name: str, default: str) -> str:
    if not name.startswith(ENV_PREFIX):
        raise ValueError(f"Only {ENV_PREFIX}* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _env_optional(name: str) -> str | None:
    raw = _env(name, "")
    return raw or None


CACHE_THRESHOLD_DEFAULT = 1250
CACHE_FLOOR_DEFAULT = 1000


@dataclass(frozen=True)
class CacheDefaults:
    """Bounds of the canonicalization memo.

    Once the memo grows past ``threshold`` entries, the oldest inserted entries
    are discarded until ``floor`` remain. An inconsistent pair (non-positive
    threshold, or floor outside ``0..threshold``) falls back to 1250/1000.
    """

    threshold: int = field(
        default_factory=lambda: _env_int("PLX_CACHE_THRESHOLD", CACHE_THRESHOLD_DEFAULT)
    )
    floor: int = field(default_factory=lambda: _env_int("PLX_CACHE_FLOOR", CACHE_FLOOR_DEFAULT))
    enabled: bool = field(default_factory=lambda: _env_bool("PLX_CACHE_ENABLED", True))

    def __post_init__(self) -> None:
        if self.threshold <= 0 or not 0 <= self.floor <= self.threshold:
            object.__setattr__(self, "threshold", CACHE_THRESHOLD_DEFAULT)
            object.__setattr__(self, "floor", CACHE_FLOOR_DEFAULT)


@dataclass(frozen=True)
class LogDefaults:
    level: str = field(default_factory=lambda: _env("PLX_LOG_LEVEL", "warning").strip().lower())
    console: bool = field(default_factory=lambda: _env_bool("PLX_LOG_CONSOLE", False))
    log_dir: str | None = field(default_factory=lambda: _env_optional("PLX_LOG_DIR"))


CACHE = CacheDefaults()
LOG = LogDefaults()
