"""Bounded memo for canonicalized paths.

The memo maps an input string to its canonical form. It is not an LRU: reads
never move an entry, and once the size passes ``threshold`` the oldest
inserted entries are discarded in one sweep until ``floor`` remain.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pathlex.config.defaults import CacheDefaults
from pathlex.config.paths import resolve_home_directory
from pathlex.logging import StructuredLogger, create_logger

HomeResolver = Callable[[], str]


@dataclass
class CacheMetrics:
    """Counters for memo activity."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    sweeps: int = 0

    def record_sweep(self, evicted: int) -> None:
        self.sweeps += 1
        self.evictions += evicted


class CanonicalizeCache:
    """Thread-safe canonicalization memo with insertion-order bulk eviction.

    A cache instance is also the canonicalization context: it carries the home
    directory resolver used for ``~`` expansion. Tests and callers that need
    isolation build their own instance and pass it as ``cache=``.

    Args:
        threshold: Size above which a sweep runs.
        floor: Size kept after a sweep (the most recently inserted entries).
        enabled: When False nothing is stored and every lookup misses.
        home_resolver: Callable returning the home directory for ``~``.
        logger: Structured logger for sweep events.
    """

    def __init__(
        self,
        threshold: int = 1250,
        floor: int = 1000,
        *,
        enabled: bool = True,
        home_resolver: Optional[HomeResolver] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        if threshold <= 0:
            raise ValueError("threshold must be positive")
        if floor < 0 or floor > threshold:
            raise ValueError("floor must be between 0 and threshold")

        self.threshold = threshold
        self.floor = floor
        self.enabled = enabled
        self.home_resolver: HomeResolver = home_resolver or resolve_home_directory
        self.logger = logger or _shared_logger()
        self.metrics = CacheMetrics()
        self._entries: Dict[str, str] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_defaults(cls, defaults: Optional[CacheDefaults] = None, **kwargs: Any) -> "CanonicalizeCache":
        """Build a cache from PLX_CACHE_* settings."""
        defaults = defaults or CacheDefaults()
        return cls(defaults.threshold, defaults.floor, enabled=defaults.enabled, **kwargs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: str) -> Optional[str]:
        """Return the memoized value for ``key`` without touching its position."""
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.metrics.misses += 1
            else:
                self.metrics.hits += 1
            return value

    def put(self, key: str, value: str) -> None:
        """Store ``key`` and sweep if the memo has grown past ``threshold``."""
        if not self.enabled:
            return
        with self._lock:
            self._entries[key] = value
            if len(self._entries) > self.threshold:
                self._sweep()

    def _sweep(self) -> None:
        excess = len(self._entries) - self.floor
        for key in list(self._entries)[:excess]:
            del self._entries[key]
        self.metrics.record_sweep(excess)
        self.logger.debug("cache sweep", evicted=excess, size=len(self._entries))

    def resolve_home(self) -> str:
        return self.home_resolver()

    def clear(self) -> int:
        """Drop every entry and return how many were removed."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        self.logger.debug("cache cleared", removed=count)
        return count

    def get_telemetry(self) -> dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._entries),
                "threshold": self.threshold,
                "floor": self.floor,
                "enabled": self.enabled,
                "hits": self.metrics.hits,
                "misses": self.metrics.misses,
                "evictions": self.metrics.evictions,
                "sweeps": self.metrics.sweeps,
            }


_cache_logger: Optional[StructuredLogger] = None
_logger_lock = threading.Lock()


def _shared_logger() -> StructuredLogger:
    """One logger for every cache built without its own, so PLX_LOG_DIR gets a single handle."""
    global _cache_logger
    with _logger_lock:
        if _cache_logger is None:
            _cache_logger = create_logger("cache")
        return _cache_logger


_default_cache: Optional[CanonicalizeCache] = None
_default_lock = threading.Lock()


def get_default_cache() -> CanonicalizeCache:
    """Return the process-wide cache, creating it from settings on first use."""
    global _default_cache
    with _default_lock:
        if _default_cache is None:
            _default_cache = CanonicalizeCache.from_defaults()
        return _default_cache


def reset_default_cache() -> None:
    """Discard the process-wide cache; the next lookup builds a fresh one.

    The shared cache logger is closed too, so PLX_LOG_* changes take effect.
    """
    global _default_cache, _cache_logger
    with _default_lock:
        _default_cache = None
    with _logger_lock:
        if _cache_logger is not None:
            _cache_logger.close()
            _cache_logger = None


__all__ = [
    "CacheMetrics",
    "CanonicalizeCache",
    "HomeResolver",
    "get_default_cache",
    "reset_default_cache",
]
