"""pathlex centralized configuration.

All settings are backed by environment variables following the PLX_* naming
convention.

Example:
    >>> from pathlex.config import CACHE
    >>> CACHE.threshold
    1250

Environment Variables:
    PLX_CACHE_THRESHOLD: Memo size that triggers an eviction sweep (default: 1250)
    PLX_CACHE_FLOOR: Memo size kept after a sweep (default: 1000)
    PLX_CACHE_ENABLED: Set to 0/false to disable memoization (default: true)
    PLX_LOG_LEVEL: Minimum structured log level (default: warning)
    PLX_LOG_CONSOLE: Echo log lines to stdout (default: false)
    PLX_LOG_DIR: Directory for JSONL log files (default: unset, no file)
"""

from __future__ import annotations

from pathlex.config.defaults import CACHE, LOG, CacheDefaults, LogDefaults
from pathlex.config.paths import resolve_home_directory

__all__ = [
    "CACHE",
    "LOG",
    "CacheDefaults",
    "LogDefaults",
    "resolve_home_directory",
]
