"""pathlex: cross-platform lexical path canonicalization."""

from pathlex.errors import (
    HomeDirectoryError,
    IncompatiblePathsError,
    InvalidPathArgumentError,
    MalformedSchemeError,
    PathError,
)
from pathlex.paths import *  # noqa: F401, F403
from pathlex.paths import __all__ as _paths_all

__version__ = "0.1.0"

__all__ = [
    "PathError",
    "InvalidPathArgumentError",
    "MalformedSchemeError",
    "IncompatiblePathsError",
    "HomeDirectoryError",
    *_paths_all,
]
