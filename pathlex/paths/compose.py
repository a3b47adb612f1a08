"""Path joining."""

from __future__ import annotations

from typing import Optional

from ._types import SCHEME_SEPARATOR
from .cache import CanonicalizeCache
from .canonical import canonicalize_path


def join_paths(*paths: str, cache: Optional[CanonicalizeCache] = None) -> str:
    """Join path fragments and canonicalize the result.

    Empty fragments are ignored. The first non-empty fragment keeps its root
    (``/top``, ``C:\\``, ``phar://...``). Later fragments are glued with a
    single ``/`` and lose their leading slashes, except for the fragment right
    after a scheme-carrying first fragment, which keeps it once::

        >>> join_paths("/var", "log", "app.log")
        '/var/log/app.log'
        >>> join_paths("phar://archive.phar", "/sub", "/file.php")
        'phar://archive.phar/sub/file.php'

    Returns ``""`` when every fragment is empty.
    """
    final_path: Optional[str] = None
    was_scheme = False

    for path in paths:
        if path == "":
            continue

        if final_path is None:
            final_path = path
            was_scheme = SCHEME_SEPARATOR in path
            continue

        if final_path[-1] not in ("/", "\\"):
            final_path += "/"

        final_path += path if was_scheme else path.lstrip("/")
        was_scheme = False

    if final_path is None:
        return ""

    return canonicalize_path(final_path, cache=cache)


__all__ = ["join_paths"]
