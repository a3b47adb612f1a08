"""Parent directory extraction.

Drive roots (``C:/``), the filesystem root ``/``, UNC shares and
``scheme://`` prefixes each get their own rule.
"""

from __future__ import annotations

from typing import Optional

from ._types import RootKind
from .cache import CanonicalizeCache
from .canonical import canonicalize_path
from .roots import parse_root

_FILE_SCHEME = "file"


def _unc_directory(rest: str, cache: Optional[CanonicalizeCache]) -> str:
    # Canonicalize under a root so ".." cannot climb above the server.
    canonical = canonicalize_path("/" + rest.lstrip("/\\"), cache=cache)
    segments = [segment for segment in canonical.split("/") if segment]
    if len(segments) < 2:
        return ""
    return f"//{segments[0]}/{segments[1]}"


def _local_directory(canonical: str) -> str:
    pos = canonical.rfind("/")
    if pos == -1:
        return ""
    if pos == 0:
        return "/"
    if pos == 2 and parse_root(canonical).kind is RootKind.DRIVE:
        return canonical[:3]
    return canonical[:pos]


def directory_path(path: str, *, cache: Optional[CanonicalizeCache] = None) -> str:
    """Return the parent directory of ``path``, or ``""`` when there is none.

    - ``/file.txt`` gives ``/`` and ``C:/file.txt`` gives ``C:/``.
    - A UNC path always resolves to its share: ``//server/share/a/b.txt``
      gives ``//server/share``. Fewer than two segments give ``""``.
    - A ``scheme://`` prefix is kept, except ``file://`` which is dropped.
    - If the input contained a backslash the result uses backslashes.
    - A bare file name has no directory and gives ``""``.
    """
    if path == "":
        return ""

    uses_backslashes = "\\" in path

    root = parse_root(path)
    scheme = root.scheme_prefix
    keep_scheme = root.scheme is not None and root.scheme.lower() != _FILE_SCHEME
    rest = path[len(scheme):]

    if root.kind is RootKind.UNC:
        directory = _unc_directory(rest, cache)
    else:
        directory = _local_directory(canonicalize_path(rest, cache=cache))

    if directory == "":
        return ""

    if keep_scheme:
        directory = scheme + directory

    if uses_backslashes:
        directory = directory.replace("/", "\\")

    return directory


__all__ = ["directory_path"]
