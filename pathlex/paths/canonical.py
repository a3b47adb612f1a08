"""Dot-segment collapsing and the memoized canonicalization pipeline."""

from __future__ import annotations

from typing import List, Optional

from pathlex.errors import HomeDirectoryError

from ._types import RootKind
from .cache import CanonicalizeCache, get_default_cache
from .roots import _is_drive_letter, normalize_path, split_root

CURRENT = "."
PARENT = ".."


def _looks_like_drive(segment: str) -> bool:
    return len(segment) == 2 and segment[1] == ":" and _is_drive_letter(segment[0])


def extract_canonical_parts(root: str, path_without_root: str) -> List[str]:
    """Collapse ``.`` and ``..`` segments of a path remainder.

    Empty and ``.`` segments are skipped. A ``..`` removes the previous
    segment when there is one to remove. Otherwise it is kept only for
    relative paths (empty ``root``): a rooted path cannot climb above its
    root, so the ``..`` is dropped.

    Examples:
        >>> extract_canonical_parts("/root", "../x")
        ['x']
        >>> extract_canonical_parts("", "../x")
        ['..', 'x']
    """
    canonical: List[str] = []

    for part in path_without_root.split("/"):
        if not part or part == CURRENT:
            continue

        if part == PARENT and canonical and canonical[-1] != PARENT:
            canonical.pop()
            continue

        if part != PARENT or not root:
            canonical.append(part)

    return canonical


def canonicalize_path(path: str, *, cache: Optional[CanonicalizeCache] = None) -> str:
    """Return the canonical form of ``path``.

    Steps: expand a leading ``~`` to the home directory, turn backslashes into
    forward slashes, split off the root, then collapse dot segments. The result
    is memoized under the original input string.

    ``canonicalize_path("C:\\\\Temp\\\\..\\\\Logs\\\\.")`` gives ``"C:/Logs"``
    and ``canonicalize_path("/var\\\\log//app")`` gives ``"/var/log/app"``.

    Raises:
        HomeDirectoryError: If ``path`` starts with ``~`` and the home
            directory cannot be determined.
    """
    if path == "":
        return ""

    if cache is None:
        cache = get_default_cache()

    cached = cache.get(path)
    if cached is not None:
        return cached

    expanded = path
    if path[0] == "~":
        try:
            expanded = cache.resolve_home() + path[1:]
        except HomeDirectoryError as e:
            cache.logger.error("home directory unresolved", error=str(e))
            raise

    root_info, rest = split_root(normalize_path(expanded))
    root = root_info.prefix
    parts = extract_canonical_parts(root, rest)
    # A leading "X:" segment would be re-read as a drive root.
    if root_info.kind is RootKind.RELATIVE and parts and _looks_like_drive(parts[0]):
        parts.insert(0, CURRENT)
    canonical = root + "/".join(parts)

    cache.put(path, canonical)
    return canonical


__all__ = ["extract_canonical_parts", "canonicalize_path"]
