"""Root splitting and lexical root predicates.

Nothing here touches the filesystem: "absolute" only means the string starts
with a root (``/``, ``\\``, ``C:``, ``C:/``), optionally behind a
``scheme://`` prefix.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from pathlex.errors import MalformedSchemeError

from ._types import SCHEME_SEPARATOR, PathRoot, RootKind

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_SEPARATORS = ("/", "\\")


def normalize_path(path: str) -> str:
    """Return ``path`` with every backslash replaced by a forward slash."""
    return path.replace("\\", "/")


def _is_drive_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def split_root(path: str) -> Tuple[PathRoot, str]:
    """Parse the root of ``path`` and return it with the remaining text.

    Both ``/`` and ``\\`` count as separators. The scheme is not validated.
    """
    scheme: Optional[str] = None
    rest = path
    pos = path.find(SCHEME_SEPARATOR)
    if pos != -1:
        scheme = path[:pos]
        rest = path[pos + len(SCHEME_SEPARATOR):]

    if rest[:1] in _SEPARATORS:
        kind = RootKind.UNC if rest[1:2] in _SEPARATORS else RootKind.POSIX
        return PathRoot(kind, scheme), rest[1:]

    if len(rest) > 1 and _is_drive_letter(rest[0]) and rest[1] == ":":
        if len(rest) == 2:
            return PathRoot(RootKind.DRIVE, scheme, rest[0]), ""
        if rest[2] in _SEPARATORS:
            return PathRoot(RootKind.DRIVE, scheme, rest[0]), rest[3:]

    return PathRoot(RootKind.RELATIVE, scheme), rest


def parse_root(path: str) -> PathRoot:
    """Classify the root of ``path``.

    Examples:
        >>> parse_root("s3://C:/data")
        PathRoot(kind=<RootKind.DRIVE: 'drive'>, scheme='s3', drive='C')
        >>> parse_root("docs/readme.md").kind
        <RootKind.RELATIVE: 'relative'>
    """
    return split_root(path)[0]


def split_path(path: str) -> Tuple[str, str]:
    """Split a separator-normalized path into ``(root, remainder)``.

    The root keeps any scheme prefix: ``"file:///usr/bin"`` splits into
    ``("file:///", "usr/bin")`` and ``"C:"`` into ``("C:/", "")``. A path with
    no recognizable root returns ``("", path)``, and a scheme followed by a
    relative part keeps the scheme as its root (``("s3://", "bucket/key")``).
    """
    if not path:
        return "", ""
    root, rest = split_root(path)
    return root.prefix, rest


def is_absolute_path(path: str) -> bool:
    """Return True if ``path`` starts with a root once any scheme is removed.

    ``/``, ``\\``, ``\\\\server``, ``C:``, ``C:/`` and ``C:\\`` are absolute,
    as are ``file:///tmp`` and ``file:///C:/x``. ``http://host/x``, ``ftp://``
    and the empty string are not.
    """
    if not path:
        return False
    return parse_root(path).is_absolute


def is_relative_path(path: str) -> bool:
    return not is_absolute_path(path)


def is_local_path(path: str) -> bool:
    """Return True for a non-empty path without any ``://`` marker."""
    return path != "" and SCHEME_SEPARATOR not in path


def get_root(path: str) -> str:
    """Return the root prefix of ``path`` with forward slashes, or ``""``.

    The scheme is kept: ``get_root("s3://C:/data") == "s3://C:/"`` and
    ``get_root("custom:///var") == "custom:///"``. Relative paths, including
    ``custom://relative/path``, have no root.
    """
    if not path:
        return ""
    return parse_root(path).root


def get_scheme_and_hierarchy(path: str) -> Tuple[Optional[str], str]:
    """Split ``path`` on its first ``://`` into ``(scheme, hierarchy)``.

    A path without ``://`` returns ``(None, path)``; an empty scheme
    (``"://x"``) also yields ``None``.

    Raises:
        MalformedSchemeError: If the scheme is non-empty and does not match
            ``[A-Za-z][A-Za-z0-9+.-]*``.
    """
    pos = path.find(SCHEME_SEPARATOR)
    if pos == -1:
        return None, path

    scheme = path[:pos]
    hierarchy = path[pos + len(SCHEME_SEPARATOR):]

    if scheme and not _SCHEME_RE.fullmatch(scheme):
        raise MalformedSchemeError(scheme)

    return (scheme or None), hierarchy


__all__ = [
    "normalize_path",
    "parse_root",
    "split_root",
    "split_path",
    "is_absolute_path",
    "is_relative_path",
    "is_local_path",
    "get_root",
    "get_scheme_and_hierarchy",
]
