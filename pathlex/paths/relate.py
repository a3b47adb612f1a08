"""Relations between two paths: absolute/relative conversion and containment.

Both inputs are canonicalized before being compared, so ``/a/./b`` and
``/a\\b`` relate the same way ``/a/b`` does. Two paths can only be related
when they share the same root string, including drive letter case and scheme.
"""

from __future__ import annotations

from typing import Optional

from pathlex.errors import IncompatiblePathsError, InvalidPathArgumentError

from .cache import CanonicalizeCache
from .canonical import PARENT, canonicalize_path
from .roots import is_absolute_path, parse_root, split_root


def _require_absolute_base(base_path: str) -> None:
    if base_path == "":
        raise InvalidPathArgumentError(
            f'The base path must be a non-empty string. Got: "{base_path}".'
        )
    if not is_absolute_path(base_path):
        raise InvalidPathArgumentError(f'The base path "{base_path}" is not an absolute path.')


def make_absolute(path: str, base_path: str, *, cache: Optional[CanonicalizeCache] = None) -> str:
    """Resolve ``path`` against an absolute ``base_path``.

    An already absolute ``path`` is only canonicalized. Otherwise it is
    appended to the base and the base's scheme, if any, is put back in front::

        >>> make_absolute("dir/file.txt", "phar:///tmp/archive.phar")
        'phar:///tmp/archive.phar/dir/file.txt'

    Raises:
        InvalidPathArgumentError: If ``base_path`` is empty or not absolute.
    """
    _require_absolute_base(base_path)

    if is_absolute_path(path):
        return canonicalize_path(path, cache=cache)

    scheme = parse_root(base_path).scheme_prefix
    base = base_path[len(scheme):].rstrip("/\\")
    return scheme + canonicalize_path(base + "/" + path, cache=cache)


def compute_relative_path(target_path: str, base_path: str) -> str:
    """Return the ``../``-prefixed walk from ``base_path`` to ``target_path``.

    Both arguments are root-less canonical remainders. The result never ends
    with a slash and is ``"."`` when nothing has to be walked.
    """
    target_parts = [part for part in target_path.split("/") if part]
    base_parts = [part for part in base_path.split("/") if part]

    common = 0
    for target_part, base_part in zip(target_parts, base_parts):
        if target_part != base_part:
            break
        common += 1

    steps_back = len(base_parts) - common
    result = (PARENT + "/") * steps_back + "/".join(target_parts[common:])

    if result == "":
        return "."

    return result.rstrip("/")


def relative_path(path: str, base_path: str, *, cache: Optional[CanonicalizeCache] = None) -> str:
    """Express ``path`` relative to ``base_path``.

    Works for two rooted paths sharing a root as well as for two relative
    paths. Identical paths give ``"."``.

    Examples:
        >>> relative_path("/var/bar/file.txt", "/var/foo")
        '../bar/file.txt'
        >>> relative_path("a/c/d", "a/b/e")
        '../../c/d'

    Raises:
        IncompatiblePathsError: If exactly one of the paths is rooted, or both
            are rooted on different roots.
    """
    path = canonicalize_path(path, cache=cache)
    base_path = canonicalize_path(base_path, cache=cache)

    root, rest = split_root(path)
    base_root, base_rest = split_root(base_path)

    if not root.is_rooted and base_root.is_rooted:
        raise IncompatiblePathsError(
            f'The target path "{path}" is relative, but the base path "{base_path}" is absolute. '
            "This combination is not supported."
        )

    if root.is_rooted and not base_root.is_rooted:
        raise IncompatiblePathsError(
            f'The absolute path "{path}" cannot be made relative to the relative path '
            f'"{base_path}". You should provide an absolute base path instead.'
        )

    if root.prefix != base_root.prefix:
        raise IncompatiblePathsError(
            f'The path "{path}" cannot be made relative to "{base_path}", because they have '
            f'different roots ("{root.prefix}" and "{base_root.prefix}").'
        )

    if rest == base_rest:
        return "."

    if base_rest == "":
        return rest

    return compute_relative_path(rest, base_rest)


def make_relative(path: str, base_path: str, *, cache: Optional[CanonicalizeCache] = None) -> str:
    """Express an absolute ``path`` relative to an absolute ``base_path``.

    Stricter form of :func:`relative_path` that refuses relative inputs.
    Results are identical to :func:`relative_path`: identical paths give
    ``"."`` and a parent gives ``".."``.

    Raises:
        InvalidPathArgumentError: If ``base_path`` is empty or not absolute.
        IncompatiblePathsError: If ``path`` is relative or the roots differ.
    """
    path = canonicalize_path(path, cache=cache)
    base_path = canonicalize_path(base_path, cache=cache)

    _require_absolute_base(base_path)

    if not is_absolute_path(path):
        raise IncompatiblePathsError(
            f'Both paths must be absolute. Provided path "{path}" and base path "{base_path}".'
        )

    return relative_path(path, base_path, cache=cache)


def is_base_path(base_path: str, child_path: str, *, cache: Optional[CanonicalizeCache] = None) -> bool:
    """Return True if ``child_path`` equals ``base_path`` or lies below it.

    The comparison is anchored on a segment boundary, so ``/var/www`` is not a
    base of ``/var/www-legacy``. It is case-sensitive.
    """
    base = canonicalize_path(base_path, cache=cache)
    child = canonicalize_path(child_path, cache=cache)
    return (child + "/").startswith(base.rstrip("/") + "/")


__all__ = [
    "make_absolute",
    "make_relative",
    "relative_path",
    "compute_relative_path",
    "is_base_path",
]
