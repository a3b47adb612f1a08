"""File name and extension helpers.

These only look at the last path segment; nothing is checked on disk, so a
path naming a directory without a trailing separator is treated as a file.
"""

from __future__ import annotations

from typing import Optional, Sequence

from pathlex.errors import InvalidPathArgumentError

from .roots import normalize_path

# Extensions made of several dot-separated parts, matched before the last dot.
DEFAULT_MULTIPLE_PART_EXTENSIONS: tuple[str, ...] = (
    ".tar.bz2",
    ".tar.gz",
    ".tar.gz.enc",
)


def _file_name(path: str) -> str:
    if path == "":
        raise InvalidPathArgumentError("The file path cannot be empty.")

    normalized = normalize_path(path)
    if normalized.endswith("/"):
        raise InvalidPathArgumentError("The file path is invalid or points to a directory.")

    return normalized.rsplit("/", 1)[-1]


def base_file_name(path: str, multiple_part_extensions: Optional[Sequence[str]] = None) -> str:
    """Return the file name of ``path`` without its extension.

    Multi-part extensions (``.tar.gz``) are matched case-insensitively, longest
    first, before falling back to the last dot. A caller-supplied list replaces the
    defaults.

    Examples:
        >>> base_file_name("/var/www/index.html")
        'index'
        >>> base_file_name("archive.tar.gz")
        'archive'
        >>> base_file_name("dataset.test.csv", [".test.csv"])
        'dataset'

    Raises:
        InvalidPathArgumentError: If ``path`` is empty or ends with a separator.
    """
    name = _file_name(path)
    if "." not in name:
        return name

    if multiple_part_extensions is None:
        multiple_part_extensions = DEFAULT_MULTIPLE_PART_EXTENSIONS

    lowered = name.lower()
    for extension in sorted(multiple_part_extensions, key=len, reverse=True):
        if extension and lowered.endswith(extension.lower()):
            return name[: -len(extension)]

    return name[: name.rfind(".")]


def file_extension(
    path: str,
    multiple_part_extensions: Optional[Sequence[str]] = None,
    lowercase: bool = True,
) -> Optional[str]:
    """Return the extension of ``path`` including its leading dot, or None.

    Examples:
        >>> file_extension("/another/path/DOCUMENT.PDF")
        '.pdf'
        >>> file_extension("/archive.TAR.GZ", [".tar.gz"], lowercase=False)
        '.TAR.GZ'
    """
    name = _file_name(path)
    extension = name[len(base_file_name(path, multiple_part_extensions)):]
    if extension == "":
        return None
    return extension.lower() if lowercase else extension


__all__ = ["DEFAULT_MULTIPLE_PART_EXTENSIONS", "base_file_name", "file_extension"]
