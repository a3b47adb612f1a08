"""Home directory resolution used by ``~`` expansion."""

from __future__ import annotations

import os

from pathlex.errors import HomeDirectoryError


def resolve_home_directory() -> str:
    """Return the current user's home directory as a forward-slash path.

    Prefers ``HOME`` (POSIX) and falls back to ``HOMEDRIVE`` + ``HOMEPATH``
    (Windows). Trailing separators are removed, except on a bare root such as
    ``/`` or ``C:/``. Nothing is checked on disk.

    Raises:
        HomeDirectoryError: If neither environment signal is available.
    """
    home = os.getenv("HOME")
    if not home:
        drive = os.getenv("HOMEDRIVE")
        rest = os.getenv("HOMEPATH")
        if not (drive and rest):
            raise HomeDirectoryError(
                "Cannot find the home directory path: "
                "your environment or operating system isn't supported."
            )
        home = drive + rest

    home = home.replace("\\", "/")
    trimmed = home.rstrip("/")
    if not trimmed:
        return "/"
    if len(trimmed) == 2 and trimmed[1] == ":":
        return trimmed + "/"
    return trimmed


__all__ = ["resolve_home_directory"]
