from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

SCHEME_SEPARATOR = "://"


class RootKind(Enum):
    """Addressing space of a path once any ``scheme://`` prefix is removed."""

    RELATIVE = "relative"
    POSIX = "posix"  # "/..."
    DRIVE = "drive"  # "C:" or "C:/..."
    UNC = "unc"  # "//server/share/..."


@dataclass(frozen=True, slots=True)
class PathRoot:
    """
    Parsed root of a path. Built once by ``parse_root`` so callers can branch on
    ``kind`` instead of re-scanning the string.
    """

    kind: RootKind
    scheme: Optional[str] = None
    drive: Optional[str] = None

    @property
    def scheme_prefix(self) -> str:
        return "" if self.scheme is None else self.scheme + SCHEME_SEPARATOR

    @property
    def prefix(self) -> str:
        """Root string as split off by ``split_path``.

        UNC paths share the POSIX prefix ``/``: the second slash belongs to the
        remainder and collapses during canonicalization.
        """
        if self.kind is RootKind.DRIVE:
            return f"{self.scheme_prefix}{self.drive}:/"
        if self.kind is RootKind.RELATIVE:
            return self.scheme_prefix
        return self.scheme_prefix + "/"

    @property
    def root(self) -> str:
        """Root string as reported by ``get_root``: empty unless absolute."""
        return self.prefix if self.is_absolute else ""

    @property
    def is_absolute(self) -> bool:
        return self.kind is not RootKind.RELATIVE

    @property
    def is_rooted(self) -> bool:
        """True when ``prefix`` is non-empty, including ``scheme://relative``."""
        return self.is_absolute or self.scheme is not None
