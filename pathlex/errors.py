"""Exception types raised by the path engine.

Lexical failures derive from ``ValueError`` so callers validating user input can
catch them with a single clause. Home directory resolution is an environment
problem rather than bad input and derives from ``RuntimeError``.
"""

from __future__ import annotations


class PathError(ValueError):
    """Base class for lexical path failures."""


class InvalidPathArgumentError(PathError):
    """Raised when a required argument is empty, not absolute, or malformed."""


class MalformedSchemeError(InvalidPathArgumentError):
    """Raised when a ``scheme://`` prefix is not ``[A-Za-z][A-Za-z0-9+.-]*``."""

    def __init__(self, scheme: str) -> None:
        super().__init__(f"Malformed scheme: '{scheme}'")
        self.scheme = scheme


class IncompatiblePathsError(PathError):
    """Raised when two paths cannot be related to each other.

    Either one is relative and the other rooted, or both are rooted on
    different roots (drive letters or schemes).
    """


class HomeDirectoryError(RuntimeError):
    """Raised when no environment signal names the user's home directory."""


__all__ = [
    "PathError",
    "InvalidPathArgumentError",
    "MalformedSchemeError",
    "IncompatiblePathsError",
    "HomeDirectoryError",
]
