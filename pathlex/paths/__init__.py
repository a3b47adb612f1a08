"""Lexical path canonicalization and resolution.

Every function works on strings only: no filesystem access, no symlink
resolution, no existence checks. Unix (``/a/b``), Windows (``C:\\a``,
``\\\\server\\share``) and scheme-prefixed (``phar://``, ``s3://``) paths are
handled uniformly.

Functions that canonicalize accept an optional ``cache=`` keyword taking a
:class:`CanonicalizeCache`; by default the process-wide instance is used.
"""

from ._types import PathRoot, RootKind
from .cache import CacheMetrics, CanonicalizeCache, get_default_cache, reset_default_cache
from .canonical import canonicalize_path, extract_canonical_parts
from .compose import join_paths
from .directory import directory_path
from .filename import DEFAULT_MULTIPLE_PART_EXTENSIONS, base_file_name, file_extension
from .relate import (
    compute_relative_path,
    is_base_path,
    make_absolute,
    make_relative,
    relative_path,
)
from .roots import (
    get_root,
    get_scheme_and_hierarchy,
    is_absolute_path,
    is_local_path,
    is_relative_path,
    normalize_path,
    parse_root,
    split_path,
    split_root,
)

__all__ = [
    "PathRoot",
    "RootKind",
    "CacheMetrics",
    "CanonicalizeCache",
    "get_default_cache",
    "reset_default_cache",
    "canonicalize_path",
    "extract_canonical_parts",
    "join_paths",
    "directory_path",
    "DEFAULT_MULTIPLE_PART_EXTENSIONS",
    "base_file_name",
    "file_extension",
    "compute_relative_path",
    "is_base_path",
    "make_absolute",
    "make_relative",
    "relative_path",
    "get_root",
    "get_scheme_and_hierarchy",
    "is_absolute_path",
    "is_local_path",
    "is_relative_path",
    "normalize_path",
    "parse_root",
    "split_path",
    "split_root",
]
