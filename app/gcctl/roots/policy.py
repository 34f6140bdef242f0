"""Deletion safety policy for garbage collection roots.

Roots under runtime-managed trees must never be removed, and removing a
symlink needs write permission on the directory that holds it.
"""

import os
import posixpath
from pathlib import PurePosixPath

# Runtime state owned by the system, never administratively removable.
EXCLUDED_PREFIXES: tuple[str, ...] = (
    "/run",
    "/proc",
)


def is_excluded_path(path: str) -> bool:
    """Check if a path lies under one of the excluded prefixes.

    The comparison is component-wise: ``/run/current-system`` is excluded,
    ``/runner/result`` is not.

    Args:
        path: Absolute filesystem path to check.

    Returns:
        True if the path equals or lies under an excluded prefix.
    """
    # PurePosixPath keeps a leading "//" as its own root.
    if path.startswith("/"):
        path = "/" + path.lstrip("/")
    pure = PurePosixPath(path)
    return any(pure.is_relative_to(prefix) for prefix in EXCLUDED_PREFIXES)


def can_unlink(path: str) -> bool:
    """Check if the current process may unlink ``path``.

    Args:
        path: Location of the symlink.

    Returns:
        True if the parent directory is writable, False otherwise
        (including when the path has no parent).
    """
    parent = posixpath.dirname(path)
    if not parent or parent == path:
        return False
    return os.access(parent, os.W_OK)
