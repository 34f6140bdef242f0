"""Active generation lookup for profiles.

A profile symlink points at one of its generation links, usually by a
relative name (``system -> system-42-link``).
"""

import errno
import logging
import os
import posixpath

from gcctl.roots.errors import ProfileResolutionError
from gcctl.roots.naming import parse_generation

logger = logging.getLogger(__name__)

# readlink() failures meaning "no readable profile link here"
_TOLERATED_ERRNOS: frozenset[int] = frozenset(
    {
        errno.ENOENT,
        errno.ENOTDIR,
        errno.EINVAL,  # not a symlink
        errno.EACCES,
        errno.EPERM,
    }
)


def read_active_generation(profile_path: str) -> int | None:
    """Determine which generation a profile currently points to.

    Profiles owned by other users are often unreadable; that is expected
    and yields None rather than an error. A link target that does not
    look like a generation link also yields None.

    Args:
        profile_path: Path of the profile symlink.

    Returns:
        Active generation number, or None if it cannot be determined.

    Raises:
        ProfileResolutionError: If reading the link fails for any other reason.
    """
    try:
        link = os.readlink(profile_path)
    except OSError as e:
        if e.errno in _TOLERATED_ERRNOS:
            logger.debug("Cannot read profile link %s: %s", profile_path, e)
            return None
        msg = f"Failed to read profile link {profile_path}: {e}"
        raise ProfileResolutionError(msg) from e

    resolved = posixpath.join(posixpath.dirname(profile_path), link)
    generation = parse_generation(resolved)
    if generation is None:
        logger.debug("Profile %s points to %s, not a generation link", profile_path, link)
    return generation
