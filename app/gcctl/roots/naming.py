"""Profile generation naming convention.

Nix names profile generations ``<profile>-<generation>-link`` and keeps
them next to the profile symlink itself, e.g.::

    /nix/var/nix/profiles/system          -> system-42-link
    /nix/var/nix/profiles/system-41-link  -> /nix/store/...-nixos-system
    /nix/var/nix/profiles/system-42-link  -> /nix/store/...-nixos-system

This is the only link between a generation root and its profile.
"""

import posixpath

_SEPARATOR = "-"
_LINK_SUFFIX = "link"


def parse_generation_link(path: str) -> tuple[str, int] | None:
    """Split a generation link path into profile name and generation number.

    Args:
        path: Filesystem path whose file name is inspected.

    Returns:
        Tuple of (profile name, generation number) if the file name matches
        ``<profile>-<generation>-link``, None otherwise.
    """
    file_name = posixpath.basename(path)
    if file_name.count(_SEPARATOR) < 2:
        return None

    name, generation, suffix = file_name.rsplit(_SEPARATOR, 2)
    if suffix != _LINK_SUFFIX:
        return None
    # int() alone would also accept "+3", " 3" and "3_0"
    if not (generation.isascii() and generation.isdigit()):
        return None
    if not name:
        return None

    return name, int(generation)


def parse_generation(path: str) -> int | None:
    """Return the generation number of a generation link, or None."""
    parsed = parse_generation_link(path)
    return parsed[1] if parsed is not None else None


def profile_base_path(path: str) -> str | None:
    """Return the path of the profile a generation link belongs to.

    The profile lives in the same directory as its generations, named
    after the profile alone: ``/a/profile-2-link`` belongs to ``/a/profile``.

    Args:
        path: Path of a potential generation link.

    Returns:
        Profile base path, or None if ``path`` is not a generation link.
    """
    if parse_generation_link(path) is None:
        return None
    # Both trailing separators are inside the file name.
    return path.rsplit(_SEPARATOR, 2)[0]
