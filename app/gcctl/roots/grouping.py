"""Grouping of parsed roots into profiles and standalone roots.

A profile only exists if its symlink does, which can only be checked once
every root has been seen. Grouping therefore runs in two passes: collect
and confirm profile candidates, then assign each root.
"""

import logging
import os
from collections.abc import Iterable

from gcctl.roots.liveness import read_active_generation
from gcctl.roots.models import GenerationRoot, Profile, RootInventory, StandaloneRoot
from gcctl.roots.naming import parse_generation_link, profile_base_path
from gcctl.roots.parser import parse_root_listing

logger = logging.getLogger(__name__)


def group_roots(pairs: Iterable[tuple[str, str]]) -> RootInventory:
    """Partition (path, target) pairs into profiles and standalone roots.

    Args:
        pairs: Parsed listing entries in listing order.

    Returns:
        RootInventory with profiles sorted by path and standalone roots
        sorted by location.

    Raises:
        ProfileResolutionError: If a profile link cannot be read unexpectedly.
    """
    pairs = list(pairs)

    active_generations = _discover_profiles(pairs)

    generations: dict[str, dict[int, GenerationRoot]] = {path: {} for path in active_generations}
    standalone: list[StandaloneRoot] = []

    for location, target in pairs:
        base = profile_base_path(location)
        parsed = parse_generation_link(location)
        if base is None or parsed is None or base not in generations:
            standalone.append(StandaloneRoot(location=location, target=target))
            continue

        number = parsed[1]
        active = active_generations[base]
        if number in generations[base]:
            logger.debug("Duplicate generation %d of %s, keeping %s", number, base, location)
        generations[base][number] = GenerationRoot(
            location=location,
            target=target,
            generation=number,
            is_active=None if active is None else number == active,
        )

    profiles = tuple(
        Profile(
            path=path,
            active_generation=active_generations[path],
            generations=generations[path],
        )
        for path in sorted(active_generations)
    )
    standalone.sort(key=lambda root: (root.location, root.target))

    return RootInventory(profiles=profiles, standalone=tuple(standalone))


def build_inventory(listing: str) -> RootInventory:
    """Parse a raw root listing and group it into an inventory.

    Args:
        listing: Complete ``path -> target`` listing text.

    Returns:
        The grouped RootInventory.

    Raises:
        RootListingFormatError: If a listing line is malformed.
        ProfileResolutionError: If a profile link cannot be read unexpectedly.
    """
    return group_roots(parse_root_listing(listing))


def _discover_profiles(pairs: list[tuple[str, str]]) -> dict[str, int | None]:
    """Find live profiles referenced by generation links.

    Args:
        pairs: Parsed listing entries.

    Returns:
        Mapping of confirmed profile path to its active generation.
    """
    candidates = {
        base for location, _ in pairs if (base := profile_base_path(location)) is not None
    }

    profiles: dict[str, int | None] = {}
    for path in sorted(candidates):
        if not os.path.islink(path):
            logger.debug("Discarding profile candidate without symlink: %s", path)
            continue
        profiles[path] = read_active_generation(path)

    return profiles
