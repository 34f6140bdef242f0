"""Garbage collection root models.

This module defines the immutable inventory built from a root listing:
standalone roots, profile generation roots, and the profiles owning them.
"""

import os
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from gcctl.roots.naming import profile_base_path
from gcctl.roots.policy import can_unlink, is_excluded_path


@dataclass(frozen=True, slots=True)
class GcRoot(ABC):
    """A symlink that keeps a store path alive.

    Attributes:
        location: Path of the symlink itself.
        target: Store path the symlink points to.
    """

    location: str
    target: str

    def __post_init__(self) -> None:
        """Validate root data after initialization."""
        if not self.location:
            msg = "Root location cannot be empty"
            raise ValueError(msg)

    @abstractmethod
    def deletable(self) -> bool:
        """Check if this root may be removed without corrupting live state."""

    def delete(self) -> None:
        """Unlink the root's symlink.

        Only the symlink is removed; its target is never followed.

        Raises:
            OSError: If the symlink cannot be removed.
        """
        os.unlink(self.location)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "location": self.location,
            "target": self.target,
            "deletable": self.deletable(),
        }

    def __str__(self) -> str:
        return f"{self.location} -> {self.target}"


@dataclass(frozen=True, slots=True)
class StandaloneRoot(GcRoot):
    """A root that is not part of any profile."""

    def deletable(self) -> bool:
        """Deletable unless under /run or /proc, given a writable parent."""
        return not is_excluded_path(self.location) and can_unlink(self.location)


@dataclass(frozen=True, slots=True)
class GenerationRoot(GcRoot):
    """A numbered generation of a profile.

    Attributes:
        generation: Generation number, unique within the profile.
        is_active: Whether the profile currently points to this generation.
            None when the profile's active generation is unknown.
    """

    generation: int
    is_active: bool | None

    def __post_init__(self) -> None:
        """Validate generation data after initialization."""
        GcRoot.__post_init__(self)
        if self.generation < 0:
            msg = f"Generation must be non-negative, got {self.generation}"
            raise ValueError(msg)

    def deletable(self) -> bool:
        """Deletable only when known to be inactive, given a writable parent."""
        if self.is_active is not False:
            return False
        # Generations never live under runtime trees, refuse if one does.
        if is_excluded_path(self.location):
            return False
        return can_unlink(self.location)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            **GcRoot.to_dict(self),
            "generation": self.generation,
            "is_active": self.is_active,
        }


Root = StandaloneRoot | GenerationRoot


@dataclass(frozen=True, slots=True)
class Profile:
    """A profile symlink with its generations.

    The generation mapping is exposed as a read-only view ordered by
    ascending generation number.

    Attributes:
        path: Path of the profile symlink pointing at the active generation.
        active_generation: Generation the profile points to, None if it
            could not be determined (e.g. the symlink is unreadable).
        generations: Generation number to generation root.
    """

    path: str
    active_generation: int | None
    generations: Mapping[int, GenerationRoot] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate generations and freeze the mapping."""
        ordered = dict(sorted(self.generations.items()))

        for number, root in ordered.items():
            if root.generation != number:
                msg = f"Generation {root.generation} of {root.location} stored under key {number}"
                raise ValueError(msg)
            if profile_base_path(root.location) != self.path:
                msg = f"{root.location} is not a generation of profile {self.path}"
                raise ValueError(msg)
            expected = None if self.active_generation is None else number == self.active_generation
            if root.is_active is not expected:
                msg = (
                    f"Generation {number} of {self.path} has is_active={root.is_active}, "
                    f"expected {expected}"
                )
                raise ValueError(msg)

        object.__setattr__(self, "generations", MappingProxyType(ordered))

    @property
    def active_root(self) -> GenerationRoot | None:
        """Return the active generation root, if known and present."""
        if self.active_generation is None:
            return None
        return self.generations.get(self.active_generation)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "active_generation": self.active_generation,
            "generations": [root.to_dict() for root in self.generations.values()],
        }


@dataclass(frozen=True, slots=True)
class RootInventory:
    """All garbage collection roots from one listing snapshot.

    The inventory is never updated in place. After deleting roots, build
    a new one from a fresh listing.

    Attributes:
        profiles: Profiles sorted by path.
        standalone: Roots outside any profile, sorted by location.
    """

    profiles: tuple[Profile, ...] = ()
    standalone: tuple[StandaloneRoot, ...] = ()

    def __len__(self) -> int:
        return sum(len(p.generations) for p in self.profiles) + len(self.standalone)

    def roots(self) -> Iterator[Root]:
        """Yield every root once: profile generations first, then standalone."""
        for profile in self.profiles:
            yield from profile.generations.values()
        yield from self.standalone

    def deletable_roots(self, *, include_standalone: bool = True) -> list[Root]:
        """Collect roots that pass the deletion policy.

        Args:
            include_standalone: If False, only inactive generations are returned.

        Returns:
            Deletable roots in inventory order.
        """
        return [
            root
            for root in self.roots()
            if (include_standalone or isinstance(root, GenerationRoot)) and root.deletable()
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "profiles": [p.to_dict() for p in self.profiles],
            "standalone": [r.to_dict() for r in self.standalone],
            "summary": {
                "profiles": len(self.profiles),
                "generations": sum(len(p.generations) for p in self.profiles),
                "standalone": len(self.standalone),
                "total": len(self),
            },
        }
