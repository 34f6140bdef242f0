"""Garbage collection root inventory.

This module parses root listings, groups profile generations into
profiles, and decides which roots can be removed safely.
"""

from gcctl.roots.errors import (
    GcRootsError,
    ProfileResolutionError,
    RootListingError,
    RootListingFormatError,
)
from gcctl.roots.grouping import build_inventory, group_roots
from gcctl.roots.models import GcRoot, GenerationRoot, Profile, Root, RootInventory, StandaloneRoot
from gcctl.roots.operator import RootDeletionResult, RootOperator
from gcctl.roots.scanner import DEFAULT_LISTING_COMMAND, RootScanner

__all__ = [
    "DEFAULT_LISTING_COMMAND",
    "GcRoot",
    "GcRootsError",
    "GenerationRoot",
    "Profile",
    "ProfileResolutionError",
    "Root",
    "RootDeletionResult",
    "RootInventory",
    "RootListingError",
    "RootListingFormatError",
    "RootOperator",
    "RootScanner",
    "StandaloneRoot",
    "build_inventory",
    "group_roots",
]
