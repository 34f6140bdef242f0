"""Exceptions raised while inventorying garbage collection roots.

Only conditions that make the whole inventory untrustworthy are raised.
Tolerated conditions (an unreadable profile link, an unwritable parent
directory) are reported through the model instead.
"""


class GcRootsError(Exception):
    """Base exception for GC root inventory errors."""


class RootListingError(GcRootsError):
    """Raised when the root listing command cannot produce a listing."""


class RootListingFormatError(RootListingError):
    """Raised when a listing line does not have the ``path -> target`` shape."""


class ProfileResolutionError(GcRootsError):
    """Raised when reading a profile link fails unexpectedly."""
