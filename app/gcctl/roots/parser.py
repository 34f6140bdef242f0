"""Parser for ``nix-store --gc --print-roots`` output.

Each line of the listing has the form ``<path> -> <target>``.
"""

import logging

from gcctl.roots.errors import RootListingFormatError

logger = logging.getLogger(__name__)

ROOT_SEPARATOR = " -> "

# Roots held by running processes come and go with the process.
_PROCESS_ROOT_PREFIX = "/proc"


def parse_root_line(line: str) -> tuple[str, str] | None:
    """Parse a single listing line into a (path, target) pair.

    Splits on the last separator so paths containing spaces stay intact.
    Process-held roots (``/proc/...``) and synthetic entries wrapped in
    braces (e.g. ``{censored}``) are dropped.

    Args:
        line: One line of listing output, without the line terminator.

    Returns:
        Tuple of (path, target), or None if the line is excluded.

    Raises:
        RootListingFormatError: If the line has no `` -> `` separator.
    """
    path, separator, target = line.rpartition(ROOT_SEPARATOR)
    if not separator:
        msg = f"Root listing line is missing {ROOT_SEPARATOR.strip()!r}: {line!r}"
        raise RootListingFormatError(msg)

    if path.startswith(_PROCESS_ROOT_PREFIX):
        logger.debug("Skipping process root: %s", path)
        return None

    if path.startswith("{") and path.endswith("}"):
        logger.debug("Skipping synthetic root: %s", path)
        return None

    return path, target


def parse_root_listing(text: str) -> list[tuple[str, str]]:
    """Parse a full root listing, preserving line order.

    Args:
        text: Complete listing output.

    Returns:
        List of (path, target) pairs for every line that is not excluded.

    Raises:
        RootListingFormatError: If any non-empty line is malformed.
    """
    pairs: list[tuple[str, str]] = []

    # Only "\n" ends a line; other line breaks are valid in file names.
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if not line:
            continue
        parsed = parse_root_line(line)
        if parsed is not None:
            pairs.append(parsed)

    return pairs
