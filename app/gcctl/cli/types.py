"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from gcctl.core.config import ConfigError, load_config
from gcctl.roots.errors import GcRootsError
from gcctl.roots.models import RootInventory
from gcctl.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for the root inventory."""

    TEXT = "text"
    JSON = "json"


def load_inventory() -> RootInventory:
    """Load settings, list roots, and build the inventory.

    Any configuration or listing failure aborts the command; no partial
    inventory is ever returned.

    Returns:
        RootInventory from a fresh listing.

    Raises:
        typer.Exit: With code 1 if the inventory cannot be built.
    """
    try:
        config = load_config()
        return config.create_scanner().scan()
    except (ConfigError, GcRootsError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
