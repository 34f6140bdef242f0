"""CLI commands for gcctl.

This package contains all subcommand implementations.
"""

from gcctl.cli.commands import clean, config, inventory

__all__ = ["clean", "config", "inventory"]
