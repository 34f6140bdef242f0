"""CLI package for gcctl.

This package contains the Typer application and all subcommands.
"""

from gcctl.cli.main import app

__all__ = ["app"]
