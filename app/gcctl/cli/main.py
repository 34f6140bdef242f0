"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from gcctl import __version__
from gcctl.cli.commands import clean, config, inventory
from gcctl.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="gcctl",
    help="Inventory and prune Nix garbage collection roots.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"gcctl version {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    """Send log records to stderr, debug records only when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """gcctl - Inventory and prune Nix garbage collection roots.

    Groups the roots reported by nix-store into profiles and their
    generations, and removes the ones that are safe to delete.
    """
    _setup_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(inventory.app, name="print")
app.add_typer(clean.app, name="clean")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
