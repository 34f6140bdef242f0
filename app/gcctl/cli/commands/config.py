"""Config command implementation.

Shows and initializes gcctl settings in ~/.config/gcctl/config.toml.
"""

from typing import Annotated

import typer

from gcctl.core.config import ConfigError, GcctlConfig, load_config, save_config
from gcctl.core.paths import get_config_path
from gcctl.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show and initialize settings.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings."""
    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    config_path = get_config_path()
    source = str(config_path) if config_path.exists() else "defaults"
    console.print(f"[muted]Source:[/] {source}", highlight=False)
    console.print(f"listing_command = {config.listing_command!r}", highlight=False)
    console.print(f"timeout_seconds = {config.timeout_seconds}", highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_warning(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(GcctlConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def path() -> None:
    """Print the config file path."""
    typer.echo(str(get_config_path()))
