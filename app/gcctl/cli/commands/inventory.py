"""Print command implementation.

Lists garbage collection roots grouped by profile.
"""

from typing import Annotated

import typer

from gcctl.cli.display import inventory_to_json, print_inventory, render_inventory
from gcctl.cli.types import OutputFormat, load_inventory
from gcctl.utils.formatting import console, print_info

app = typer.Typer(
    help="Print garbage collection roots.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def print_roots(
    ctx: typer.Context,
    plain: Annotated[
        bool,
        typer.Option(
            "--plain",
            "-p",
            help="Plain text without colors or annotations.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
) -> None:
    """Print garbage collection roots grouped by profile.

    Profile generations are listed newest first with the active one
    marked by '>'. Roots outside any profile follow after a blank line.

    Examples:
        gcctl print              # Styled output
        gcctl print --plain      # Plain text, e.g. for piping
        gcctl print -f json      # Machine-readable
    """
    inventory = load_inventory()

    if output_format == OutputFormat.JSON:
        typer.echo(inventory_to_json(inventory))
        return

    if plain:
        typer.echo(render_inventory(inventory))
        return

    if len(inventory) == 0:
        print_info("No garbage collection roots found.")
        return

    print_inventory(inventory)

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    if not quiet:
        generations = sum(len(p.generations) for p in inventory.profiles)
        console.print(
            f"\n[dim]{len(inventory.profiles)} profile(s) with {generations} generation(s), "
            f"{len(inventory.standalone)} standalone root(s)[/dim]"
        )
