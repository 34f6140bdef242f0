"""Clean command implementation.

Deletes inactive profile generations and, optionally, standalone roots
that pass the deletion policy.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from gcctl.cli.display import create_results_table, print_results_summary
from gcctl.cli.types import load_inventory
from gcctl.roots.models import GenerationRoot, Root
from gcctl.roots.operator import RootOperator
from gcctl.utils.formatting import console, print_info, print_success

app = typer.Typer(
    help="Delete unneeded garbage collection roots.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean(
    ctx: typer.Context,
    standalone: Annotated[
        bool,
        typer.Option(
            "--standalone",
            help="Also delete deletable roots outside any profile.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete inactive profile generations.

    Only the root symlinks are removed; the store paths they point to are
    freed by the next garbage collection. Active generations, generations
    of profiles whose active generation is unknown, and roots under /run
    or /proc are never deleted.

    With --quiet only the prompt and the final summary are printed.
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    inventory = load_inventory()

    roots = inventory.deletable_roots(include_standalone=standalone)
    if not roots:
        print_success("Nothing to clean. No deletable roots found.")
        return

    if not quiet:
        _print_deletion_plan(roots, dry_run)

    if not dry_run and not yes:
        confirmed = typer.confirm(
            f"\nProceed with deleting {len(roots)} root(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    operator = RootOperator(dry_run=dry_run)
    results = operator.delete(roots)

    if not quiet:
        console.print(create_results_table(results))
    print_results_summary(results)

    if any(not r.success for r in results):
        raise typer.Exit(code=1)


def _print_deletion_plan(roots: list[Root], dry_run: bool) -> None:
    """Display planned deletions."""
    label = "Planned Deletions (dry-run)" if dry_run else "Planned Deletions"
    table = Table(
        title=label,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Root", no_wrap=True)
    table.add_column("Generation", justify="right")
    table.add_column("Target", style="store_path")

    for root in roots:
        generation = str(root.generation) if isinstance(root, GenerationRoot) else "-"
        table.add_row(escape(root.location), generation, escape(root.target))

    console.print(table)
