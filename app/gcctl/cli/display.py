"""Rendering of the root inventory.

Provides the plain-text layout used by ``gcctl print --plain``, its
Rich-styled counterpart, JSON output, and the deletion results table
shared by the clean command.
"""

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gcctl.roots.models import GenerationRoot, Profile, RootInventory
from gcctl.roots.operator import RootDeletionResult
from gcctl.utils.formatting import console, print_info, print_success, print_warning


def _generation_width(profile: Profile) -> int:
    """Number of digits of the largest generation number."""
    if not profile.generations:
        return 1
    return len(str(max(profile.generations)))


def _newest_first(profile: Profile) -> list[tuple[int, GenerationRoot]]:
    return sorted(profile.generations.items(), reverse=True)


def render_profile(profile: Profile) -> str:
    """Render a profile and its generations as plain text.

    The profile path comes first, followed by one line per generation,
    newest first. The active generation is marked with ``>``; a profile
    whose active generation is unknown has no marked line::

        /nix/var/nix/profiles/system
        > 10 -> /nix/store/...-nixos-system
           9 -> /nix/store/...-nixos-system

    Args:
        profile: Profile to render.

    Returns:
        Multi-line string without a trailing newline.
    """
    width = _generation_width(profile)
    lines = [profile.path]
    for number, root in _newest_first(profile):
        marker = ">" if root.is_active else " "
        lines.append(f"{marker} {number:>{width}} -> {root.target}")
    return "\n".join(lines)


def render_inventory(inventory: RootInventory) -> str:
    """Render a whole inventory as plain text.

    Profiles are separated by blank lines. Standalone roots follow all
    profiles after another blank line, one ``<location> -> <target>`` each.

    Args:
        inventory: Inventory to render.

    Returns:
        Multi-line string without a trailing newline.
    """
    sections = [render_profile(profile) for profile in inventory.profiles]
    if inventory.standalone:
        sections.append("\n".join(str(root) for root in inventory.standalone))
    return "\n\n".join(sections)


def print_inventory(inventory: RootInventory, out: Console = console) -> None:
    """Print an inventory with theme styles.

    Same layout as render_inventory(). Profiles with an unknown active
    generation are annotated, and standalone roots that cannot be deleted
    are highlighted as protected.

    Args:
        inventory: Inventory to print.
        out: Console to print to.
    """
    for index, profile in enumerate(inventory.profiles):
        if index:
            out.print()

        header = f"[profile]{escape(profile.path)}[/]"
        if profile.active_generation is None:
            header += " [muted](active generation unknown)[/]"
        out.print(header, highlight=False, soft_wrap=True)

        width = _generation_width(profile)
        for number, root in _newest_first(profile):
            target = f"[store_path]{escape(root.target)}[/]"
            if root.is_active:
                line = f"[active]> {number:>{width}}[/] -> {target}"
            else:
                line = f"[inactive]  {number:>{width}}[/] -> {target}"
            out.print(line, highlight=False, soft_wrap=True)

    if not inventory.standalone:
        return

    if inventory.profiles:
        out.print()
    for root in inventory.standalone:
        style = "text" if root.deletable() else "protected"
        out.print(
            f"[{style}]{escape(root.location)}[/] -> [store_path]{escape(root.target)}[/]",
            highlight=False,
            soft_wrap=True,
        )


def inventory_to_json(inventory: RootInventory) -> str:
    """Serialize an inventory to indented JSON."""
    return json.dumps(inventory.to_dict(), indent=2)


def create_results_table(results: list[RootDeletionResult]) -> Table:
    """Create a Rich table displaying deletion results.

    Args:
        results: List of deletion results.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Root", no_wrap=True)
    table.add_column("Status", width=10)
    table.add_column("Details", style="muted")

    for result in results:
        if result.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would delete"
        elif result.success:
            status = "[success]deleted[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = result.error or "Unknown error"
        table.add_row(escape(result.location), status, escape(detail))

    return table


def print_results_summary(results: list[RootDeletionResult]) -> None:
    """Print a summary of deletion results.

    Args:
        results: List of deletion results.
    """
    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if not r.success)
    dry_count = sum(1 for r in results if r.dry_run)

    if dry_count:
        print_info(f"Dry-run: {dry_count} root(s) would be deleted.")
    elif fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"All {success_count} root(s) deleted successfully.")
