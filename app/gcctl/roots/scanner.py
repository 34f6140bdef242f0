"""GC root scanner.

Lists garbage collection roots with ``nix-store --gc --print-roots`` and
groups them into a RootInventory.
"""

import logging
import shlex
import subprocess

from gcctl.roots.errors import RootListingError
from gcctl.roots.grouping import build_inventory
from gcctl.roots.models import RootInventory
from gcctl.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

DEFAULT_LISTING_COMMAND: tuple[str, ...] = ("nix-store", "--gc", "--print-roots")


class RootScanner:
    """Scanner for Nix garbage collection roots.

    Args:
        command: Listing command and arguments. Must print one
            ``<path> -> <target>`` line per root.
        timeout: Maximum time in seconds to wait for the listing, None to
            wait indefinitely.
    """

    def __init__(
        self,
        command: tuple[str, ...] | list[str] = DEFAULT_LISTING_COMMAND,
        *,
        timeout: float | None = None,
    ) -> None:
        if not command:
            msg = "Listing command cannot be empty"
            raise ValueError(msg)
        self._command = list(command)
        self._timeout = timeout

    @property
    def command_line(self) -> str:
        """Return the listing command as a shell-quoted string."""
        return shlex.join(self._command)

    def is_available(self) -> bool:
        """Check if the listing command is available."""
        return command_exists(self._command[0])

    def list_roots(self) -> str:
        """Run the listing command and return its raw output.

        Returns:
            Listing output decoded as UTF-8.

        Raises:
            RootListingError: If the command is missing, times out, exits
                non-zero, or prints non-UTF-8 output.
        """
        logger.debug("Running %s", self.command_line)

        try:
            result = run_command(self._command, timeout=self._timeout)
        except FileNotFoundError as e:
            msg = f'"{self.command_line}" could not be run: {self._command[0]} not found'
            raise RootListingError(msg) from e
        except subprocess.TimeoutExpired as e:
            msg = f'"{self.command_line}" timed out after {self._timeout} seconds'
            raise RootListingError(msg) from e
        except UnicodeDecodeError as e:
            msg = f'"{self.command_line}" printed output that is not valid UTF-8: {e}'
            raise RootListingError(msg) from e
        except OSError as e:
            msg = f'"{self.command_line}" could not be run: {e}'
            raise RootListingError(msg) from e

        if not result.success:
            msg = f'"{self.command_line}" exited with code {result.returncode}'
            stderr = result.stderr.strip()
            if stderr:
                msg = f"{msg}: {stderr}"
            raise RootListingError(msg)

        return result.stdout

    def scan(self) -> RootInventory:
        """List and group all garbage collection roots.

        Returns:
            RootInventory built from a single listing snapshot.

        Raises:
            RootListingError: If the listing fails or is malformed.
            ProfileResolutionError: If a profile link cannot be read unexpectedly.
        """
        inventory = build_inventory(self.list_roots())
        logger.debug(
            "Found %d roots in %d profiles, %d standalone",
            len(inventory),
            len(inventory.profiles),
            len(inventory.standalone),
        )
        return inventory
