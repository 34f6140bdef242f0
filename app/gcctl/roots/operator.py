"""GC root deletion operator.

Removes garbage collection roots one by one with dry-run support. Each
root is re-checked against the deletion policy right before unlinking.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from gcctl.roots.models import Root

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RootDeletionResult:
    """Result of a single root deletion.

    Attributes:
        root: Root that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    root: Root
    success: bool
    error: str | None = None
    dry_run: bool = False

    @property
    def location(self) -> str:
        """Location of the root that was operated on."""
        return self.root.location


class RootOperator:
    """Handles deletion of garbage collection roots.

    Deletions are independent: a failure is reported against its root and
    the remaining roots are still processed. Nothing is rolled back.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the RootOperator.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    def delete(self, roots: Iterable[Root]) -> list[RootDeletionResult]:
        """Delete multiple roots and return results.

        Args:
            roots: Roots to delete.

        Returns:
            List of RootDeletionResult, one per input root.
        """
        return [self._delete_single(root) for root in roots]

    def _delete_single(self, root: Root) -> RootDeletionResult:
        """Delete a single root after re-checking the policy.

        Args:
            root: Root to delete.

        Returns:
            RootDeletionResult indicating success or failure.
        """
        if not root.deletable():
            return RootDeletionResult(
                root=root,
                success=False,
                error=f"Root is not deletable: {root.location}",
            )

        if self._dry_run:
            logger.info("Dry-run: would delete %s", root.location)
            return RootDeletionResult(root=root, success=True, dry_run=True)

        try:
            root.delete()
        except OSError as e:
            logger.warning("Failed to delete %s: %s", root.location, e)
            return RootDeletionResult(root=root, success=False, error=str(e))

        logger.info("Deleted %s", root)
        return RootDeletionResult(root=root, success=True)
