"""Unit tests for RootOperator.

Tests deletion of roots, policy refusal, dry-run mode, and per-root
error isolation.
"""

from pathlib import Path
from unittest.mock import patch

from gcctl.roots.models import GenerationRoot, StandaloneRoot
from gcctl.roots.operator import RootOperator


def _inactive_generation(profile_dir: Path, number: int) -> GenerationRoot:
    return GenerationRoot(
        location=str(profile_dir / f"profile-{number}-link"),
        target=f"/nix/store/gen-{number}",
        generation=number,
        is_active=False,
    )


class TestRootOperator:
    """Tests for RootOperator."""

    def test_delete_inactive_generation(self, profile_dir: Path) -> None:
        """An inactive generation link is removed."""
        root = _inactive_generation(profile_dir, 1)

        results = RootOperator().delete([root])

        assert len(results) == 1
        assert results[0].success is True
        assert results[0].dry_run is False
        assert results[0].location == root.location
        assert not (profile_dir / "profile-1-link").is_symlink()
        # The profile and the active generation are untouched
        assert (profile_dir / "profile").is_symlink()
        assert (profile_dir / "profile-2-link").is_symlink()

    def test_delete_standalone(self, tmp_path: Path) -> None:
        """A standalone root symlink is removed."""
        link = tmp_path / "result"
        link.symlink_to("/nix/store/abc-hello")

        root = StandaloneRoot(location=str(link), target="/nix/store/abc")

        results = RootOperator().delete([root])

        assert results[0].success is True
        assert not link.is_symlink()

    def test_active_generation_refused(self, profile_dir: Path) -> None:
        """The active generation is never deleted."""
        root = GenerationRoot(
            location=str(profile_dir / "profile-2-link"),
            target="/nix/store/bbbb-profile-2",
            generation=2,
            is_active=True,
        )

        results = RootOperator().delete([root])

        assert results[0].success is False
        assert results[0].error is not None
        assert "not deletable" in results[0].error
        assert (profile_dir / "profile-2-link").is_symlink()

    def test_dry_run(self, profile_dir: Path) -> None:
        """Dry-run mode reports success without deleting anything."""
        root = _inactive_generation(profile_dir, 1)

        results = RootOperator(dry_run=True).delete([root])

        assert results[0].success is True
        assert results[0].dry_run is True
        assert results[0].error is None
        assert (profile_dir / "profile-1-link").is_symlink()

    def test_already_removed(self, tmp_path: Path) -> None:
        """A root removed since inspection fails without raising."""
        root = StandaloneRoot(location=str(tmp_path / "gone"), target="/nix/store/abc")

        results = RootOperator().delete([root])

        assert results[0].success is False
        assert results[0].error is not None

    def test_failure_does_not_stop_others(self, tmp_path: Path) -> None:
        """One failing root does not prevent the rest from being deleted."""
        first = tmp_path / "first"
        first.symlink_to("/nix/store/a")
        last = tmp_path / "last"
        last.symlink_to("/nix/store/c")
        roots = [
            StandaloneRoot(location=str(first), target="/nix/store/a"),
            StandaloneRoot(location=str(tmp_path / "missing"), target="/nix/store/b"),
            StandaloneRoot(location=str(last), target="/nix/store/c"),
        ]

        results = RootOperator().delete(roots)

        assert [r.success for r in results] == [True, False, True]
        assert not first.is_symlink()
        assert not last.is_symlink()

    def test_permission_error(self, tmp_path: Path) -> None:
        """OSError during unlink is reported against the root."""
        link = tmp_path / "result"
        link.symlink_to("/nix/store/abc")
        root = StandaloneRoot(location=str(link), target="/nix/store/abc")

        with patch(
            "gcctl.roots.models.os.unlink", side_effect=PermissionError("Permission denied")
        ):
            results = RootOperator().delete([root])

        assert results[0].success is False
        assert results[0].error is not None
        assert "Permission denied" in results[0].error

    def test_policy_rechecked(self, tmp_path: Path) -> None:
        """Roots whose parent became unwritable are refused."""
        link = tmp_path / "result"
        link.symlink_to("/nix/store/abc")
        root = StandaloneRoot(location=str(link), target="/nix/store/abc")

        with patch("gcctl.roots.models.can_unlink", return_value=False):
            results = RootOperator().delete([root])

        assert results[0].success is False
        assert link.is_symlink()

    def test_delete_empty_list(self) -> None:
        """Deleting nothing returns no results."""
        assert RootOperator().delete([]) == []
