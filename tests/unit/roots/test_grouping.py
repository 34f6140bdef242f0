"""Unit tests for grouping roots into profiles."""

from pathlib import Path
from unittest.mock import patch

import pytest
from gcctl.roots.errors import ProfileResolutionError, RootListingFormatError
from gcctl.roots.grouping import build_inventory, group_roots
from gcctl.roots.models import GenerationRoot, StandaloneRoot


class TestGroupRoots:
    """Tests for group_roots function."""

    def test_profile_with_active_generation(self, profile_dir: Path) -> None:
        """Generations are grouped under their live profile.

        The listed profile link is not a generation link, so it is kept as a
        standalone root; every listed root ends up in exactly one place.
        """
        pairs = [
            (f"{profile_dir}/profile-1-link", "/nix/store/xxx"),
            (f"{profile_dir}/profile-2-link", "/nix/store/yyy"),
            (f"{profile_dir}/profile", f"{profile_dir}/profile-2-link"),
            ("/b/other", "/nix/store/zzz"),
        ]

        inventory = group_roots(pairs)

        assert len(inventory.profiles) == 1
        profile = inventory.profiles[0]
        assert profile.path == f"{profile_dir}/profile"
        assert profile.active_generation == 2
        assert list(profile.generations) == [1, 2]
        assert profile.generations[2].is_active is True
        assert profile.generations[1].is_active is False
        assert profile.generations[1].target == "/nix/store/xxx"

        # The profile link itself is not a generation link
        standalone = [root.location for root in inventory.standalone]
        assert standalone == sorted([f"{profile_dir}/profile", "/b/other"])

    def test_scenario_without_profile_link_in_listing(self, profile_dir: Path) -> None:
        """/b/other is the sole standalone root when the profile is not listed."""
        pairs = [
            (f"{profile_dir}/profile-1-link", "/nix/store/xxx"),
            (f"{profile_dir}/profile-2-link", "/nix/store/yyy"),
            ("/b/other", "/nix/store/zzz"),
        ]

        inventory = group_roots(pairs)

        assert inventory.standalone == (
            StandaloneRoot(location="/b/other", target="/nix/store/zzz"),
        )
        assert set(inventory.profiles[0].generations) == {1, 2}

    def test_candidate_without_symlink_is_standalone(self, tmp_path: Path) -> None:
        """Generation links of a profile that does not exist stay standalone."""
        pairs = [(f"{tmp_path}/ghost-4-link", "/nix/store/ggg")]

        inventory = group_roots(pairs)

        assert inventory.profiles == ()
        assert inventory.standalone == (
            StandaloneRoot(location=f"{tmp_path}/ghost-4-link", target="/nix/store/ggg"),
        )

    def test_candidate_regular_file_is_standalone(self, tmp_path: Path) -> None:
        """A regular file at the profile path does not make a profile."""
        (tmp_path / "profile").write_text("")
        pairs = [(f"{tmp_path}/profile-1-link", "/nix/store/aaa")]

        inventory = group_roots(pairs)

        assert inventory.profiles == ()
        assert len(inventory.standalone) == 1

    def test_unknown_active_generation(self, profile_dir: Path) -> None:
        """Generations of an unreadable profile have unknown activity."""
        pairs = [
            (f"{profile_dir}/profile-1-link", "/nix/store/xxx"),
            (f"{profile_dir}/profile-2-link", "/nix/store/yyy"),
        ]

        with patch("gcctl.roots.grouping.read_active_generation", return_value=None):
            inventory = group_roots(pairs)

        profile = inventory.profiles[0]
        assert profile.active_generation is None
        assert all(root.is_active is None for root in profile.generations.values())

    def test_active_generation_not_listed(self, profile_dir: Path) -> None:
        """A profile pointing at an unlisted generation has no active root."""
        pairs = [(f"{profile_dir}/profile-1-link", "/nix/store/xxx")]

        inventory = group_roots(pairs)

        profile = inventory.profiles[0]
        assert profile.active_generation == 2
        assert profile.active_root is None
        assert profile.generations[1].is_active is False

    def test_duplicate_generation_last_wins(self, profile_dir: Path) -> None:
        """A repeated generation keeps the last listed entry."""
        pairs = [
            (f"{profile_dir}/profile-1-link", "/nix/store/first"),
            (f"{profile_dir}/profile-1-link", "/nix/store/second"),
        ]

        inventory = group_roots(pairs)

        assert inventory.profiles[0].generations[1].target == "/nix/store/second"

    def test_multiple_profiles_sorted(self, tmp_path: Path) -> None:
        """Profiles are ordered by path."""
        for name in ("zeta", "alpha"):
            (tmp_path / f"{name}-1-link").symlink_to("/nix/store/x")
            (tmp_path / name).symlink_to(f"{name}-1-link")
        pairs = [
            (f"{tmp_path}/zeta-1-link", "/nix/store/z"),
            (f"{tmp_path}/alpha-1-link", "/nix/store/a"),
        ]

        inventory = group_roots(pairs)

        assert [p.path for p in inventory.profiles] == [f"{tmp_path}/alpha", f"{tmp_path}/zeta"]

    def test_standalone_sorted_by_location(self) -> None:
        """Standalone roots are ordered by location."""
        pairs = [
            ("/z/result", "/nix/store/3"),
            ("/a/result", "/nix/store/1"),
            ("/m/result", "/nix/store/2"),
        ]

        inventory = group_roots(pairs)

        assert [r.location for r in inventory.standalone] == ["/a/result", "/m/result", "/z/result"]

    def test_every_root_counted_once(self, profile_dir: Path) -> None:
        """Each root lands in exactly one profile or the standalone list."""
        pairs = [
            (f"{profile_dir}/profile-1-link", "/nix/store/xxx"),
            (f"{profile_dir}/profile-2-link", "/nix/store/yyy"),
            (f"{profile_dir}/other-9-link", "/nix/store/ooo"),
            ("/run/current-system", "/nix/store/sys"),
            ("/home/alice/result", "/nix/store/res"),
        ]

        inventory = group_roots(pairs)

        assert len(inventory) == len(pairs)
        locations = [root.location for root in inventory.roots()]
        assert sorted(locations) == sorted(location for location, _ in pairs)
        kinds = {root.location: type(root) for root in inventory.roots()}
        assert kinds[f"{profile_dir}/profile-1-link"] is GenerationRoot
        assert kinds[f"{profile_dir}/other-9-link"] is StandaloneRoot

    def test_at_most_one_active_generation(self, profile_dir: Path) -> None:
        """Only the generation the profile points to is active."""
        (profile_dir / "profile-3-link").symlink_to("/nix/store/cccc")
        pairs = [(f"{profile_dir}/profile-{n}-link", f"/nix/store/{n}") for n in (1, 2, 3)]

        inventory = group_roots(pairs)

        active = [r for r in inventory.profiles[0].generations.values() if r.is_active]
        assert [r.generation for r in active] == [2]

    def test_resolution_error_propagates(self, profile_dir: Path) -> None:
        """Unexpected profile read failures abort grouping."""
        pairs = [(f"{profile_dir}/profile-1-link", "/nix/store/xxx")]

        with (
            patch(
                "gcctl.roots.grouping.read_active_generation",
                side_effect=ProfileResolutionError("boom"),
            ),
            pytest.raises(ProfileResolutionError),
        ):
            group_roots(pairs)

    def test_empty_input(self) -> None:
        """No roots, empty inventory."""
        inventory = group_roots([])

        assert inventory.profiles == ()
        assert inventory.standalone == ()
        assert len(inventory) == 0


class TestBuildInventory:
    """Tests for build_inventory function."""

    def test_from_listing_text(self, profile_listing: str, profile_dir: Path) -> None:
        """Raw listing text is parsed and grouped."""
        inventory = build_inventory(profile_listing)

        assert [p.path for p in inventory.profiles] == [f"{profile_dir}/profile"]
        assert inventory.profiles[0].active_generation == 2
        assert [r.location for r in inventory.standalone] == ["/b/other"]

    def test_malformed_listing(self) -> None:
        """Malformed listing lines abort before grouping."""
        with pytest.raises(RootListingFormatError):
            build_inventory("no separator here\n")
