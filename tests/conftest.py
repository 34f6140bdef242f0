"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def mock_print_roots_output() -> str:
    """Sample nix-store --gc --print-roots output for testing."""
    return """\
/home/alice/src/project/result -> /nix/store/3x2zqk-project-1.0
/nix/var/nix/profiles/per-user/alice/profile-3-link -> /nix/store/a1b2c3-user-environment
/proc/1234/maps -> /nix/store/9f8e7d-glibc-2.39
/run/booted-system -> /nix/store/q1w2e3-nixos-system-24.05
{censored} -> /nix/store/z9y8x7-hidden
{lsof} -> /nix/store/k3j4h5-lsof-output
"""


@pytest.fixture
def profile_dir(tmp_path: Path) -> Path:
    """Directory holding a profile with generations 1 and 2, pointing at 2.

    Generation links point at store paths that do not exist, which is
    irrelevant for grouping: only the links themselves are inspected.
    """
    (tmp_path / "profile-1-link").symlink_to("/nix/store/aaaa-profile-1")
    (tmp_path / "profile-2-link").symlink_to("/nix/store/bbbb-profile-2")
    (tmp_path / "profile").symlink_to("profile-2-link")
    return tmp_path


@pytest.fixture
def profile_listing(profile_dir: Path) -> str:
    """Listing matching the profile_dir fixture plus one standalone root."""
    return "\n".join(
        [
            f"{profile_dir}/profile-1-link -> /nix/store/aaaa-profile-1",
            f"{profile_dir}/profile-2-link -> /nix/store/bbbb-profile-2",
            "/b/other -> /nix/store/zzzz-other",
        ]
    )
