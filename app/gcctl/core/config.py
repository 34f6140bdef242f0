"""gcctl settings.

Configuration is stored in ~/.config/gcctl/config.toml. A missing file
means defaults: list roots with ``nix-store --gc --print-roots``.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gcctl.core.paths import get_config_path
from gcctl.roots.scanner import DEFAULT_LISTING_COMMAND, RootScanner

DEFAULT_TIMEOUT_SECONDS = 300


class GcctlConfig(BaseModel):
    """Settings for listing garbage collection roots.

    Attributes:
        listing_command: Command printing ``<path> -> <target>`` lines.
        timeout_seconds: Maximum time for the listing command in seconds.
    """

    model_config = ConfigDict(extra="forbid")

    listing_command: Annotated[
        list[str],
        Field(min_length=1, description="Root listing command and arguments"),
    ] = list(DEFAULT_LISTING_COMMAND)
    timeout_seconds: Annotated[
        int,
        Field(ge=1, le=3600, description="Listing timeout in seconds (1-3600)"),
    ] = DEFAULT_TIMEOUT_SECONDS

    def create_scanner(self) -> RootScanner:
        """Build a RootScanner from these settings."""
        return RootScanner(self.listing_command, timeout=self.timeout_seconds)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> GcctlConfig:
    """Load settings from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated GcctlConfig, defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return GcctlConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return GcctlConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: GcctlConfig, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The GcctlConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path


def config_to_dict(config: GcctlConfig) -> dict[str, object]:
    """Convert GcctlConfig to a dictionary for TOML serialization.

    Args:
        config: The GcctlConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return {
        "listing_command": list(config.listing_command),
        "timeout_seconds": config.timeout_seconds,
    }
