"""Configuration I/O utilities for reading and writing TOML config files.

This module handles serialization/deserialization of VcslinkConfig to/from TOML format.
"""

import os
import platform
import tomllib  # Built-in Python 3.11+
from pathlib import Path
from typing import Any

import tomli_w

from vcslink.domain.config import VcslinkConfig


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/vcslink/config.toml or ~/.config/vcslink/config.toml
    - Windows: %APPDATA%/vcslink/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "vcslink" / "config.toml"
        return Path.home() / ".config" / "vcslink" / "config.toml"
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "vcslink" / "config.toml"
        return Path.home() / ".config" / "vcslink" / "config.toml"


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def load_config(path: Path) -> VcslinkConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to config.toml file

    Returns:
        Parsed VcslinkConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed or fails validation
    """
    data = load_config_data(path)
    return VcslinkConfig.from_partial(VcslinkConfig.default(), data)


def config_to_data(config: VcslinkConfig) -> dict[str, Any]:
    """Convert a VcslinkConfig to a TOML-serializable dictionary."""
    return {
        "hosts": {
            "github": list(config.hosts.github),
            "gitlab": list(config.hosts.gitlab),
            "bitbucket": list(config.hosts.bitbucket),
            "sourcehut": list(config.hosts.sourcehut),
        },
        "output": {
            "format": config.output.format,
        },
    }


def save_config(config: VcslinkConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: VcslinkConfig to save
        path: Destination path for config.toml
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump(config_to_data(config), f)


def create_default_config_file(path: Path) -> None:
    """Create a default config.toml file with comments.

    Args:
        path: Destination path for config.toml
    """
    # Template string preserves the comments tomli_w would drop
    template = """\
# vcslink configuration
# Created by: vcslink config init

[hosts]
# Extra hostnames treated like the public instance of each host,
# e.g. GitHub Enterprise or a self-managed GitLab.
github = []
gitlab = []
bitbucket = []
sourcehut = []

[output]
# Output format for resolve: "text" or "json"
format = "text"
"""

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        f.write(template)
