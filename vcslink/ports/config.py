"""Configuration provider port.

Defines the interface for loading and accessing application configuration.
"""

from pathlib import Path
from typing import Protocol

from vcslink.domain.config import VcslinkConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, config_path: Path | None = None) -> VcslinkConfig:
        """Load configuration.

        Args:
            config_path: Optional explicit config.toml overriding the global one

        Returns:
            VcslinkConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config file is missing or invalid.
        """
        ...
