"""TOML-based configuration provider.

Config loading priority (highest to lowest):
1. Explicit: a file passed with --config
2. Global: ~/.config/vcslink/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from vcslink.domain.config import VcslinkConfig
from vcslink.shared.config_io import get_global_config_path, load_config_data

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Implements config cascade:
    1. Load global config (~/.config/vcslink/config.toml) if present
    2. Load explicit config if given
    3. Explicit values override global values (section-level merge)
    4. Missing values fall back to built-in defaults

    Gracefully handles missing or invalid configs with warnings.
    """

    def load(self, config_path: Path | None = None) -> VcslinkConfig:
        """Load configuration with global fallback.

        Args:
            config_path: Optional explicit config.toml

        Returns:
            VcslinkConfig instance with merged values or defaults
        """
        config = VcslinkConfig.default()

        global_path = get_global_config_path()
        if global_path.exists():
            config = self._apply(config, global_path, "global config")

        if config_path is not None:
            if config_path.exists():
                config = self._apply(config, config_path, "config")
            else:
                logger.warning("Config file %s not found. Ignoring it.", config_path)

        return config

    @staticmethod
    def _apply(config: VcslinkConfig, path: Path, label: str) -> VcslinkConfig:
        try:
            data = load_config_data(path)
            merged = VcslinkConfig.from_partial(config, data)
            logger.debug("Loaded %s from %s", label, path)
            return merged
        except (FileNotFoundError, ValueError, TypeError) as e:
            logger.warning(
                "Failed to parse %s at %s: %s. Ignoring it.",
                label,
                path,
                e,
            )
            return config
