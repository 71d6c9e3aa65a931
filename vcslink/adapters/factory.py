"""Factory classes for adapter and registry instantiation.

Keeps the CLI layer free from direct adapter imports. The factories use
lazy imports so that commands which never read configuration do not pay
for it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vcslink.core.registry import HostRegistry
    from vcslink.domain.config import VcslinkConfig
    from vcslink.ports.config import ConfigProvider


class ConfigFactory:
    """Factory for creating configuration-related instances."""

    def create_config_provider(self) -> ConfigProvider:
        """Create a TomlConfigProvider instance.

        Returns:
            TomlConfigProvider instance.
        """
        from vcslink.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()


class RegistryFactory:
    """Factory for creating host registries.

    Args:
        config: VcslinkConfig with extra hostnames per host.
    """

    def __init__(self, config: VcslinkConfig) -> None:
        """Initialize factory with configuration.

        Args:
            config: Configuration containing host settings.
        """
        self._config = config

    def create_registry(self) -> HostRegistry:
        """Create a registry honoring configured self-hosted instances.

        Returns the shared default registry when no extra hostnames are
        configured.

        Returns:
            HostRegistry instance.
        """
        from vcslink.core.registry import DEFAULT_REGISTRY, HostRegistry

        if not self._config.hosts.aliases():
            return DEFAULT_REGISTRY
        return HostRegistry.from_config(self._config)
