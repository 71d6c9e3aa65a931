"""Config domain models for vcslink.

Configuration is stored in config.toml and represents user preferences for
host recognition and output. This module defines the domain models that
represent validated configuration state.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Literal

# Keys of the [hosts] section, one per host variant.
HOST_KEYS: tuple[str, ...] = ("github", "gitlab", "bitbucket", "sourcehut")


def _validate_hostnames(key: str, hostnames: list[str]) -> None:
    if not isinstance(hostnames, list):
        raise ValueError(f"hosts.{key} must be a list of hostnames")
    for hostname in hostnames:
        if not isinstance(hostname, str) or not hostname.strip():
            raise ValueError(f"hosts.{key} contains an empty hostname")
        if "://" in hostname or "/" in hostname:
            raise ValueError(
                f"hosts.{key} entry '{hostname}' must be a bare hostname "
                "without scheme or path"
            )


@dataclass(frozen=True)
class HostsConfig:
    """Extra hostnames recognized as instances of a known host.

    Used for self-hosted installations such as GitHub Enterprise or
    private GitLab instances.

    Attributes:
        github: Hostnames handled like github.com
        gitlab: Hostnames handled like gitlab.com
        bitbucket: Hostnames handled like bitbucket.org
        sourcehut: Hostnames handled like sr.ht

    Raises:
        ValueError: If a hostname is empty or includes a scheme or path.
    """

    github: list[str] = field(default_factory=list)
    gitlab: list[str] = field(default_factory=list)
    bitbucket: list[str] = field(default_factory=list)
    sourcehut: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate hostnames after initialization."""
        for key in HOST_KEYS:
            _validate_hostnames(key, getattr(self, key))

    def aliases(self) -> dict[str, str]:
        """Map each lowercased extra hostname to its host key."""
        return {
            hostname.strip().lower(): key
            for key in HOST_KEYS
            for hostname in getattr(self, key)
        }


@dataclass(frozen=True)
class OutputConfig:
    """Configuration for CLI output.

    Attributes:
        format: Output format - "text" (default) or "json"

    Raises:
        ValueError: If format is not supported.
    """

    format: Literal["text", "json"] = "text"

    def __post_init__(self) -> None:
        """Validate output config after initialization."""
        if self.format not in ("text", "json"):
            raise ValueError(f"format must be 'text' or 'json', got '{self.format}'")


@dataclass(frozen=True)
class VcslinkConfig:
    """Complete vcslink configuration.

    Attributes:
        hosts: Extra hostnames per host variant
        output: Output formatting configuration
    """

    hosts: HostsConfig = field(default_factory=HostsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def default() -> "VcslinkConfig":
        """Create a config with all default values."""
        return VcslinkConfig(hosts=HostsConfig(), output=OutputConfig())

    @staticmethod
    def from_partial(base: "VcslinkConfig", data: dict[str, Any]) -> "VcslinkConfig":
        """Merge raw config data over an existing config.

        Sections missing from data keep the base values. Within a section,
        keys present in data override the base section's values.

        Args:
            base: Config providing values for anything data leaves out
            data: Raw config dictionary, as parsed from TOML

        Returns:
            New VcslinkConfig with data applied

        Raises:
            ValueError: If a merged section fails validation or has unknown keys.
        """
        return VcslinkConfig(
            hosts=_merge_section(base.hosts, data.get("hosts", {}), "hosts"),
            output=_merge_section(base.output, data.get("output", {}), "output"),
        )


def _merge_section(section: Any, overrides: Any, name: str) -> Any:
    if not isinstance(overrides, dict):
        raise ValueError(f"[{name}] must be a table")
    known = {f.name for f in fields(section)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown keys in [{name}]: {', '.join(sorted(unknown))}")
    values = {f.name: getattr(section, f.name) for f in fields(section)}
    values.update(overrides)
    return type(section)(**values)
