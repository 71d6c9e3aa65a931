"""Library entry points for vcslink.

This module serves as a facade over the default host registry:
- resolve_vcs_info: URL -> VcsInfo
- to_permalink: VcsInfo + lines -> permalink
- get_user_or_organization / get_project: attribution from a URL
- to_spdx_download_location: VcsInfo -> SPDX download location

For self-hosted instances, build a HostRegistry.from_config() instead.
"""

from vcslink.core.registry import DEFAULT_REGISTRY, HostRegistry
from vcslink.core.spdx import to_spdx_download_location
from vcslink.domain.exceptions import NotApplicableError
from vcslink.domain.value_objects import VcsInfo, VcsType


def resolve_vcs_info(url: str) -> VcsInfo:
    """Resolve a project or source URL to VCS information."""
    return DEFAULT_REGISTRY.resolve(url)


def to_permalink(
    vcs_info: VcsInfo, start_line: int, end_line: int | None = None
) -> str | None:
    """Build a permalink to a line range, or None for unknown hosts."""
    return DEFAULT_REGISTRY.to_permalink(vcs_info, start_line, end_line)


def get_user_or_organization(url: str) -> str:
    """Get the user or organization of a URL on a known host."""
    return DEFAULT_REGISTRY.get_user_or_organization(url)


def get_project(url: str) -> str:
    """Get the project name of a URL on a known host."""
    return DEFAULT_REGISTRY.get_project(url)


__all__ = [
    "HostRegistry",
    "NotApplicableError",
    "VcsInfo",
    "VcsType",
    "get_project",
    "get_user_or_organization",
    "resolve_vcs_info",
    "to_permalink",
    "to_spdx_download_location",
]
