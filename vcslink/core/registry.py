"""Registry of known code hosting services.

Dispatches URLs to the first host variant that claims them, falling back to
the generic resolver. To add a host, add its instance to HOST_REGISTRY.
"""

import logging
from collections.abc import Sequence
from typing import Final

from vcslink.core import generic_resolver
from vcslink.core.hosts import (
    BITBUCKET,
    GITHUB,
    GITLAB,
    SOURCEHUT,
    BitbucketHost,
    GitHubHost,
    GitLabHost,
    SourceHutHost,
)
from vcslink.domain.config import VcslinkConfig
from vcslink.domain.exceptions import NotApplicableError
from vcslink.domain.value_objects import VcsInfo
from vcslink.ports.hosts import VcsHost

logger = logging.getLogger(__name__)

# Priority order. The first host whose predicate matches a URL handles it.
HOST_REGISTRY: Final[tuple[VcsHost, ...]] = (GITHUB, GITLAB, BITBUCKET, SOURCEHUT)


class HostRegistry:
    """Ordered set of host variants with a generic fallback.

    Args:
        hosts: Host variants in priority order.
    """

    def __init__(self, hosts: Sequence[VcsHost] = HOST_REGISTRY) -> None:
        self._hosts: tuple[VcsHost, ...] = tuple(hosts)

    @classmethod
    def from_config(cls, config: VcslinkConfig) -> "HostRegistry":
        """Create a registry that also recognizes configured self-hosted instances.

        Args:
            config: Configuration with extra hostnames per host.

        Returns:
            HostRegistry in the default priority order.
        """
        hosts = config.hosts
        return cls(
            (
                GitHubHost(extra_domains=tuple(hosts.github)),
                GitLabHost(extra_domains=tuple(hosts.gitlab)),
                BitbucketHost(extra_domains=tuple(hosts.bitbucket)),
                SourceHutHost(extra_domains=tuple(hosts.sourcehut)),
            )
        )

    @property
    def hosts(self) -> tuple[VcsHost, ...]:
        """Host variants in priority order."""
        return self._hosts

    def get(self, name: str) -> VcsHost:
        """Look up a host variant by name (case-insensitive).

        Raises:
            ValueError: If no host has that name.
        """
        for host in self._hosts:
            if host.name.lower() == name.lower():
                return host
        known = ", ".join(host.name for host in self._hosts)
        raise ValueError(f"Unknown host '{name}'. Known hosts: {known}")

    def host_for(self, url: str) -> VcsHost | None:
        """Return the first host variant claiming a URL, or None."""
        return next((host for host in self._hosts if host.is_applicable(url)), None)

    def resolve(self, url: str) -> VcsInfo:
        """Resolve a project or source URL to VCS information.

        Never raises for malformed input; unknown URLs degrade to the generic
        resolver's best effort.

        Args:
            url: Project, clone or browse URL.

        Returns:
            VcsInfo for the URL.
        """
        host = self.host_for(url)
        if host is None:
            logger.debug("No known host for %s, using generic resolver", url)
            return generic_resolver.resolve(url)
        logger.debug("Resolving %s with %s", url, host.name)
        return host.to_vcs_info(url)

    def get_user_or_organization(self, url: str) -> str:
        """Get the user or organization of a URL on a known host.

        Raises:
            NotApplicableError: If no known host claims the URL.
        """
        return self._require_host(url).get_user_or_organization(url)

    def get_project(self, url: str) -> str:
        """Get the project name of a URL on a known host.

        Raises:
            NotApplicableError: If no known host claims the URL.
        """
        return self._require_host(url).get_project(url)

    def to_permalink(
        self, vcs_info: VcsInfo, start_line: int, end_line: int | None = None
    ) -> str | None:
        """Build a permalink with the host that serves vcs_info.url.

        Args:
            vcs_info: Location to link to.
            start_line: First line, 1-based.
            end_line: Last line. None or start_line for a single line.

        Returns:
            Permalink URL, or None if no known host serves the repository.

        Raises:
            ValueError: If the line range is invalid or the revision is empty.
        """
        host = self.host_for(vcs_info.url)
        if host is None:
            logger.debug("No permalink syntax known for %s", vcs_info.url)
            return None
        return host.to_permalink(vcs_info, start_line, end_line)

    def _require_host(self, url: str) -> VcsHost:
        host = self.host_for(url)
        if host is None:
            known = ", ".join(variant.name for variant in self._hosts)
            raise NotApplicableError(
                f"'{url}' does not belong to a known host",
                hint=f"Known hosts: {known}",
            )
        return host


DEFAULT_REGISTRY: Final[HostRegistry] = HostRegistry()
