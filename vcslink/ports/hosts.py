"""VCS host port interface.

Defines the capabilities every supported code hosting service implements.
"""

from typing import Protocol

from vcslink.domain.value_objects import VcsInfo


class VcsHost(Protocol):
    """Protocol for a code hosting service's URL dialect."""

    name: str
    domains: tuple[str, ...]

    def is_applicable(self, url: str) -> bool:
        """Check whether a URL belongs to this host.

        Args:
            url: Any project, clone or browse URL.

        Returns:
            True if the URL's hostname is one of this host's domains.
        """
        ...

    def get_user_or_organization(self, url: str) -> str:
        """Get the user or organization a URL refers to.

        Raises:
            NotApplicableError: If the URL is not in this host's dialect.
        """
        ...

    def get_project(self, url: str) -> str:
        """Get the project name a URL refers to, without a ".git" suffix.

        Raises:
            NotApplicableError: If the URL is not in this host's dialect.
        """
        ...

    def to_vcs_info(self, url: str) -> VcsInfo:
        """Parse a URL in this host's dialect into VCS information.

        Raises:
            NotApplicableError: If the URL is not in this host's dialect.
        """
        ...

    def to_permalink(
        self, vcs_info: VcsInfo, start_line: int, end_line: int | None = None
    ) -> str:
        """Build a permanent link to a line range.

        Args:
            vcs_info: Location to link to. Its revision must not be empty.
            start_line: First line, 1-based.
            end_line: Last line. None or start_line for a single line.

        Returns:
            Permalink URL in this host's syntax.

        Raises:
            NotApplicableError: If vcs_info.url does not belong to this host.
            ValueError: If the line range is invalid or revision is empty.
        """
        ...
