"""Shared behavior of the code hosting services.

All supported hosts lay out browse URLs the same way:

    <scheme>://<host>/<org>/<project>/<marker>/<revision>/<path>

Subclasses declare their domains and revision markers, and render their own
permalink line syntax.
"""

from pathlib import PurePosixPath
from typing import ClassVar

from vcslink.core.url_utils import RemoteUrl, hostname_matches, is_page_anchor, parse_remote_url
from vcslink.domain.exceptions import NotApplicableError
from vcslink.domain.value_objects import VcsInfo, VcsType

# Hosts render these as formatted pages, where line anchors do not work
MARKDOWN_EXTENSIONS: frozenset[str] = frozenset({
    ".md", ".markdown", ".mdown", ".mkdn", ".mkd", ".mdwn", ".mdtxt", ".mdtext",
})


def is_markdown(path: str) -> bool:
    """Check if a repository path names a Markdown file."""
    return PurePosixPath(path).suffix.lower() in MARKDOWN_EXTENSIONS


def validate_line_range(start_line: int, end_line: int | None) -> int | None:
    """Validate a 1-based line range.

    Args:
        start_line: First line.
        end_line: Last line, or None for a single line.

    Returns:
        The end line, or None if the range covers a single line.

    Raises:
        ValueError: If start_line is below 1 or end_line is before start_line.
    """
    if start_line < 1:
        raise ValueError(f"start_line must be at least 1, got {start_line}")
    if end_line is None or end_line == start_line:
        return None
    if end_line < start_line:
        raise ValueError(
            f"end_line ({end_line}) must not be before start_line ({start_line})"
        )
    return end_line


class BaseVcsHost:
    """Common URL handling for hosts using the <org>/<project> layout.

    Attributes:
        name: Display name of the host.
        domains: Hostnames this host answers for, subdomains included.
    """

    name: ClassVar[str] = ""
    default_domains: ClassVar[tuple[str, ...]] = ()
    revision_markers: ClassVar[frozenset[str]] = frozenset()
    append_git_suffix: ClassVar[bool] = True

    def __init__(self, extra_domains: tuple[str, ...] = ()) -> None:
        """Initialize the host.

        Args:
            extra_domains: Additional hostnames, e.g. self-hosted instances.
        """
        self.domains: tuple[str, ...] = self.default_domains + tuple(
            domain.lower() for domain in extra_domains
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(domains={self.domains!r})"

    def is_applicable(self, url: str) -> bool:
        return self._matches(parse_remote_url(url))

    def get_user_or_organization(self, url: str) -> str:
        remote = self._require_applicable(url)
        if not remote.segments:
            raise NotApplicableError(f"No user or organization in '{url}'")
        return remote.segments[0]

    def get_project(self, url: str) -> str:
        remote = self._require_applicable(url)
        repository = self.repository_segments(remote.segments)
        if len(repository) < 2:
            raise NotApplicableError(f"No project in '{url}'")
        return repository[-1].removesuffix(".git")

    def to_vcs_info(self, url: str) -> VcsInfo:
        remote = self._require_applicable(url)
        repository = self.repository_segments(remote.segments)
        rest = self.strip_separator(remote.segments[len(repository) :])

        repository_url = remote.web_base + "".join(f"/{part}" for part in repository)
        if (
            self.append_git_suffix
            and len(repository) >= 2
            and not repository_url.endswith(".git")
        ):
            repository_url += ".git"

        revision = ""
        # Segments without a revision marker name pages (issues, wiki), not files
        path_parts: tuple[str, ...] = ()
        if rest and rest[0] in self.revision_markers:
            revision = rest[1] if len(rest) > 1 else ""
            path_parts = self.strip_path_prefix(rest[2:])

        if not revision and remote.fragment and not is_page_anchor(remote.fragment):
            revision = remote.fragment

        return VcsInfo(
            type=self.vcs_type_for(remote),
            url=repository_url,
            revision=revision,
            path="/".join(path_parts),
        )

    def to_permalink(
        self, vcs_info: VcsInfo, start_line: int, end_line: int | None = None
    ) -> str:
        remote = self._require_applicable(vcs_info.url)
        end = validate_line_range(start_line, end_line)
        if not vcs_info.revision:
            raise ValueError(f"Cannot build a permalink for '{vcs_info.url}' without a revision")

        repository = list(self.repository_segments(remote.segments))
        if repository:
            repository[-1] = repository[-1].removesuffix(".git")
        base = remote.web_base + "".join(f"/{part}" for part in repository)
        return self.format_permalink(base, vcs_info, start_line, end)

    # Hooks for subclasses

    def repository_segments(self, segments: tuple[str, ...]) -> tuple[str, ...]:
        """Return the path segments naming the repository (org and project)."""
        return segments[:2]

    def strip_separator(self, rest: tuple[str, ...]) -> tuple[str, ...]:
        """Drop host-specific separators between repository and marker."""
        return rest

    def strip_path_prefix(self, path_parts: tuple[str, ...]) -> tuple[str, ...]:
        """Drop host-specific segments between revision and path."""
        return path_parts

    def vcs_type_for(self, remote: RemoteUrl) -> VcsType:
        """Return the VCS type of repositories at this remote."""
        return VcsType.GIT

    def format_permalink(
        self, base: str, vcs_info: VcsInfo, start_line: int, end_line: int | None
    ) -> str:
        """Render the permalink for a validated line range."""
        raise NotImplementedError

    def _matches(self, remote: RemoteUrl | None) -> bool:
        if remote is None:
            return False
        return any(hostname_matches(remote.hostname, domain) for domain in self.domains)

    def _require_applicable(self, url: str) -> RemoteUrl:
        remote = parse_remote_url(url)
        if remote is None or not self._matches(remote):
            raise NotApplicableError(
                f"'{url}' is not a {self.name} URL",
                hint=f"Check is_applicable() before asking {self.name} to parse a URL",
            )
        return remote


def join_browse_url(base: str, marker: str, revision: str, path: str) -> str:
    """Join a browse URL from its parts, omitting an empty path."""
    url = f"{base}/{marker}/{revision}"
    return f"{url}/{path}" if path else url
