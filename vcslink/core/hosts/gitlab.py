"""GitLab URL dialect.

Browse URLs: https://gitlab.com/<org>/<project>[/-]/tree|blob|blame/<revision>/<path>
Permalinks:  .../tree/<revision>/<path>#L7-9

Newer GitLab versions put a "-" segment between project and marker. When it
is present, everything before it names the repository, which allows nested
groups (gitlab.com/<group>/<subgroup>/<project>/-/tree/...).
"""

from typing import ClassVar

from vcslink.core.hosts.base import BaseVcsHost, is_markdown, join_browse_url
from vcslink.domain.value_objects import VcsInfo

_SEPARATOR = "-"


class GitLabHost(BaseVcsHost):
    """gitlab.com and self-managed GitLab instances."""

    name: ClassVar[str] = "GitLab"
    default_domains: ClassVar[tuple[str, ...]] = ("gitlab.com",)
    revision_markers: ClassVar[frozenset[str]] = frozenset({"blob", "tree", "blame"})

    def repository_segments(self, segments: tuple[str, ...]) -> tuple[str, ...]:
        if _SEPARATOR in segments[2:]:
            return segments[: segments.index(_SEPARATOR, 2)]
        return segments[:2]

    def strip_separator(self, rest: tuple[str, ...]) -> tuple[str, ...]:
        if rest and rest[0] == _SEPARATOR:
            return rest[1:]
        return rest

    def format_permalink(
        self, base: str, vcs_info: VcsInfo, start_line: int, end_line: int | None
    ) -> str:
        marker = "blame" if is_markdown(vcs_info.path) else "tree"
        anchor = f"#L{start_line}"
        if end_line is not None:
            anchor += f"-{end_line}"
        return join_browse_url(base, marker, vcs_info.revision, vcs_info.path) + anchor
