"""GitHub URL dialect.

Browse URLs: https://github.com/<org>/<project>/blob|tree/<revision>/<path>
Permalinks:  .../tree/<revision>/<path>#L3-L5
"""

from typing import ClassVar

from vcslink.core.hosts.base import BaseVcsHost, is_markdown, join_browse_url
from vcslink.domain.value_objects import VcsInfo


class GitHubHost(BaseVcsHost):
    """github.com and GitHub Enterprise instances."""

    name: ClassVar[str] = "GitHub"
    default_domains: ClassVar[tuple[str, ...]] = ("github.com",)
    revision_markers: ClassVar[frozenset[str]] = frozenset({"blob", "tree", "blame"})

    def format_permalink(
        self, base: str, vcs_info: VcsInfo, start_line: int, end_line: int | None
    ) -> str:
        # "tree" links render Markdown as a page, which drops line anchors
        marker = "blame" if is_markdown(vcs_info.path) else "tree"
        anchor = f"#L{start_line}"
        if end_line is not None:
            anchor += f"-L{end_line}"
        return join_browse_url(base, marker, vcs_info.revision, vcs_info.path) + anchor
