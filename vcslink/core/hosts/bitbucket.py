"""Bitbucket URL dialect.

Browse URLs: https://bitbucket.org/<org>/<project>/src/<revision>/<path>
Permalinks:  .../src/<revision>/<path>#lines-4:8
"""

from typing import ClassVar

from vcslink.core.hosts.base import BaseVcsHost, join_browse_url
from vcslink.domain.value_objects import VcsInfo


class BitbucketHost(BaseVcsHost):
    """bitbucket.org."""

    name: ClassVar[str] = "Bitbucket"
    default_domains: ClassVar[tuple[str, ...]] = ("bitbucket.org",)
    revision_markers: ClassVar[frozenset[str]] = frozenset({"src"})

    def format_permalink(
        self, base: str, vcs_info: VcsInfo, start_line: int, end_line: int | None
    ) -> str:
        anchor = f"#lines-{start_line}"
        if end_line is not None:
            anchor += f":{end_line}"
        return join_browse_url(base, "src", vcs_info.revision, vcs_info.path) + anchor
