"""SourceHut URL dialects.

SourceHut serves Git and Mercurial from different hosts with different
layouts:

    Git:       https://git.sr.ht/~<user>/<project>/tree/<revision>[/item]/<path>
    Mercurial: https://hg.sr.ht/~<user>/<project>/browse/<revision>/<path>

Mercurial permalinks can only address a single line.
"""

import logging
from typing import ClassVar

from vcslink.core.hosts.base import BaseVcsHost, join_browse_url
from vcslink.core.url_utils import RemoteUrl
from vcslink.domain.value_objects import VcsInfo, VcsType

logger = logging.getLogger(__name__)

_USER_PREFIX = "~"


class SourceHutHost(BaseVcsHost):
    """sr.ht, for both git.sr.ht and hg.sr.ht."""

    name: ClassVar[str] = "SourceHut"
    default_domains: ClassVar[tuple[str, ...]] = ("sr.ht",)
    revision_markers: ClassVar[frozenset[str]] = frozenset({"tree", "browse"})
    append_git_suffix: ClassVar[bool] = False

    def get_user_or_organization(self, url: str) -> str:
        return super().get_user_or_organization(url).removeprefix(_USER_PREFIX)

    def strip_path_prefix(self, path_parts: tuple[str, ...]) -> tuple[str, ...]:
        if path_parts and path_parts[0] == "item":
            return path_parts[1:]
        return path_parts

    def vcs_type_for(self, remote: RemoteUrl) -> VcsType:
        if remote.hostname.startswith("hg."):
            return VcsType.MERCURIAL
        return VcsType.GIT

    def format_permalink(
        self, base: str, vcs_info: VcsInfo, start_line: int, end_line: int | None
    ) -> str:
        if vcs_info.type is VcsType.MERCURIAL:
            if end_line is not None:
                logger.debug(
                    "SourceHut Mercurial permalinks cannot address a range, "
                    "ignoring end line %d",
                    end_line,
                )
            browse_url = join_browse_url(base, "browse", vcs_info.revision, vcs_info.path)
            return f"{browse_url}#L{start_line}"

        anchor = f"#L{start_line}"
        if end_line is not None:
            anchor += f"-{end_line}"
        return join_browse_url(base, "tree", vcs_info.revision, vcs_info.path) + anchor
