"""Code hosting services with known URL dialects.

Components:
- GitHubHost: github.com
- GitLabHost: gitlab.com
- BitbucketHost: bitbucket.org
- SourceHutHost: git.sr.ht and hg.sr.ht

Each host is stateless. The module-level instances answer for the public
domains; construct a host with extra_domains for self-hosted instances.
"""

from vcslink.core.hosts.base import MARKDOWN_EXTENSIONS, BaseVcsHost, is_markdown
from vcslink.core.hosts.bitbucket import BitbucketHost
from vcslink.core.hosts.github import GitHubHost
from vcslink.core.hosts.gitlab import GitLabHost
from vcslink.core.hosts.sourcehut import SourceHutHost

GITHUB = GitHubHost()
GITLAB = GitLabHost()
BITBUCKET = BitbucketHost()
SOURCEHUT = SourceHutHost()

__all__ = [
    "BaseVcsHost",
    "BitbucketHost",
    "GitHubHost",
    "GitLabHost",
    "SourceHutHost",
    "GITHUB",
    "GITLAB",
    "BITBUCKET",
    "SOURCEHUT",
    "MARKDOWN_EXTENSIONS",
    "is_markdown",
]
