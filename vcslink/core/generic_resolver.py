"""Host-independent VCS URL resolution.

Fallback for URLs no known host claims. Applies, in order:
1. VCS type detection from URL markers
2. npm-style "#<revision>" fragments and "<vcs>+" scheme prefixes
3. Splitting "<repo>.git/<path>" into repository URL and path
4. Splitting Subversion "branches/<name>" and "tags/<name>" segments

Resolution never fails; unrecognized input comes back as the URL with empty
revision and path.
"""

import logging

from vcslink.core.url_utils import (
    get_hostname,
    is_page_anchor,
    normalize_scp_url,
    path_start,
    split_fragment,
    split_path_segments,
    strip_credentials,
    strip_vcs_prefix,
)
from vcslink.domain.value_objects import VcsInfo, VcsType

logger = logging.getLogger(__name__)

# VCS names written as "<name>+<scheme>://"
_PREFIX_TOKENS: frozenset[str] = frozenset({"git", "hg", "svn"})

# Schemes that name the VCS outright
_SCHEME_MARKERS: tuple[tuple[str, VcsType], ...] = (
    ("git://", VcsType.GIT),
    ("svn://", VcsType.SUBVERSION),
    ("hg://", VcsType.MERCURIAL),
    (":pserver:", VcsType.CVS),
    ("cvs://", VcsType.CVS),
)

# VCS names recognized as a hostname label or path segment, in priority order
_TOKEN_MARKERS: tuple[str, ...] = ("svn", "hg", "cvs")

SVN_REVISION_DIRS: frozenset[str] = frozenset({"branches", "tags"})


def detect_vcs_type(url: str) -> VcsType:
    """Guess the VCS type from markers in a URL.

    Args:
        url: Any repository URL.

    Returns:
        Detected VcsType, or UNKNOWN if the URL carries no marker.
    """
    lowered = url.strip().lower()
    prefix, plus, _ = lowered.partition("+")
    if plus and prefix in _PREFIX_TOKENS:
        return VcsType.for_name(prefix)
    for scheme, vcs_type in _SCHEME_MARKERS:
        if lowered.startswith(scheme):
            return vcs_type

    base, _ = split_fragment(normalize_scp_url(lowered))
    labels = set(get_hostname(base).split("."))
    segments = split_path_segments(base[path_start(base) :].partition("?")[0])

    if any(segment.endswith(".git") for segment in segments):
        return VcsType.GIT
    for token in _TOKEN_MARKERS:
        if token in labels or token in segments:
            return VcsType.for_name(token)
    return VcsType.UNKNOWN


def split_git_path(url: str) -> tuple[str, str]:
    """Split "<repo>.git/<path>" into repository URL and path.

    The ".git" suffix is matched case-insensitively.

    Returns:
        Tuple of (repository URL ending in ".git", path). Path is empty when
        nothing follows ".git". URLs without ".git/" are returned unchanged.
    """
    start = path_start(url)
    index = url.lower().find(".git/", start)
    if index < 0:
        return url, ""
    return url[: index + 4], url[index + 5 :].strip("/")


def split_svn_revision(url: str) -> tuple[str, str, str] | None:
    """Split a Subversion branch or tag out of a URL path.

    Subversion encodes branches and tags as directories, so
    ".../repo/branches/1.x/src" names the repository ".../repo" at revision
    "branches/1.x", path "src".

    Returns:
        Tuple of (repository URL, revision, path), or None if the URL has no
        branches/<name> or tags/<name> pair.
    """
    start = path_start(url)
    head, path = url[:start], url[start:]
    segments = split_path_segments(path)
    for index, segment in enumerate(segments[:-1]):
        if segment in SVN_REVISION_DIRS:
            repository = head + "".join(f"/{part}" for part in segments[:index])
            revision = f"{segment}/{segments[index + 1]}"
            return repository, revision, "/".join(segments[index + 2 :])
    return None


def resolve(url: str) -> VcsInfo:
    """Resolve a URL of an unknown host to VCS information.

    Args:
        url: Repository URL as found in package metadata.

    Returns:
        Best-effort VcsInfo. Credentials are always stripped from the URL.

    Example:
        >>> resolve("git+ssh://example.com:42/foo#b3b5b3c").url
        'ssh://example.com:42/foo'
    """
    raw = url.strip()
    if not raw:
        return VcsInfo.EMPTY
    vcs_type = detect_vcs_type(raw)
    remote = strip_vcs_prefix(raw)
    revision = ""

    base, fragment = split_fragment(remote)
    if fragment and vcs_type is VcsType.GIT:
        remote = base
        if not is_page_anchor(fragment):
            revision = fragment

    remote = strip_credentials(remote)

    if vcs_type is VcsType.GIT:
        repository, path = split_git_path(remote)
        logger.debug("Resolved %s as a Git URL", url)
        return VcsInfo(type=vcs_type, url=repository, revision=revision, path=path)

    if vcs_type is VcsType.SUBVERSION:
        split = split_svn_revision(remote)
        if split is not None:
            repository, revision, path = split
            logger.debug("Resolved %s as a Subversion %s", url, revision)
            return VcsInfo(type=vcs_type, url=repository, revision=revision, path=path)

    logger.debug("No further structure found in %s", url)
    return VcsInfo(type=vcs_type, url=remote, revision=revision, path="")
