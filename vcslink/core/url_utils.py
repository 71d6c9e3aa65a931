"""URL splitting utilities shared by the generic resolver and host variants.

Handles the remote URL forms found in package metadata:
- Standard URLs: https://host/org/repo, ssh://git@host:22/org/repo
- SCP-like remotes: git@host:org/repo.git
- VCS-prefixed URLs and npm-style fragments: git+ssh://host/repo#<commit>
"""

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

# SCP-like syntax does not start with a scheme: [user@]host:path
_SCP_PATTERN = re.compile(r"^(?:(?P<user>[^@/\s]+)@)?(?P<host>[^:/\s]+):(?P<path>[^\s]+)$")

_WEB_SCHEMES = frozenset({"http", "https"})

# Scheme-less web addresses such as "github.com/org/repo"
_SCHEMELESS_PATTERN = re.compile(r"^[\w.-]+\.[a-z]{2,}(?::\d+)?/", re.IGNORECASE)

# VCS markers prepended to a transport scheme, as in "git+ssh://"
_VCS_PREFIX = re.compile(r"^(?:git|hg)\+|^svn\+(?=https?://)", re.IGNORECASE)

# Fragments that address a line or section of a page
_PAGE_ANCHOR = re.compile(r"^(?:L\d+(?:-L?\d+)?|lines-\d+(?::\d+)?|readme)$", re.IGNORECASE)


@dataclass(frozen=True)
class RemoteUrl:
    """A remote URL split into the parts the host variants work with.

    Attributes:
        scheme: Lowercased scheme (e.g., "https", "ssh").
        hostname: Lowercased hostname without user info or port.
        port: Explicit port, or None.
        segments: Non-empty path segments.
        fragment: Text after "#", empty if absent.
    """

    scheme: str
    hostname: str
    port: int | None
    segments: tuple[str, ...]
    fragment: str

    @property
    def web_base(self) -> str:
        """Return the browsable https (or http) origin of this remote."""
        if self.scheme in _WEB_SCHEMES:
            port = f":{self.port}" if self.port else ""
            return f"{self.scheme}://{self.hostname}{port}"
        return f"https://{self.hostname}"


def split_fragment(url: str) -> tuple[str, str]:
    """Split a URL at the first "#".

    Returns:
        Tuple of (url without fragment, fragment). Fragment is empty if absent.
    """
    base, _, fragment = url.partition("#")
    return base, fragment


def strip_vcs_prefix(url: str) -> str:
    """Remove a "<vcs>+" marker in front of the transport scheme.

    Examples:
        git+ssh://host/repo -> ssh://host/repo
        hg+https://host/repo -> https://host/repo
        svn+https://host/repo -> https://host/repo

    svn+ssh:// is a scheme Subversion clients understand and is kept.
    """
    return _VCS_PREFIX.sub("", url, count=1)


def is_page_anchor(fragment: str) -> bool:
    """Check if a URL fragment addresses part of a page rather than a revision.

    Examples:
        is_page_anchor("L10-L20") -> True
        is_page_anchor("readme") -> True
        is_page_anchor("5bd33a0") -> False
    """
    return _PAGE_ANCHOR.match(fragment) is not None


def normalize_scp_url(url: str) -> str:
    """Convert an SCP-like remote to an ssh:// URL.

    Examples:
        git@github.com:org/repo.git -> ssh://git@github.com/org/repo.git

    URLs that already have a scheme are returned unchanged.
    """
    if "://" in url:
        return url
    match = _SCP_PATTERN.match(url)
    if not match:
        return url
    user, host, path = match.group("user"), match.group("host"), match.group("path")
    # Without a user, only treat dotted hostnames as SCP remotes
    if not user and "." not in host:
        return url
    userinfo = f"{user}@" if user else ""
    return f"ssh://{userinfo}{host}/{path.lstrip('/')}"


def strip_credentials(url: str) -> str:
    """Remove embedded credentials from a URL.

    For http and https all user info is dropped. For other schemes (ssh, git)
    the user name is needed to connect, so only a password is dropped.

    Args:
        url: URL that may contain user info.

    Returns:
        URL without credentials. Unparseable input is returned unchanged.
    """
    scheme_end = url.find("://")
    if scheme_end < 0:
        return url
    authority_start = scheme_end + 3
    authority_end = len(url)
    for delimiter in "/?#":
        index = url.find(delimiter, authority_start)
        if index >= 0:
            authority_end = min(authority_end, index)
    authority = url[authority_start:authority_end]
    if "@" not in authority:
        return url
    userinfo, _, hostport = authority.rpartition("@")
    if url[:scheme_end].lower() in _WEB_SCHEMES:
        authority = hostport
    else:
        user = userinfo.partition(":")[0]
        authority = f"{user}@{hostport}" if user else hostport
    return url[:authority_start] + authority + url[authority_end:]


def path_start(url: str) -> int:
    """Return the index where the path of a URL begins."""
    scheme_end = url.find("://")
    if scheme_end < 0:
        return 0
    index = url.find("/", scheme_end + 3)
    return len(url) if index < 0 else index


def split_path_segments(path: str) -> list[str]:
    """Split a URL path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def hostname_matches(hostname: str, domain: str) -> bool:
    """Check if a hostname is a domain or one of its subdomains.

    Examples:
        hostname_matches("www.github.com", "github.com") -> True
        hostname_matches("notgithub.com", "github.com") -> False
    """
    hostname = hostname.lower()
    domain = domain.lower()
    return hostname == domain or hostname.endswith("." + domain)


def parse_remote_url(url: str) -> RemoteUrl | None:
    """Split any supported remote URL form.

    Args:
        url: Standard, SCP-like or git+ prefixed URL.

    Returns:
        RemoteUrl, or None if no hostname can be determined.
    """
    normalized = normalize_scp_url(strip_vcs_prefix(url.strip()))
    if "://" not in normalized and _SCHEMELESS_PATTERN.match(normalized):
        normalized = "https://" + normalized
    try:
        parts = urlsplit(normalized)
        port = parts.port
    except ValueError:
        return None
    if not parts.hostname:
        return None
    return RemoteUrl(
        scheme=parts.scheme.lower(),
        hostname=parts.hostname.lower(),
        port=port,
        segments=tuple(split_path_segments(parts.path)),
        fragment=parts.fragment,
    )


def get_hostname(url: str) -> str:
    """Return the lowercased hostname of a URL, or "" if there is none."""
    remote = parse_remote_url(url)
    return remote.hostname if remote else ""
