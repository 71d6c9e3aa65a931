"""Domain value objects for version control locations.

Value objects that describe where versioned source lives, ensuring
invalid states are unrepresentable.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, ClassVar


class VcsType(Enum):
    """Closed set of version control systems.

    Each member carries the aliases it is known by. The first alias is the
    canonical display name.
    """

    GIT = ("Git", "GitHub", "GitLab")
    GIT_REPO = ("GitRepo", "git-repo", "repo")
    MERCURIAL = ("Mercurial", "hg")
    SUBVERSION = ("Subversion", "svn")
    CVS = ("CVS", "cvs")
    UNKNOWN = ("",)

    @property
    def aliases(self) -> tuple[str, ...]:
        """Return the names this VCS type is known by."""
        return self.value

    @classmethod
    def for_name(cls, name: str) -> "VcsType":
        """Look up a VCS type by one of its aliases.

        Args:
            name: Alias to look up, matched case-insensitively.

        Returns:
            Matching VcsType, or UNKNOWN if no alias matches.
        """
        wanted = name.strip().lower()
        for vcs_type in cls:
            if any(alias.lower() == wanted for alias in vcs_type.aliases):
                return vcs_type
        return cls.UNKNOWN

    def __str__(self) -> str:
        """Return the canonical alias."""
        return self.aliases[0]


@dataclass(frozen=True)
class VcsInfo:
    """Canonical description of a versioned source location.

    Attributes:
        type: The version control system.
        url: Fetchable repository URL without credentials, revision or path.
        revision: Commit, branch, tag or Subversion branch/tag segment.
            Empty if unknown.
        path: Relative in-repository path with forward slashes. Empty for
            the repository root.

    Raises:
        ValueError: If path is absolute.
    """

    type: VcsType
    url: str
    revision: str = ""
    path: str = ""

    EMPTY: ClassVar["VcsInfo"]

    def __post_init__(self) -> None:
        """Validate path is relative."""
        if self.path.startswith("/"):
            raise ValueError(f"VcsInfo path must be relative, got '{self.path}'")

    def with_revision(self, revision: str) -> "VcsInfo":
        """Return a copy pointing at another revision."""
        return replace(self, revision=revision)

    def with_path(self, path: str) -> "VcsInfo":
        """Return a copy pointing at another in-repository path."""
        return replace(self, path=path.strip("/"))

    def repository_root(self) -> "VcsInfo":
        """Return a copy pointing at the repository root."""
        return replace(self, path="")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "type": str(self.type),
            "url": self.url,
            "revision": self.revision,
            "path": self.path,
        }


VcsInfo.EMPTY = VcsInfo(type=VcsType.UNKNOWN, url="")
