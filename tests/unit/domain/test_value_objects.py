"""Tests for domain value objects."""

import dataclasses

import pytest

from vcslink.domain.value_objects import VcsInfo, VcsType


class TestVcsType:
    """Tests for VcsType enumeration."""

    def test_aliases(self) -> None:
        """Each type exposes its aliases, canonical name first."""
        assert VcsType.GIT.aliases == ("Git", "GitHub", "GitLab")
        assert VcsType.MERCURIAL.aliases == ("Mercurial", "hg")
        assert VcsType.SUBVERSION.aliases == ("Subversion", "svn")
        assert VcsType.UNKNOWN.aliases == ("",)

    def test_str_is_canonical_alias(self) -> None:
        """str() returns the first alias."""
        assert str(VcsType.GIT) == "Git"
        assert str(VcsType.GIT_REPO) == "GitRepo"
        assert str(VcsType.UNKNOWN) == ""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("git", VcsType.GIT),
            ("GitHub", VcsType.GIT),
            ("hg", VcsType.MERCURIAL),
            ("SVN", VcsType.SUBVERSION),
            ("repo", VcsType.GIT_REPO),
            ("cvs", VcsType.CVS),
            ("bazaar", VcsType.UNKNOWN),
        ],
    )
    def test_for_name(self, name: str, expected: VcsType) -> None:
        """Aliases are looked up case-insensitively."""
        assert VcsType.for_name(name) is expected


class TestVcsInfo:
    """Tests for VcsInfo value object."""

    def test_defaults_are_empty_strings(self) -> None:
        """Revision and path default to empty strings, not None."""
        info = VcsInfo(type=VcsType.GIT, url="https://example.com/repo.git")
        assert info.revision == ""
        assert info.path == ""

    def test_structural_equality(self) -> None:
        """Equality and hashing cover all four fields."""
        a = VcsInfo(VcsType.GIT, "https://example.com/repo.git", "abc", "src")
        b = VcsInfo(VcsType.GIT, "https://example.com/repo.git", "abc", "src")
        assert a == b
        assert hash(a) == hash(b)
        assert a != b.with_revision("def")
        assert a != VcsInfo(VcsType.MERCURIAL, a.url, a.revision, a.path)

    def test_is_frozen(self) -> None:
        """VcsInfo is immutable."""
        info = VcsInfo(VcsType.GIT, "https://example.com/repo.git")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.url = "changed"  # type: ignore[misc]

    def test_absolute_path_raises(self) -> None:
        """Paths must be relative."""
        with pytest.raises(ValueError, match="must be relative"):
            VcsInfo(VcsType.GIT, "https://example.com/repo.git", path="/src")

    def test_copies_with_overrides(self) -> None:
        """Derived values are new instances; the original is untouched."""
        info = VcsInfo(VcsType.GIT, "https://example.com/repo.git", "abc", "src/a.py")

        assert info.with_revision("def").revision == "def"
        assert info.with_path("/docs/").path == "docs"
        assert info.repository_root() == VcsInfo(
            VcsType.GIT, "https://example.com/repo.git", "abc", ""
        )
        assert info.path == "src/a.py"

    def test_empty(self) -> None:
        """EMPTY is the all-empty unknown location."""
        assert VcsInfo.EMPTY == VcsInfo(VcsType.UNKNOWN, "", "", "")

    def test_to_dict(self) -> None:
        """to_dict renders the type by its canonical alias."""
        info = VcsInfo(VcsType.SUBVERSION, "http://svn.example.org/repo", "tags/1.0", "pom.xml")
        assert info.to_dict() == {
            "type": "Subversion",
            "url": "http://svn.example.org/repo",
            "revision": "tags/1.0",
            "path": "pom.xml",
        }
