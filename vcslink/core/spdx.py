"""SPDX package download locations.

SPDX writes VCS locations as <tool>+<url>[@<revision>][#<path>], e.g.
"git+https://github.com/org/repo.git@v1.0#src".
"""

from vcslink.core.url_utils import strip_credentials
from vcslink.domain.value_objects import VcsInfo, VcsType

_SPDX_VCS_TOOLS: dict[VcsType, str] = {
    VcsType.CVS: "cvs",
    VcsType.GIT: "git",
    VcsType.GIT_REPO: "repo",
    VcsType.MERCURIAL: "hg",
    VcsType.SUBVERSION: "svn",
}


def to_spdx_download_location(vcs_info: VcsInfo) -> str:
    """Render VCS information as an SPDX download location.

    Args:
        vcs_info: Location to render.

    Returns:
        Download location string. Unknown VCS types get no tool prefix.
    """
    tool = _SPDX_VCS_TOOLS.get(vcs_info.type, vcs_info.type.aliases[0].lower())
    location = f"{tool}+" if tool else ""
    location += strip_credentials(vcs_info.url)
    if vcs_info.revision:
        location += f"@{vcs_info.revision}"
    if vcs_info.path:
        location += f"#{vcs_info.path}"
    return location
