"""CLI error handling with actionable hints.

Provides consistent error formatting and common error factory functions
for all vcslink CLI commands.
"""

from typing import NoReturn

import click


class VcslinkCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise VcslinkCliError(
            "No permalink syntax known for 'https://example.com/repo'",
            hint="Permalinks are supported for GitHub, GitLab, Bitbucket and SourceHut",
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize the error with message and optional hint.

        Args:
            message: The primary error message.
            hint: Optional actionable suggestion for the user.
        """
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present.

        Returns:
            Formatted error message, with hint on a new line if provided.
        """
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


def unknown_host_error(url: str, known_hosts: list[str]) -> NoReturn:
    """Raise error when no host variant can render a permalink.

    Args:
        url: Repository URL no host claimed.
        known_hosts: Names of the supported hosts.

    Raises:
        VcslinkCliError: Always raises with supported hosts hint.
    """
    raise VcslinkCliError(
        f"No permalink syntax known for '{url}'",
        hint=(
            f"Permalinks are supported for {', '.join(known_hosts)}. "
            "Add self-hosted instances to the [hosts] section of the config"
        ),
    )


def missing_revision_error(url: str) -> NoReturn:
    """Raise error when a permalink is requested without a revision.

    Args:
        url: The URL that resolved without a revision.

    Raises:
        VcslinkCliError: Always raises with --revision hint.
    """
    raise VcslinkCliError(
        f"No revision found in '{url}'",
        hint="Pass --revision with a commit hash to pin the permalink",
    )


def config_exists_error(path: str) -> NoReturn:
    """Raise error when config init would overwrite an existing file.

    Args:
        path: The existing config path.

    Raises:
        VcslinkCliError: Always raises with --force hint.
    """
    raise VcslinkCliError(
        f"Config file already exists: {path}",
        hint="Use --force to overwrite it",
    )
