"""vcslink CLI entrypoint.

Command-line interface for resolving VCS URLs and building permalinks.
"""

from __future__ import annotations

import functools
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from vcslink.core.registry import HostRegistry
    from vcslink.domain.config import VcslinkConfig

from vcslink.core.errors import (
    VcslinkCliError,
    config_exists_error,
    missing_revision_error,
    unknown_host_error,
)
from vcslink.core.spdx import to_spdx_download_location
from vcslink.domain.exceptions import VcslinkDomainError
from vcslink.domain.value_objects import VcsInfo
from vcslink.version import __version__


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    Converts domain errors and invalid arguments into VcslinkCliError,
    showing tracebacks for unexpected errors in verbose mode.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except VcslinkCliError:
                raise
            except VcslinkDomainError as e:
                raise VcslinkCliError(e.message, hint=e.hint) from e
            except ValueError as e:
                raise VcslinkCliError(
                    str(e),
                    hint=f"Run 'vcslink {command_name} --help' for valid arguments",
                ) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise VcslinkCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr, keeping stdout for command output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_config(ctx: click.Context) -> VcslinkConfig:
    """Load configuration once per invocation.

    Uses ConfigFactory to create the config provider, honoring --config.
    """
    if "config" not in ctx.obj:
        from vcslink.adapters.factory import ConfigFactory

        provider = ConfigFactory().create_config_provider()
        ctx.obj["config"] = provider.load(ctx.obj.get("config_path"))
    return ctx.obj["config"]


def _create_registry(ctx: click.Context) -> HostRegistry:
    """Create the host registry for this invocation's configuration."""
    from vcslink.adapters.factory import RegistryFactory

    return RegistryFactory(_load_config(ctx)).create_registry()


def _echo_vcs_info(vcs_info: VcsInfo, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(vcs_info.to_dict(), indent=2))
        return
    click.echo(f"type:     {vcs_info.type}")
    click.echo(f"url:      {vcs_info.url}")
    click.echo(f"revision: {vcs_info.revision}")
    click.echo(f"path:     {vcs_info.path}")


@click.group()
@click.version_option(version=__version__, prog_name="vcslink")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging on stderr.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file overriding the global config.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """vcslink - Resolve VCS URLs and build permalinks.

    Turns project, clone and browse URLs into repository URL, revision and
    path, and renders permanent links to line ranges on GitHub, GitLab,
    Bitbucket and SourceHut.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    _configure_logging(verbose)


@cli.command()
@click.argument("url", type=str)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
@handle_cli_errors("resolve")
def resolve(ctx: click.Context, url: str, as_json: bool) -> None:
    """Resolve URL to VCS type, repository URL, revision and path.

    Examples:
        vcslink resolve https://github.com/org/repo/blob/v1.0/README.md
        vcslink resolve 'git+ssh://example.com/repo.git#1a2b3c4'
    """
    config = _load_config(ctx)
    vcs_info = _create_registry(ctx).resolve(url)
    _echo_vcs_info(vcs_info, as_json or config.output.format == "json")


@cli.command()
@click.argument("url", type=str)
@click.argument("start_line", type=click.IntRange(min=1))
@click.argument("end_line", type=click.IntRange(min=1), required=False, default=None)
@click.option("--revision", "-r", type=str, default=None, help="Revision to link to.")
@click.option(
    "--path", "-p", "repo_path", type=str, default=None, help="Path inside the repository."
)
@click.option("--host", "host_name", type=str, default=None, help="Render with this host's syntax.")
@click.pass_context
@handle_cli_errors("permalink")
def permalink(
    ctx: click.Context,
    url: str,
    start_line: int,
    end_line: int | None,
    revision: str | None,
    repo_path: str | None,
    host_name: str | None,
) -> None:
    """Print a permalink to START_LINE[-END_LINE] of the file URL points to.

    URL may be a browse URL carrying revision and path, or a repository URL
    combined with --revision and --path.

    Examples:
        vcslink permalink https://github.com/org/repo/blob/1a2b3c4/setup.py 10 20
        vcslink permalink git@gitlab.com:org/repo.git 7 -r 1a2b3c4 -p src/main.c
    """
    registry = _create_registry(ctx)
    vcs_info = registry.resolve(url)
    if revision:
        vcs_info = vcs_info.with_revision(revision)
    if repo_path is not None:
        vcs_info = vcs_info.with_path(repo_path)
    if not vcs_info.revision:
        missing_revision_error(url)

    if host_name:
        link: str | None = registry.get(host_name).to_permalink(vcs_info, start_line, end_line)
    else:
        link = registry.to_permalink(vcs_info, start_line, end_line)
    if link is None:
        unknown_host_error(vcs_info.url, [host.name for host in registry.hosts])
    click.echo(link)


@cli.command()
@click.argument("url", type=str)
@click.pass_context
@handle_cli_errors("owner")
def owner(ctx: click.Context, url: str) -> None:
    """Print the user or organization owning the repository at URL."""
    click.echo(_create_registry(ctx).get_user_or_organization(url))


@cli.command()
@click.argument("url", type=str)
@click.pass_context
@handle_cli_errors("project")
def project(ctx: click.Context, url: str) -> None:
    """Print the project name of the repository at URL."""
    click.echo(_create_registry(ctx).get_project(url))


@cli.command()
@click.argument("url", type=str)
@click.pass_context
@handle_cli_errors("spdx")
def spdx(ctx: click.Context, url: str) -> None:
    """Print the SPDX package download location for URL."""
    click.echo(to_spdx_download_location(_create_registry(ctx).resolve(url)))


@cli.group()
def config() -> None:
    """Manage vcslink configuration files.

    The global config (~/.config/vcslink/config.toml) holds user defaults.
    A file passed with --config overrides it. Missing values use built-in
    defaults.
    """
    pass


def _display_path_status(path: Path, label: str) -> None:
    """Display a config path with its existence status."""
    status = "exists" if path.exists() else "not created"
    color = "green" if path.exists() else "yellow"
    click.echo(f"{label}{path}")
    click.echo(f"  Status: {click.style(status, fg=color)}")


def _display_config_summary(config: VcslinkConfig) -> None:
    """Display a summary of config settings."""
    click.echo("  [hosts]")
    for key, hostnames in (
        ("github", config.hosts.github),
        ("gitlab", config.hosts.gitlab),
        ("bitbucket", config.hosts.bitbucket),
        ("sourcehut", config.hosts.sourcehut),
    ):
        click.echo(f"    {key} = {', '.join(hostnames) or '(none)'}")
    click.echo("  [output]")
    click.echo(f"    format = {config.output.format}")


@config.command(name="show")
@click.pass_context
@handle_cli_errors("config show")
def config_show(ctx: click.Context) -> None:
    """Show configuration file locations and effective settings."""
    from vcslink.shared.config_io import get_global_config_path

    _display_path_status(get_global_config_path(), "Global config: ")
    config_path = ctx.obj.get("config_path")
    if config_path is not None:
        _display_path_status(config_path, "Config:        ")

    click.echo("\nEffective configuration:")
    _display_config_summary(_load_config(ctx))


@config.command(name="init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file.")
@click.pass_context
@handle_cli_errors("config init")
def config_init(ctx: click.Context, force: bool) -> None:
    """Create a commented config file.

    Writes to the --config path if given, otherwise to the global config.
    """
    from vcslink.shared.config_io import create_default_config_file, get_global_config_path

    path = ctx.obj.get("config_path") or get_global_config_path()
    if path.exists() and not force:
        config_exists_error(str(path))
    create_default_config_file(path)
    click.echo(f"Created config: {path}")


if __name__ == "__main__":
    cli(obj={})
