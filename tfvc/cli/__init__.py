"""
Click-based CLI for tfvc.

Usage:
    from tfvc.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.exceptions import TfvcConfigError
from .context import TfvcContext

try:
    from importlib.metadata import version

    __version__ = version("tfvc-core")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tfvc")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of searching for .tfvc/config.toml",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """tfvc - TFVC path and pending change tools

    Canonicalizes repository paths, maps them through workspace working
    folders and classifies pending changes into a change list.

    \b
    Paths:
        tfvc canonicalize PATH...     Canonicalize server paths
        tfvc ancestor A B             Common ancestor of two server paths
        tfvc to-local SERVER_PATH     Map through the working folders
        tfvc to-server LOCAL_PATH     Map through the working folders

    \b
    Workspace:
        tfvc mappings                 List working folders
        tfvc status RECORDS.json      Classify pending changes
        tfvc config                   View configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        ctx.obj = TfvcContext.create(config_path=config_path)
    except TfvcConfigError as e:
        raise click.ClickException(str(e)) from e
    ctx.call_on_close(ctx.obj.close)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "TfvcContext",
    "__version__",
    "cli",
    "register_commands",
]
