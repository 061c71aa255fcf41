"""
Native Click implementation of the config command.

Usage: tfvc config [list|get] [key]
"""

import click

from ...config import CONFIGURABLE_KEYS
from ..context import TfvcContext


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .tfvc/config.toml (or [tool.tfvc] in
    pyproject.toml) and TFVC_* environment variables.

    \b
    Examples:

        tfvc config list                 # List all options

        tfvc config get logging.level    # Get a value
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
@click.pass_obj
def config_list_cmd(ctx: TfvcContext) -> None:
    """List all config options with their current values."""
    if ctx.config_file:
        click.echo(f"Config file: {ctx.config_file}")
    else:
        click.echo("Config file: (none found)")
    click.echo("")

    for key, info in CONFIGURABLE_KEYS.items():
        click.echo(f"  {key} = {ctx.config.get(key)}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
@click.pass_obj
def config_get_cmd(ctx: TfvcContext, key: str) -> None:
    """Get a config value.

    Arguments:

        KEY    The config key to get (e.g. logging.level)
    """
    value = ctx.config.get(key)
    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")
