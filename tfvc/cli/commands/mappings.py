"""
Native Click implementation of the mappings command.

Usage: tfvc mappings
"""

import click

from ..context import TfvcContext


@click.command("mappings")
@click.pass_obj
def mappings(ctx: TfvcContext) -> None:
    """List the configured working folders."""
    folders = list(ctx.mappings)
    if not folders:
        ctx.presenter.print("No working folders configured.")
        return

    rows = [
        [folder.server_item, "(cloaked)" if folder.cloaked else folder.local_item]
        for folder in folders
    ]
    ctx.presenter.print_table(["Server path", "Local path"], rows)
