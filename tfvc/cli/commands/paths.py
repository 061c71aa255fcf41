"""
Path commands.

Usage:
    tfvc canonicalize PATH...
    tfvc ancestor PATH1 PATH2
    tfvc to-local SERVER_PATH
    tfvc to-server LOCAL_PATH
"""

from __future__ import annotations

import click

from ...core.exceptions import ServerPathFormatError
from ...path import server
from ..context import TfvcContext
from ..decorators import handle_tfvc_errors, require_mappings


@click.command("canonicalize")
@click.argument("paths", nargs=-1, required=True)
@click.option("--check", is_flag=True, help="Only report whether each path is already canonical")
@click.pass_obj
def canonicalize(ctx: TfvcContext, paths: tuple[str, ...], check: bool) -> None:
    """Print the canonical form of each server path.

    Every path is processed; the exit status is 1 if any path is invalid
    (or, with --check, not canonical).

    \b
    Examples:
        tfvc canonicalize '$/Project\\src/./main.c'
        tfvc canonicalize --check '$/Project/src'
    """
    failed = False
    for path in paths:
        if check:
            canonical = server.is_canonical(path)
            ctx.presenter.print(f"{path}: {'canonical' if canonical else 'not canonical'}")
            failed = failed or not canonical
            continue
        try:
            ctx.presenter.print(server.canonicalize(path))
        except ServerPathFormatError as e:
            ctx.logger.debug("Rejected %r: %s", path, e.kind.value)
            ctx.presenter.print_error(str(e))
            failed = True

    if failed:
        raise SystemExit(1)


@click.command("ancestor")
@click.argument("path1")
@click.argument("path2")
@click.pass_obj
@handle_tfvc_errors
def ancestor(ctx: TfvcContext, path1: str, path2: str) -> None:
    """Print the deepest server path containing both paths."""
    ctx.presenter.print(server.common_ancestor(server.canonicalize(path1), server.canonicalize(path2)))


@click.command("to-local")
@click.argument("server_path")
@click.pass_obj
@require_mappings
@handle_tfvc_errors
def to_local(ctx: TfvcContext, server_path: str) -> None:
    """Map a server path to a local path through the workspace mappings."""
    ctx.presenter.print(ctx.mappings.to_local(server_path))


@click.command("to-server")
@click.argument("local_path")
@click.pass_obj
@require_mappings
@handle_tfvc_errors
def to_server(ctx: TfvcContext, local_path: str) -> None:
    """Map a local path to a server path through the workspace mappings."""
    ctx.presenter.print(ctx.mappings.to_server(local_path))
