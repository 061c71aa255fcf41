"""
Click decorators for tfvc CLI commands.

- handle_tfvc_errors: Converts TfvcException into click.ClickException
- require_mappings: Ensures at least one working folder is configured
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from ..core.exceptions import TfvcException

if TYPE_CHECKING:
    from .context import TfvcContext

F = TypeVar("F", bound=Callable[..., Any])


def handle_tfvc_errors(f: F) -> F:
    """Report tfvc errors as click errors so the CLI exits cleanly.

    The exception's ``exit_code`` becomes the process exit status.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except TfvcException as e:
            error = click.ClickException(str(e))
            error.exit_code = e.exit_code
            raise error from e

    return wrapper  # type: ignore[return-value]


def require_mappings(f: F) -> F:
    """Decorator to require configured workspace mappings.

    Note:
        This decorator should be applied AFTER @click.pass_obj so that
        the TfvcContext is available.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx_maybe: Any = args[0] if args else kwargs.get("ctx")
        if ctx_maybe is None:
            raise click.ClickException(
                "Internal error: TfvcContext not available. "
                "Ensure @click.pass_obj is applied before @require_mappings."
            )
        ctx: TfvcContext = ctx_maybe

        if not ctx.config.workspace.mappings:
            raise click.ClickException(
                "No working folders configured.\n"
                "Add [[workspace.mappings]] entries to .tfvc/config.toml."
            )
        return f(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
