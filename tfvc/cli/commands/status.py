"""
Native Click implementation of the status command.

Usage: tfvc status RECORDS.json [--workers N] [--json]
"""

from __future__ import annotations

import json
from typing import Any

import click
from pydantic import ValidationError

from ...core.exceptions import InvalidArgumentError
from ...core.interfaces.logger import ILogger
from ...core.models.changes import PendingChange
from ...status.changelist import ChangeListBuilder
from ..context import TfvcContext
from ..decorators import handle_tfvc_errors


def load_records(data: Any, logger: ILogger | None = None) -> list[PendingChange]:
    """
    Build pending changes from decoded JSON.

    Accepts a list of records or an object with a ``pendingChanges`` list.

    Raises:
        InvalidArgumentError: If the document or one of its records is malformed
    """
    if isinstance(data, dict):
        data = data.get("pendingChanges", data.get("pending_changes"))
    if not isinstance(data, list):
        raise InvalidArgumentError(
            "Expected a list of pending changes or an object with 'pendingChanges'",
            argument="records",
        )

    records = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise InvalidArgumentError(
                f"Pending change #{index} is not an object", argument="records"
            )
        try:
            records.append(PendingChange.from_wire(item, logger))
        except ValidationError as e:
            raise InvalidArgumentError(
                f"Pending change #{index} is invalid: {e.errors()[0]['msg']}",
                argument="records",
                context={"field": ".".join(str(p) for p in e.errors()[0]["loc"])},
                cause=e,
            ) from e
    return records


@click.command("status")
@click.argument("records_file", type=click.File("r"))
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Classification threads")
@click.option("--json", "as_json", is_flag=True, help="Print the change list as JSON")
@click.pass_obj
@handle_tfvc_errors
def status(ctx: TfvcContext, records_file, workers: int | None, as_json: bool) -> None:
    """Classify pending-change records and print the resulting change list.

    RECORDS_FILE is a JSON document as reported by the server: a list of
    records with serverItem, localItem and changeTypes (use - for stdin).
    """
    try:
        data = json.load(records_file)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(
            f"Could not parse {records_file.name}: {e}", argument="records_file"
        ) from e

    records = load_records(data, ctx.logger)
    builder = ChangeListBuilder(include_unversioned=ctx.config.status.include_unversioned)
    max_workers = workers or ctx.config.status.max_workers
    ctx.status_provider.visit_all(builder, records, max_workers=max_workers)

    change_list = builder.change_list
    if as_json:
        click.echo(json.dumps(change_list.model_dump(mode="json")["entries"], indent=2))
        return

    if not len(change_list):
        ctx.presenter.print("No pending changes.")
        return

    rows = [
        [
            entry.kind.value,
            entry.local_path,
            entry.server_item or "",
            "" if entry.base_version is None else str(entry.base_version),
            entry.renamed_from or "",
        ]
        for entry in change_list
    ]
    ctx.presenter.print_table(["Change", "Local path", "Server path", "Version", "Renamed from"], rows)
