"""
Pending change classification.

Each record resolves to exactly one ``ServerStatus`` variant by the first
matching rule in ``RULES``. The order of that tuple is the priority order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple

from ..core.interfaces.filesystem import IFileSystem
from ..core.interfaces.logger import ILogger
from ..core.models.changes import ChangeType, PendingChange
from ..core.models.status import (
    CheckedOutForEdit,
    Locked,
    Renamed,
    RenamedCheckedOut,
    ScheduledForAddition,
    ScheduledForDeletion,
    ServerStatus,
    Undeleted,
    Unversioned,
)
from ..path.local import from_tfs_representation
from .visitor import StatusVisitor, dispatch

# factory(record, is_directory, local_item_exists) -> status
StatusFactory = Callable[[PendingChange, bool, Callable[[], bool]], ServerStatus]


class Rule(NamedTuple):
    name: str
    predicate: Callable[[PendingChange], bool]
    factory: StatusFactory


def _simple(variant: type[ServerStatus]) -> StatusFactory:
    return lambda record, is_directory, exists: variant.from_pending_change(record, is_directory)


def _merge(record: PendingChange, is_directory: bool, exists: Callable[[], bool]) -> ServerStatus:
    variant = CheckedOutForEdit if exists() else ScheduledForDeletion
    return variant.from_pending_change(record, is_directory)


RULES: tuple[Rule, ...] = (
    Rule("candidate", lambda r: r.is_candidate, lambda r, d, e: Unversioned.create()),
    Rule("add", lambda r: r.has(ChangeType.ADD), _simple(ScheduledForAddition)),
    Rule(
        "edit+rename",
        lambda r: r.has(ChangeType.EDIT, ChangeType.RENAME),
        _simple(RenamedCheckedOut),
    ),
    Rule("edit", lambda r: r.has(ChangeType.EDIT), _simple(CheckedOutForEdit)),
    Rule("rename", lambda r: r.has(ChangeType.RENAME), _simple(Renamed)),
    Rule("delete", lambda r: r.has(ChangeType.DELETE), _simple(ScheduledForDeletion)),
    Rule("undelete", lambda r: r.has(ChangeType.UNDELETE), _simple(Undeleted)),
    Rule("branch", lambda r: r.has(ChangeType.BRANCH), _simple(ScheduledForAddition)),
    Rule("merge", lambda r: r.has(ChangeType.MERGE), _merge),
    Rule("lock", lambda r: r.has(ChangeType.LOCK), _simple(Locked)),
)


def classify(
    record: PendingChange,
    file_exists: Callable[[], bool],
    is_directory: bool = False,
) -> ServerStatus | None:
    """
    Resolve a record to its status by the first matching rule.

    Args:
        record: The pending change
        file_exists: Answers whether the record's local item exists; only
            consulted for merges
        is_directory: Whether the local item is a directory

    Returns:
        The status, or None if no rule matches
    """
    for rule in RULES:
        if rule.predicate(record):
            return rule.factory(record, is_directory, file_exists)
    return None


class ClassifiedChange(NamedTuple):
    """A record together with everything resolved about it."""

    record: PendingChange
    local_path: str
    local_item_exists: bool
    status: ServerStatus | None


class StatusProvider:
    """
    Classifies pending changes and feeds them to a visitor.

    Local item existence and directory checks go through the file system
    collaborator; diagnostics go to the logger.
    """

    def __init__(self, filesystem: IFileSystem, logger: ILogger) -> None:
        self._filesystem = filesystem
        self._logger = logger

    def _log_unhandled(self, record: PendingChange) -> None:
        flags = ", ".join(sorted(change_type.value for change_type in record.change_types))
        self._logger.error(
            "Unhandled status type: %s (%s)", flags or "<none>", record.server_item
        )

    def _classify(self, record: PendingChange, local_path: str, exists: bool) -> ServerStatus | None:
        if ChangeType.UNKNOWN in record.change_types:
            self._logger.warning("Pending change on %s has an unknown change type", record.server_item)
        is_directory = exists and self._filesystem.is_directory(local_path)
        status = classify(record, lambda: exists, is_directory)
        if status is None:
            self._log_unhandled(record)
        return status

    def resolve(self, record: PendingChange) -> ClassifiedChange:
        """Resolve the native local path, its existence and the status of a record."""
        local_path = from_tfs_representation(record.local_item)
        exists = self._filesystem.exists(local_path)
        return ClassifiedChange(record, local_path, exists, self._classify(record, local_path, exists))

    def determine_status(self, record: PendingChange) -> ServerStatus | None:
        """
        Classify one record.

        Returns None (after logging at error level) when no rule matches.
        """
        return self.resolve(record).status

    def visit_by_status(self, visitor: StatusVisitor, record: PendingChange) -> ServerStatus | None:
        """
        Classify one record and dispatch it to the visitor.

        Unhandled records are logged and not dispatched. Visitor exceptions
        propagate.
        """
        change = self.resolve(record)
        if change.status is not None:
            dispatch(visitor, change.status, change.local_path, change.local_item_exists)
        return change.status

    def visit_all(
        self,
        visitor: StatusVisitor,
        records: Iterable[PendingChange],
        max_workers: int | None = None,
    ) -> list[ClassifiedChange]:
        """
        Classify a batch in parallel and dispatch sequentially.

        Classification runs on a thread pool; dispatch happens on the
        calling thread in ``server_item`` order so the visitor sees a
        deterministic sequence.

        Returns:
            Every classified record in dispatch order, unhandled ones included
        """
        records = list(records)
        if not records:
            return []

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            changes = list(executor.map(self.resolve, records))

        changes.sort(key=lambda change: change.record.server_item)
        self._logger.debug("Dispatching %d classified changes", len(changes))
        for change in changes:
            if change.status is not None:
                dispatch(visitor, change.status, change.local_path, change.local_item_exists)
        return changes
