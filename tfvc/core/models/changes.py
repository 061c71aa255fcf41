"""
Pending change models.

A pending change is one server-reported record describing how an item in
the local workspace differs from the last synced server state.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator

from .base import ImmutableModel

if TYPE_CHECKING:
    from ..interfaces.logger import ILogger


class ChangeType(str, Enum):
    """Change type flags reported by the server for a pending change."""

    ADD = "add"
    RENAME = "rename"
    EDIT = "edit"
    DELETE = "delete"
    UNDELETE = "undelete"
    LOCK = "lock"
    BRANCH = "branch"
    MERGE = "merge"
    UNKNOWN = "unknown"

    @classmethod
    def from_token(cls, token: str | ChangeType, logger: ILogger | None = None) -> ChangeType:
        """
        Map one wire token to a flag, ignoring case and surrounding space.

        Unrecognized tokens map to UNKNOWN and are logged when a logger is
        supplied.
        """
        if isinstance(token, ChangeType):
            return token
        try:
            return cls(token.strip().lower())
        except ValueError:
            if logger is not None:
                logger.warning("Unrecognized change type %r mapped to %s", token, cls.UNKNOWN.value)
            return cls.UNKNOWN

    @classmethod
    def parse(
        cls,
        tokens: str | Iterable[str | ChangeType],
        logger: ILogger | None = None,
    ) -> frozenset[ChangeType]:
        """
        Parse change types from a comma separated string or an iterable.

        Duplicates and case variants collapse to one flag. Empty tokens are
        skipped.
        """
        if isinstance(tokens, str):
            tokens = tokens.split(",")
        return frozenset(
            cls.from_token(token, logger)
            for token in tokens
            if isinstance(token, ChangeType) or token.strip()
        )


class PendingChange(ImmutableModel):
    """
    One pending change as reported by the server.

    ``is_candidate`` marks an item the server does not track at all; when it
    is set ``change_types`` is ignored.
    """

    server_item: str
    local_item: str
    change_types: frozenset[ChangeType] = Field(default_factory=frozenset)
    is_candidate: bool = False
    version: int = 0
    owner: str | None = None
    date: str | None = None
    lock: str | None = None
    workspace: str | None = None
    computer: str | None = None
    source_item: str | None = None

    @field_validator("server_item")
    @classmethod
    def canonicalize_server_item(cls, v: str) -> str:
        """Server items are stored in canonical form."""
        from ...path.server import canonicalize

        return canonicalize(v)

    @field_validator("source_item")
    @classmethod
    def canonicalize_source_item(cls, v: str | None) -> str | None:
        if not v:
            return None
        from ...path.server import canonicalize

        return canonicalize(v)

    @field_validator("change_types", mode="before")
    @classmethod
    def parse_change_types(cls, v: Any) -> frozenset[ChangeType]:
        """Accept a comma separated string or any iterable of tokens."""
        if v is None:
            return frozenset()
        return ChangeType.parse(v)

    @field_validator("version", mode="before")
    @classmethod
    def parse_version(cls, v: Any) -> int:
        """The server reports versions as strings."""
        if isinstance(v, str):
            return int(v.strip() or 0)
        return v

    def has(self, *change_types: ChangeType) -> bool:
        """True if every given flag is present."""
        return all(change_type in self.change_types for change_type in change_types)

    @classmethod
    def from_wire(cls, data: dict[str, Any], logger: ILogger | None = None) -> PendingChange:
        """
        Build a record from collaborator output, logging unknown change types.

        Accepts camelCase keys as produced by the command-line client
        (``serverItem``, ``changeTypes``, ``isCandidate``, ...).
        """
        normalized = {_WIRE_KEYS.get(key, key): value for key, value in data.items()}
        if "change_types" in normalized and normalized["change_types"] is not None:
            normalized["change_types"] = ChangeType.parse(normalized["change_types"], logger)
        return cls.model_validate(normalized)


_WIRE_KEYS = {
    "serverItem": "server_item",
    "localItem": "local_item",
    "changeTypes": "change_types",
    "isCandidate": "is_candidate",
    "sourceItem": "source_item",
}
