"""
Workspace mapping models.

A working folder asserts that a local directory and a server path denote
the same tree position.
"""

from __future__ import annotations

from pydantic import ConfigDict, field_validator, model_validator

from .base import TfvcBaseModel


class WorkingFolder(TfvcBaseModel):
    """One workspace mapping between a local root and a server root.

    A cloaked mapping hides the server subtree from the workspace; it maps
    nothing and masks broader mappings below its server path.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=False,  # Loaded from TOML and environment variables
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )

    server_item: str
    local_item: str = ""
    cloaked: bool = False

    @field_validator("server_item")
    @classmethod
    def canonicalize_server_item(cls, v: str) -> str:
        """Store the canonical server path."""
        from ...path.server import canonicalize

        return canonicalize(v)

    @field_validator("local_item")
    @classmethod
    def strip_trailing_separators(cls, v: str) -> str:
        from ...path.local import remove_trailing_separators

        return remove_trailing_separators(v)

    @model_validator(mode="after")
    def require_local_item(self) -> WorkingFolder:
        """Only cloaked mappings may omit the local path."""
        if not self.cloaked and not self.local_item:
            raise ValueError(f"Mapping for {self.server_item} needs a local path")
        return self
