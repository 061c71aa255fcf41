"""
Configuration models.

Provides Pydantic models for tfvc configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import TfvcBaseModel
from .mapping import WorkingFolder

# Type aliases
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(TfvcBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class WorkspaceConfig(ConfigBaseModel):
    """Workspace section: the working folders of the local workspace."""

    name: str | None = None
    mappings: list[WorkingFolder] = Field(default_factory=list)


class StatusConfig(ConfigBaseModel):
    """Status refresh configuration section."""

    max_workers: int | None = None
    include_unversioned: bool = True

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, v: int | None) -> int | None:
        """Worker count must be positive when given."""
        if v is not None and v < 1:
            raise ValueError("max_workers must be at least 1")
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True


class TfvcConfig(ConfigBaseModel):
    """Complete tfvc configuration.

    This model represents the full configuration with all sections.
    It can be loaded from TOML files or constructed programmatically.
    """

    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    status: StatusConfig = Field(default_factory=StatusConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'logging.level')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        obj: Any = self
        for part in key.split("."):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            elif isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dict format."""
        return self.model_dump()
