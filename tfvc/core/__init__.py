"""
Core infrastructure for tfvc.

This package provides:
- Interface definitions for the engine's collaborators
- Pydantic models for records, statuses, mappings and configuration
- ServiceContainer and bootstrap for wiring the CLI
- Custom exception hierarchy
"""

from .exceptions import (
    ComponentTooLongError,
    ConfigFileError,
    ConfigValidationError,
    EmbeddedSigilError,
    EmptyServerPathError,
    EscapesRootError,
    InvalidArgumentError,
    InvalidCharacterError,
    MappingNotFoundError,
    NotAbsoluteServerPathError,
    PathErrorKind,
    ReservedNameError,
    ServerPathFormatError,
    ServerPathTooLongError,
    TfvcConfigError,
    TfvcException,
    TfvcValidationError,
)

__all__ = [
    "ComponentTooLongError",
    "ConfigFileError",
    "ConfigValidationError",
    "EmbeddedSigilError",
    "EmptyServerPathError",
    "EscapesRootError",
    "InvalidArgumentError",
    "InvalidCharacterError",
    "MappingNotFoundError",
    "NotAbsoluteServerPathError",
    "PathErrorKind",
    "ReservedNameError",
    "ServerPathFormatError",
    "ServerPathTooLongError",
    "TfvcConfigError",
    "TfvcException",
    "TfvcValidationError",
]
