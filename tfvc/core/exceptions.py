"""
Custom exception hierarchy for tfvc.

Provides a structured exception hierarchy so that malformed server paths,
configuration problems and mapping failures surface as explicit, typed
exceptions instead of sentinel return values.
"""

from __future__ import annotations

from enum import Enum


class TfvcException(Exception):
    """
    Base exception for all tfvc errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, keys, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class TfvcConfigError(TfvcException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(TfvcConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, file not found, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(TfvcConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so callers that catch ValueError for
    validation errors keep working.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class TfvcValidationError(TfvcException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError.
    """

    pass


class PathErrorKind(str, Enum):
    """The distinct ways a server path can fail canonicalization."""

    EMPTY = "empty"
    NOT_ABSOLUTE = "not_absolute"
    ESCAPES_ROOT = "escapes_root"
    COMPONENT_TOO_LONG = "component_too_long"
    RESERVED_NAME = "reserved_name"
    INVALID_CHARACTER = "invalid_character"
    EMBEDDED_SIGIL = "embedded_sigil"
    TOO_LONG = "too_long"


class ServerPathFormatError(TfvcValidationError):
    """
    A repository path could not be canonicalized.

    Every subclass fixes ``kind`` so callers can branch on the failure
    without isinstance chains.
    """

    kind: PathErrorKind

    def __init__(
        self,
        message: str,
        *,
        path: str,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["path"] = path
        self.path = path
        super().__init__(message, context=ctx, cause=cause)


class EmptyServerPathError(ServerPathFormatError):
    """Server path is the empty string."""

    kind = PathErrorKind.EMPTY


class NotAbsoluteServerPathError(ServerPathFormatError):
    """Server path does not start with a separator (after an optional $)."""

    kind = PathErrorKind.NOT_ABSOLUTE


class EscapesRootError(ServerPathFormatError):
    """A '..' component would climb to or above the repository root."""

    kind = PathErrorKind.ESCAPES_ROOT


class ComponentTooLongError(ServerPathFormatError):
    """A single path component exceeds the maximum component length."""

    kind = PathErrorKind.COMPONENT_TOO_LONG

    def __init__(
        self,
        message: str,
        *,
        path: str,
        component: str,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["component"] = component
        self.component = component
        super().__init__(message, path=path, context=ctx, cause=cause)


class ReservedNameError(ServerPathFormatError):
    """A path component is a reserved device name such as CON or LPT1."""

    kind = PathErrorKind.RESERVED_NAME

    def __init__(
        self,
        message: str,
        *,
        path: str,
        component: str,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["component"] = component
        self.component = component
        super().__init__(message, path=path, context=ctx, cause=cause)


class InvalidCharacterError(ServerPathFormatError):
    """
    A character that is not permitted in server paths was found.

    ``character`` is the replacement-safe rendering: control characters are
    reported as '?', and ``path`` has every occurrence replaced the same way
    so the message can be printed safely.
    """

    kind = PathErrorKind.INVALID_CHARACTER

    def __init__(
        self,
        message: str,
        *,
        path: str,
        position: int,
        character: str,
        code_point: int,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["position"] = position
        ctx["character"] = character
        self.position = position
        self.character = character
        self.code_point = code_point
        super().__init__(message, path=path, context=ctx, cause=cause)


class EmbeddedSigilError(ServerPathFormatError):
    """A non-root path component begins with the '$' root sigil."""

    kind = PathErrorKind.EMBEDDED_SIGIL


class ServerPathTooLongError(ServerPathFormatError):
    """The canonical path exceeds the maximum server path length."""

    kind = PathErrorKind.TOO_LONG


class MappingNotFoundError(TfvcValidationError):
    """
    No workspace mapping covers the requested path.

    Raised by the mapping layer when translating between namespaces.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        self.path = path
        super().__init__(message, context=ctx, cause=cause)


class InvalidArgumentError(TfvcValidationError):
    """
    Invalid command-line argument or function parameter.

    Raised when user input fails validation.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
