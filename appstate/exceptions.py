"""Custom exception classes for appstate."""

from __future__ import annotations

import errno as errno_codes
from pathlib import Path
from typing import List, Optional


class AppStateError(Exception):
    """Base exception for all appstate errors."""

    pass


class InvalidIdentityError(AppStateError, ValueError):
    """Raised when a type's organization/application/name constants are unusable."""

    def __init__(self, message: str, owner: Optional[str] = None):
        self.owner = owner
        super().__init__(message)


class DirectoryResolutionError(AppStateError):
    """Raised when the platform cannot produce a per-user root directory."""

    def __init__(self, message: str, kind: Optional[str] = None):
        self.kind = kind
        super().__init__(message)


class StateIOError(AppStateError):
    """Raised when creating, opening, reading or writing a file fails.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        operation: Optional[str] = None,
        errno: Optional[int] = None,
    ):
        self.path = path
        self.operation = operation
        self.errno = errno
        super().__init__(message)

    @property
    def not_found(self) -> bool:
        return self.errno == errno_codes.ENOENT


class ArtifactNotFoundError(StateIOError):
    """Raised when the persisted artifact does not exist."""

    pass


class SerializationError(AppStateError):
    """Raised when a value cannot be encoded."""

    def __init__(self, message: str, codec: Optional[str] = None):
        self.codec = codec
        super().__init__(message)


class DeserializationError(AppStateError):
    """Raised when persisted content cannot be decoded into the target type."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        codec: Optional[str] = None,
        diagnostic: Optional[str] = None,
    ):
        self.path = path
        self.codec = codec
        self.diagnostic = diagnostic
        super().__init__(message)


class SchemaValidationError(DeserializationError):
    """Raised when decoded content fails JSON Schema validation."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        codec: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
    ):
        self.validation_errors = validation_errors or []
        super().__init__(
            message,
            path=path,
            codec=codec,
            diagnostic="; ".join(self.validation_errors) or None,
        )
