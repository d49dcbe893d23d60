"""Custom exception hierarchy for sqlwrap.

All public errors inherit from SQLWrapError so callers can catch the base
class for any sqlwrap-specific failure.  Every error is raised before any
SQL is returned: a build either yields a complete ``CompiledSQL`` or raises.
"""
from __future__ import annotations

from typing import Any


class SQLWrapError(Exception):
    """Base exception for all sqlwrap errors."""


class DataKindError(SQLWrapError):
    """Raised when a data payload is not of a supported kind.

    Args:
        message: Human-readable description.
        kind: Type name of the payload (or element) that was rejected.
    """

    default_message = "invalid data kind"

    def __init__(self, message: str, kind: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind

    @classmethod
    def for_value(cls, value: Any) -> DataKindError:
        """Build the error for ``value`` using the subclass's default message."""
        return cls(cls.default_message, kind=type(value).__name__)


class InvalidUpsertPayloadError(DataKindError):
    """Raised when insert/update data is not a single record or mapping."""

    default_message = (
        "invalid data, expects dataclass, pydantic model, registered record or dict[str, Any]"
    )


class InvalidBatchPayloadError(DataKindError):
    """Raised when batch insert data is not a homogeneous collection of records."""

    default_message = (
        "invalid data, expects list of dataclasses, pydantic models, "
        "registered records or dict[str, Any]"
    )


class EmptyBatchPayloadError(SQLWrapError):
    """Raised when batch insert data contains no elements."""

    def __init__(self, message: str = "empty data") -> None:
        super().__init__(message)


class RebindError(SQLWrapError):
    """Raised when IN-expansion rejects a statement.

    Args:
        message: Human-readable description.
        sql: The dialect-neutral statement being expanded.
    """

    def __init__(self, message: str, sql: str | None = None) -> None:
        super().__init__(message)
        self.sql = sql


class UnsupportedDialectError(SQLWrapError):
    """Raised when no rebinder is registered for a driver.

    Args:
        message: Human-readable description.
        driver: The driver name that was requested.
    """

    def __init__(self, message: str, driver: str | None = None) -> None:
        super().__init__(message)
        self.driver = driver
