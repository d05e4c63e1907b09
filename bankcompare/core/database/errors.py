"""
Database error hierarchy.

Constraint violations are raised by the database engine as
``sqlalchemy.exc.IntegrityError``. The repository layer translates them into
the domain errors below so callers can tell a duplicate slug from a missing
parent row without inspecting driver-specific messages.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Type

from sqlalchemy.exc import IntegrityError

from .base import utc_now

# SQLSTATE codes of the integrity constraint violation class (23xxx)
NOT_NULL_VIOLATION = "23502"
FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"
CHECK_VIOLATION = "23514"


class DatabaseError(Exception):
    """Base exception for all database layer errors."""

    def __init__(
        self,
        message: str,
        table: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.table = table
        self.details = details or {}
        self.timestamp: datetime = utc_now()
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "table": self.table,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class ConstraintViolationError(DatabaseError):
    """A write violated a declared constraint."""


class DuplicateRecordError(ConstraintViolationError):
    """A unique constraint or unique index was violated."""


class ReferenceViolationError(ConstraintViolationError):
    """A foreign key points at a missing row, or a referenced row is still in use."""


class NotNullViolationError(ConstraintViolationError):
    """A required column was left empty."""


class CheckViolationError(ConstraintViolationError):
    """A check constraint (including enumerated columns) was violated."""


_SQLSTATE_ERRORS: dict[str, Type[ConstraintViolationError]] = {
    UNIQUE_VIOLATION: DuplicateRecordError,
    FOREIGN_KEY_VIOLATION: ReferenceViolationError,
    NOT_NULL_VIOLATION: NotNullViolationError,
    CHECK_VIOLATION: CheckViolationError,
}

# SQLite reports the constraint kind only in the message text
_SQLITE_MESSAGES: tuple[tuple[str, Type[ConstraintViolationError]], ...] = (
    ("unique constraint failed", DuplicateRecordError),
    ("foreign key constraint failed", ReferenceViolationError),
    ("not null constraint failed", NotNullViolationError),
    ("check constraint failed", CheckViolationError),
)


def _sqlstate(exc: IntegrityError) -> Optional[str]:
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if isinstance(code, str):
            return code
    cause = getattr(orig, "__cause__", None)
    code = getattr(cause, "sqlstate", None)
    return code if isinstance(code, str) else None


def classify_integrity_error(exc: IntegrityError) -> Type[ConstraintViolationError]:
    """Pick the domain error class for a database integrity error."""
    code = _sqlstate(exc)
    if code in _SQLSTATE_ERRORS:
        return _SQLSTATE_ERRORS[code]

    text = str(exc.orig).lower()
    for needle, error_cls in _SQLITE_MESSAGES:
        if needle in text:
            return error_cls
    return ConstraintViolationError


def translate_integrity_error(exc: IntegrityError, table: Optional[str] = None) -> ConstraintViolationError:
    """Build the domain error for ``exc``.

    Args:
        exc: Error raised by the engine on flush or commit
        table: Table the failing write targeted, when known

    Returns:
        The matching ``ConstraintViolationError`` subclass instance; the caller
        raises it chained to ``exc``.
    """
    error_cls = classify_integrity_error(exc)
    return error_cls(
        str(exc.orig),
        table=table,
        details={"sqlstate": _sqlstate(exc), "statement": exc.statement},
    )
