"""
Centralized database layer for the bank comparison platform.

This package provides a unified location for all database entities and repositories,
organized by business domain and table relationships.

Structure:
- entities/: Database entity models organized by table/business logic
- repositories/: Data access layer organized by table/business logic
- schemas/: Insert/select schema models for validation and serialization
- errors.py: Domain errors raised for constraint violations
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, create/drop)
"""

from .base import Base
from .errors import (
    CheckViolationError,
    ConstraintViolationError,
    DatabaseError,
    DuplicateRecordError,
    NotNullViolationError,
    ReferenceViolationError,
)
from .session import dispose_engine, get_engine, get_session, get_session_maker
from .utils import create_all, create_engine, create_sessionmaker, drop_all

__all__ = [
    "Base",
    "CheckViolationError",
    "ConstraintViolationError",
    "DatabaseError",
    "DuplicateRecordError",
    "NotNullViolationError",
    "ReferenceViolationError",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "dispose_engine",
    "drop_all",
    "get_engine",
    "get_session",
    "get_session_maker",
]
