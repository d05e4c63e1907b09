"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the centralized database layer using SQLModel: the shared
``Base`` class and the column helpers every table builds on.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Type

import sqlalchemy as sa
from pydantic import ConfigDict
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def new_id() -> str:
    """Generate a primary key value (random UUID4 rendered as text)."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Get current UTC datetime as naive datetime.

    Columns are ``timestamp without time zone``, so values are stored as
    naive UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def json_type() -> sa.types.TypeEngine:
    """JSON column type: ``jsonb`` on PostgreSQL, generic JSON elsewhere."""
    return sa.JSON().with_variant(JSONB(), "postgresql")


def enum_type(enum_cls: Type[Enum], name: str) -> sa.Enum:
    """Enumerated text column restricted by a named CHECK constraint.

    Values (not member names) are stored, and no native database enum type
    is created.

    Args:
        enum_cls: ``str`` enum listing the allowed values
        name: Name of the generated CHECK constraint
    """
    return sa.Enum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        values_callable=lambda members: [member.value for member in members],
    )
