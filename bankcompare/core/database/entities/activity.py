"""
User activity entity models.

Append-only audit/analytics events. Anonymous visitors are tracked by
session token with no user attached.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

import sqlalchemy as sa
from sqlmodel import Field, Relationship

from ..base import Base, json_type, new_id, utc_now

if TYPE_CHECKING:
    from .auth import User


class UserActivity(Base, table=True):
    """Audit/analytics event.

    The ``metadata`` column is exposed as ``activity_metadata`` because
    ``metadata`` is reserved on declarative classes.

    Table: user_activity
    """

    __tablename__ = "user_activity"
    __table_args__ = (
        sa.Index("user_activity_user_idx", "user_id"),
        sa.Index("user_activity_type_idx", "activity_type"),
        sa.Index("user_activity_created_idx", "created_at"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    user_id: Optional[str] = Field(default=None, foreign_key="user.id", ondelete="CASCADE", sa_type=sa.Text)
    session_token: Optional[str] = Field(default=None, max_length=255)
    activity_type: str = Field(max_length=50)
    resource_type: Optional[str] = Field(default=None, max_length=50)
    resource_id: Optional[str] = Field(default=None, sa_type=sa.Text)
    activity_metadata: Optional[Dict[str, Any]] = Field(
        default_factory=dict,
        sa_column=sa.Column("metadata", json_type(), nullable=True, server_default="{}"),
    )
    ip_address: Optional[str] = Field(default=None, sa_type=sa.Text)
    user_agent: Optional[str] = Field(default=None, sa_type=sa.Text)

    created_at: datetime = Field(default_factory=utc_now)

    user: Optional["User"] = Relationship(back_populates="activities")

    def __repr__(self) -> str:
        return f"UserActivity(id={self.id}, type={self.activity_type}, user_id={self.user_id})"
