"""
Authentication entity models.

This module contains the tables owned by the external authentication
library: users, their login sessions, linked provider accounts and pending
verifications. The layout mirrors that library's schema so both can share
the same database; this package only declares the tables.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

import sqlalchemy as sa
from sqlmodel import Field, Relationship

from ..base import Base, utc_now

if TYPE_CHECKING:
    from .activity import UserActivity
    from .comparisons import AdvancedComparison
    from .reviews import ServiceReview
    from .subscriptions import UserSubscription


class User(Base, table=True):
    """Account holder.

    Table: user
    """

    __tablename__ = "user"
    __table_args__ = (sa.UniqueConstraint("email", name="user_email_unique"),)

    id: str = Field(primary_key=True, sa_type=sa.Text)
    name: str = Field(sa_type=sa.Text)
    email: str = Field(sa_type=sa.Text)
    email_verified: bool = Field(default=False)
    image: Optional[str] = Field(default=None, sa_type=sa.Text)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Relationships
    subscription: Optional["UserSubscription"] = Relationship(
        back_populates="user",
        cascade_delete=True,
        passive_deletes=True,
        sa_relationship_kwargs={"uselist": False},
    )
    reviews: List["ServiceReview"] = Relationship(back_populates="user", passive_deletes=True)
    comparisons: List["AdvancedComparison"] = Relationship(
        back_populates="user", cascade_delete=True, passive_deletes=True
    )
    activities: List["UserActivity"] = Relationship(back_populates="user", cascade_delete=True, passive_deletes=True)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"


class AuthSession(Base, table=True):
    """Login session issued by the auth library.

    Table: session
    """

    __tablename__ = "session"
    __table_args__ = (sa.UniqueConstraint("token", name="session_token_unique"),)

    id: str = Field(primary_key=True, sa_type=sa.Text)
    expires_at: datetime
    token: str = Field(sa_type=sa.Text)
    created_at: datetime
    updated_at: datetime
    ip_address: Optional[str] = Field(default=None, sa_type=sa.Text)
    user_agent: Optional[str] = Field(default=None, sa_type=sa.Text)
    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", sa_type=sa.Text)

    def __repr__(self) -> str:
        return f"AuthSession(id={self.id}, user_id={self.user_id})"


class Account(Base, table=True):
    """Credential record linking a user to an identity provider.

    Table: account
    """

    __tablename__ = "account"

    id: str = Field(primary_key=True, sa_type=sa.Text)
    account_id: str = Field(sa_type=sa.Text)
    provider_id: str = Field(sa_type=sa.Text)
    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", sa_type=sa.Text)
    access_token: Optional[str] = Field(default=None, sa_type=sa.Text)
    refresh_token: Optional[str] = Field(default=None, sa_type=sa.Text)
    id_token: Optional[str] = Field(default=None, sa_type=sa.Text)
    access_token_expires_at: Optional[datetime] = None
    refresh_token_expires_at: Optional[datetime] = None
    scope: Optional[str] = Field(default=None, sa_type=sa.Text)
    password: Optional[str] = Field(default=None, sa_type=sa.Text)
    created_at: datetime
    updated_at: datetime

    def __repr__(self) -> str:
        return f"Account(id={self.id}, provider={self.provider_id}, user_id={self.user_id})"


class Verification(Base, table=True):
    """Pending verification value (email confirmation, password reset).

    Table: verification
    """

    __tablename__ = "verification"

    id: str = Field(primary_key=True, sa_type=sa.Text)
    identifier: str = Field(sa_type=sa.Text)
    value: str = Field(sa_type=sa.Text)
    expires_at: datetime
    created_at: Optional[datetime] = Field(default_factory=utc_now, nullable=True)
    updated_at: Optional[datetime] = Field(default_factory=utc_now, nullable=True)

    def __repr__(self) -> str:
        return f"Verification(id={self.id}, identifier={self.identifier})"
