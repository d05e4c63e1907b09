"""
Review entity models.

User reviews of bank services. Reviews survive the deletion of their
author: ``user_id`` is nulled instead.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

import sqlalchemy as sa
from sqlmodel import Field, Relationship

from ..base import Base, json_type, new_id, utc_now

if TYPE_CHECKING:
    from .auth import User
    from .banks import BankService


class ServiceReview(Base, table=True):
    """A user's review of a bank service.

    Table: service_review
    """

    __tablename__ = "service_review"
    __table_args__ = (
        sa.Index("service_review_service_idx", "service_id"),
        sa.Index("service_review_user_idx", "user_id"),
        sa.Index("service_review_rating_idx", "rating"),
        sa.Index("service_review_approved_idx", "is_approved"),
        sa.Index("service_review_created_idx", "created_at"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    service_id: str = Field(foreign_key="bank_service.id", ondelete="CASCADE", sa_type=sa.Text)
    user_id: Optional[str] = Field(default=None, foreign_key="user.id", ondelete="SET NULL", sa_type=sa.Text)

    rating: int
    title: Optional[str] = Field(default=None, max_length=255)
    content: Optional[str] = Field(default=None, sa_type=sa.Text)
    pros: Optional[List[str]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )
    cons: Optional[List[str]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )

    # Moderation
    verified_customer: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    helpful_votes: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
    is_featured: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    is_approved: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    service: Optional["BankService"] = Relationship(back_populates="reviews")
    user: Optional["User"] = Relationship(back_populates="reviews")

    def __repr__(self) -> str:
        return f"ServiceReview(id={self.id}, service_id={self.service_id}, rating={self.rating})"
