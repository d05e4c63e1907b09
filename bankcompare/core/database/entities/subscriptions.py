"""
Subscription and premium feature entity models.

This module contains the billing/plan state attached to each user and the
catalog of features gated behind paid plans.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

import sqlalchemy as sa
from sqlmodel import Field, Relationship

from ..base import Base, enum_type, json_type, new_id, utc_now

if TYPE_CHECKING:
    from .auth import User


class SubscriptionPlan(str, Enum):
    """Plan a user is subscribed to."""

    FREE = "free"
    PREMIUM = "premium"
    PRO = "pro"


class SubscriptionStatus(str, Enum):
    """Billing state of a subscription."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    TRIAL = "trial"
    CANCELLED = "cancelled"


class RequiredPlan(str, Enum):
    """Lowest paid plan that unlocks a premium feature."""

    PREMIUM = "premium"
    PRO = "pro"


class UserSubscription(Base, table=True):
    """Plan and billing state for a user.

    Stripe identifiers are stored as received; the features list holds the
    names of premium features granted on top of the plan.

    Table: user_subscription
    """

    __tablename__ = "user_subscription"
    __table_args__ = (
        sa.Index("user_subscription_user_id_idx", "user_id"),
        sa.Index("user_subscription_type_idx", "subscription_type"),
        sa.Index("user_subscription_stripe_customer_idx", "stripe_customer_id"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", sa_type=sa.Text)

    subscription_type: SubscriptionPlan = Field(
        default=SubscriptionPlan.FREE,
        sa_type=enum_type(SubscriptionPlan, "user_subscription_type_check"),
        sa_column_kwargs={"server_default": SubscriptionPlan.FREE.value},
    )
    subscription_status: SubscriptionStatus = Field(
        default=SubscriptionStatus.INACTIVE,
        sa_type=enum_type(SubscriptionStatus, "user_subscription_status_check"),
        sa_column_kwargs={"server_default": SubscriptionStatus.INACTIVE.value},
    )

    trial_ends_at: Optional[datetime] = None
    subscription_starts_at: Optional[datetime] = None
    subscription_ends_at: Optional[datetime] = None

    stripe_customer_id: Optional[str] = Field(default=None, sa_type=sa.Text)
    stripe_subscription_id: Optional[str] = Field(default=None, sa_type=sa.Text)

    features: Optional[List[str]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    user: Optional["User"] = Relationship(back_populates="subscription")

    @property
    def is_paid(self) -> bool:
        """Whether the plan is a paid one and currently usable."""
        return self.subscription_type != SubscriptionPlan.FREE and self.subscription_status in (
            SubscriptionStatus.ACTIVE,
            SubscriptionStatus.TRIAL,
        )

    def __repr__(self) -> str:
        return (
            f"UserSubscription(id={self.id}, user_id={self.user_id}, "
            f"plan={self.subscription_type}, status={self.subscription_status})"
        )


class PremiumFeature(Base, table=True):
    """Catalog entry for a feature gated behind a paid plan.

    Table: premium_feature
    """

    __tablename__ = "premium_feature"
    __table_args__ = (
        sa.Index("premium_feature_name_idx", "name", unique=True),
        sa.Index("premium_feature_required_plan_idx", "required_plan"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, sa_type=sa.Text)
    required_plan: RequiredPlan = Field(sa_type=enum_type(RequiredPlan, "premium_feature_required_plan_check"))
    icon: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = Field(default=True, sa_column_kwargs={"server_default": sa.true()})

    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"PremiumFeature(id={self.id}, name={self.name}, required_plan={self.required_plan})"
