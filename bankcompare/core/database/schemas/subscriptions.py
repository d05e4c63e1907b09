"""
Schema models for user subscriptions.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..entities.subscriptions import SubscriptionPlan, SubscriptionStatus


class UserSubscriptionBase(BaseModel):
    """Base fields for user subscription schema."""

    user_id: str
    subscription_type: SubscriptionPlan = Field(default=SubscriptionPlan.FREE)
    subscription_status: SubscriptionStatus = Field(default=SubscriptionStatus.INACTIVE)
    trial_ends_at: Optional[datetime] = None
    subscription_starts_at: Optional[datetime] = None
    subscription_ends_at: Optional[datetime] = None
    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    features: List[str] = Field(default_factory=list, description="Premium feature names unlocked")


class UserSubscriptionRead(UserSubscriptionBase):
    """Schema for reading user subscriptions."""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserSubscriptionCreate(UserSubscriptionBase):
    """Schema for creating user subscriptions."""

    pass
