"""
Subscription and premium feature repositories.

Data access for plan/billing state and the premium feature catalog.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.subscriptions import PremiumFeature, RequiredPlan, SubscriptionPlan, UserSubscription
from .base import AsyncBaseRepository

# Premium feature tiers each plan unlocks
PLAN_UNLOCKS = {
    SubscriptionPlan.FREE: (),
    SubscriptionPlan.PREMIUM: (RequiredPlan.PREMIUM,),
    SubscriptionPlan.PRO: (RequiredPlan.PREMIUM, RequiredPlan.PRO),
}


class UserSubscriptionRepository(AsyncBaseRepository[UserSubscription]):
    """Repository for user subscription data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UserSubscription)

    async def get_for_user(self, user_id: str) -> Optional[UserSubscription]:
        """Get the subscription of a user.

        Args:
            user_id: Owning user

        Returns:
            Most recently created subscription, or None
        """
        stmt = (
            select(UserSubscription)
            .where(UserSubscription.user_id == user_id)
            .order_by(col(UserSubscription.created_at).desc())
            .limit(1)
        )
        return await self._one_or_none(stmt)

    async def get_by_stripe_customer(self, stripe_customer_id: str) -> Optional[UserSubscription]:
        """Get the subscription billed to a Stripe customer."""
        stmt = select(UserSubscription).where(UserSubscription.stripe_customer_id == stripe_customer_id).limit(1)
        return await self._one_or_none(stmt)

    async def list_by_plan(self, plan: SubscriptionPlan) -> List[UserSubscription]:
        """List subscriptions on a plan."""
        stmt = (
            select(UserSubscription)
            .where(UserSubscription.subscription_type == plan)
            .order_by(col(UserSubscription.created_at).asc())
        )
        return await self._all(stmt)


class PremiumFeatureRepository(AsyncBaseRepository[PremiumFeature]):
    """Repository for the premium feature catalog."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PremiumFeature)

    def _default_order(self):
        return PremiumFeature.name

    async def get_by_name(self, name: str) -> Optional[PremiumFeature]:
        return await self._one_or_none(select(PremiumFeature).where(PremiumFeature.name == name))

    async def list_for_plan(self, plan: SubscriptionPlan) -> List[PremiumFeature]:
        """List the active features a plan unlocks.

        ``premium`` unlocks premium features, ``pro`` unlocks premium and pro
        features, ``free`` unlocks none.

        Args:
            plan: Subscription plan

        Returns:
            Active PremiumFeature instances ordered by name
        """
        tiers = PLAN_UNLOCKS[SubscriptionPlan(plan)]
        if not tiers:
            return []
        stmt = (
            select(PremiumFeature)
            .where(col(PremiumFeature.required_plan).in_(tiers))
            .where(PremiumFeature.is_active == True)  # noqa: E712
            .order_by(PremiumFeature.name)
        )
        return await self._all(stmt)
