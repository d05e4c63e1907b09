"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
for easy dependency injection in services and application components.
All repositories of a bundle share one session, so the caller owns the
session lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlmodel.ext.asyncio.session import AsyncSession

from .activity import UserActivityRepository
from .banks import BankRepository, BankServiceRepository, BankTypeRepository
from .comparisons import AdvancedComparisonRepository, ComparisonSessionRepository
from .features import ServiceFeatureRepository, ServiceFeatureValueRepository
from .insights import MarketInsightRepository
from .pricing import ServicePricingHistoryRepository
from .reviews import ServiceReviewRepository
from .subscriptions import PremiumFeatureRepository, UserSubscriptionRepository
from .users import AuthSessionRepository, UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    users: UserRepository
    auth_sessions: AuthSessionRepository
    subscriptions: UserSubscriptionRepository
    premium_features: PremiumFeatureRepository
    bank_types: BankTypeRepository
    banks: BankRepository
    services: BankServiceRepository
    features: ServiceFeatureRepository
    feature_values: ServiceFeatureValueRepository
    reviews: ServiceReviewRepository
    comparison_sessions: ComparisonSessionRepository
    advanced_comparisons: AdvancedComparisonRepository
    insights: MarketInsightRepository
    activity: UserActivityRepository
    pricing_history: ServicePricingHistoryRepository


def build_sql_repos(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Open async session shared by every repository

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        auth_sessions=AuthSessionRepository(session),
        subscriptions=UserSubscriptionRepository(session),
        premium_features=PremiumFeatureRepository(session),
        bank_types=BankTypeRepository(session),
        banks=BankRepository(session),
        services=BankServiceRepository(session),
        features=ServiceFeatureRepository(session),
        feature_values=ServiceFeatureValueRepository(session),
        reviews=ServiceReviewRepository(session),
        comparison_sessions=ComparisonSessionRepository(session),
        advanced_comparisons=AdvancedComparisonRepository(session),
        insights=MarketInsightRepository(session),
        activity=UserActivityRepository(session),
        pricing_history=ServicePricingHistoryRepository(session),
    )
