"""
Database repository layer using SQLModel.

This package contains all repository classes organized by business domain
and table relationships. Each module provides typed async data access for
its corresponding SQLModel entity models.

Modules:
- base: AsyncBaseRepository interface and AsyncQueryBuilder utilities
- users: Users and auth sessions
- subscriptions: User subscriptions and the premium feature catalog
- banks: Bank types, banks and bank services
- features: Feature catalog and per-service feature values
- reviews: Service reviews
- comparisons: Comparison sessions and advanced comparisons
- insights: Market insights
- activity: User activity events
- pricing: Service pricing history
- bundle: SqlRepoBundle for dependency injection
"""

from .activity import UserActivityRepository
from .banks import BankRepository, BankServiceRepository, BankTypeRepository
from .base import AsyncBaseRepository, AsyncQueryBuilder
from .bundle import SqlRepoBundle, build_sql_repos
from .comparisons import AdvancedComparisonRepository, ComparisonSessionRepository
from .features import ServiceFeatureRepository, ServiceFeatureValueRepository
from .insights import MarketInsightRepository
from .pricing import ServicePricingHistoryRepository
from .reviews import ServiceReviewRepository
from .subscriptions import PLAN_UNLOCKS, PremiumFeatureRepository, UserSubscriptionRepository
from .users import AuthSessionRepository, UserRepository

__all__ = [
    "PLAN_UNLOCKS",
    "AdvancedComparisonRepository",
    "AsyncBaseRepository",
    "AsyncQueryBuilder",
    "AuthSessionRepository",
    "BankRepository",
    "BankServiceRepository",
    "BankTypeRepository",
    "ComparisonSessionRepository",
    "MarketInsightRepository",
    "PremiumFeatureRepository",
    "ServiceFeatureRepository",
    "ServiceFeatureValueRepository",
    "ServicePricingHistoryRepository",
    "ServiceReviewRepository",
    "SqlRepoBundle",
    "UserActivityRepository",
    "UserRepository",
    "UserSubscriptionRepository",
    "build_sql_repos",
]
