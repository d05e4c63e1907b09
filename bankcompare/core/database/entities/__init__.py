"""
Database entity models.

This package contains all database entity models organized by business domain
and table relationships. Importing it registers every table on the shared
metadata, which the ORM needs to resolve cross-module relationships.

Modules:
- auth: users, login sessions, provider accounts, verifications
- subscriptions: plan/billing state and the premium feature catalog
- banks: bank types, banks and bank services
- features: comparable feature dimensions and per-service values
- reviews: user reviews of services
- comparisons: comparison sessions and saved advanced comparisons
- insights: editorial market insights
- activity: audit/analytics events
- pricing: service pricing history
"""

from .activity import UserActivity
from .auth import Account, AuthSession, User, Verification
from .banks import Bank, BankService, BankType
from .comparisons import COMPARISON_SESSION_TTL, AdvancedComparison, ComparisonMetric, ComparisonSession
from .features import FeatureValueType, ServiceFeature, ServiceFeatureValue
from .insights import InsightCategory, MarketInsight
from .pricing import ServicePricingHistory
from .reviews import ServiceReview
from .subscriptions import (
    PremiumFeature,
    RequiredPlan,
    SubscriptionPlan,
    SubscriptionStatus,
    UserSubscription,
)

__all__ = [
    "COMPARISON_SESSION_TTL",
    "Account",
    "AdvancedComparison",
    "AuthSession",
    "Bank",
    "BankService",
    "BankType",
    "ComparisonMetric",
    "ComparisonSession",
    "FeatureValueType",
    "InsightCategory",
    "MarketInsight",
    "PremiumFeature",
    "RequiredPlan",
    "ServiceFeature",
    "ServiceFeatureValue",
    "ServicePricingHistory",
    "ServiceReview",
    "SubscriptionPlan",
    "SubscriptionStatus",
    "User",
    "UserActivity",
    "UserSubscription",
    "Verification",
]
