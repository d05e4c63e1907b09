"""
Database schema models for validation and serialization.

This package contains Pydantic-based insert (``XCreate``) and select
(``XRead``) shapes. They are separate from the entity models so callers can
validate input before it reaches the database.
"""

from . import banks, comparisons, insights, reviews, subscriptions, users
from .banks import BankCreate, BankRead, BankServiceCreate, BankServiceRead
from .comparisons import AdvancedComparisonCreate, AdvancedComparisonRead
from .insights import MarketInsightCreate, MarketInsightRead
from .reviews import ServiceReviewCreate, ServiceReviewRead
from .subscriptions import UserSubscriptionCreate, UserSubscriptionRead
from .users import UserCreate, UserRead

__all__ = [
    "AdvancedComparisonCreate",
    "AdvancedComparisonRead",
    "BankCreate",
    "BankRead",
    "BankServiceCreate",
    "BankServiceRead",
    "MarketInsightCreate",
    "MarketInsightRead",
    "ServiceReviewCreate",
    "ServiceReviewRead",
    "UserCreate",
    "UserRead",
    "UserSubscriptionCreate",
    "UserSubscriptionRead",
    "banks",
    "comparisons",
    "insights",
    "reviews",
    "subscriptions",
    "users",
]
