"""Unit tests for insert/select schema models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from bankcompare.core.database.entities import (
    Bank,
    InsightCategory,
    SubscriptionPlan,
    SubscriptionStatus,
)
from bankcompare.core.database.schemas import (
    AdvancedComparisonCreate,
    BankCreate,
    BankRead,
    BankServiceCreate,
    MarketInsightCreate,
    ServiceReviewCreate,
    UserCreate,
    UserSubscriptionCreate,
)


class TestBankSchemas:
    """Tests for bank insert/select schemas."""

    def test_create_minimal(self):
        payload = BankCreate(name="Example Bank", slug="example-bank")

        assert payload.is_active is True
        assert payload.model_dump(exclude_unset=True) == {"name": "Example Bank", "slug": "example-bank"}

    def test_country_code_length(self):
        with pytest.raises(ValidationError):
            BankCreate(name="Example Bank", slug="example-bank", headquarters_country="USA")

    def test_slug_length(self):
        with pytest.raises(ValidationError):
            BankCreate(name="Example Bank", slug="x" * 256)

    def test_read_from_entity(self):
        bank = Bank(name="Example Bank", slug="example-bank")

        read = BankRead.model_validate(bank)

        assert read.id == bank.id
        assert read.slug == "example-bank"
        assert isinstance(read.created_at, datetime)


class TestBankServiceSchemas:
    """Tests for bank service insert schema."""

    def test_negative_fee_rejected(self):
        with pytest.raises(ValidationError):
            BankServiceCreate(bank_id="b1", name="Basic", slug="basic", type_id="checking", monthly_fee_cents=-1)

    def test_defaults(self):
        payload = BankServiceCreate(bank_id="b1", name="Basic", slug="basic", type_id="checking")

        assert payload.monthly_fee_cents == 0
        assert payload.rating == Decimal("0")
        assert payload.pros == []

    def test_rating_precision(self):
        with pytest.raises(ValidationError):
            BankServiceCreate(bank_id="b1", name="Basic", slug="basic", type_id="checking", rating=Decimal("10.5"))


class TestSubscriptionSchemas:
    """Tests for user subscription insert schema."""

    def test_defaults(self):
        payload = UserSubscriptionCreate(user_id="user_1")

        assert payload.subscription_type == SubscriptionPlan.FREE
        assert payload.subscription_status == SubscriptionStatus.INACTIVE

    def test_unknown_plan_rejected(self):
        with pytest.raises(ValidationError):
            UserSubscriptionCreate(user_id="user_1", subscription_type="gold")

    def test_plan_from_string(self):
        payload = UserSubscriptionCreate(user_id="user_1", subscription_type="pro", subscription_status="trial")

        assert payload.subscription_type == SubscriptionPlan.PRO
        assert payload.subscription_status == SubscriptionStatus.TRIAL


class TestReviewSchemas:
    """Tests for service review insert schema."""

    @pytest.mark.parametrize("rating", [0, 6, -3])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            ServiceReviewCreate(service_id="s1", rating=rating)

    def test_valid_review(self):
        payload = ServiceReviewCreate(service_id="s1", user_id="user_1", rating=4, title="Solid")

        assert payload.is_approved is False
        assert payload.helpful_votes == 0


class TestInsightSchemas:
    """Tests for market insight insert schema."""

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            MarketInsightCreate(title="T", slug="t", content="c", category="gossip")

    def test_category_from_string(self):
        payload = MarketInsightCreate(title="T", slug="t", content="c", category="regulatory")

        assert payload.category == InsightCategory.REGULATORY


class TestComparisonSchemas:
    """Tests for advanced comparison insert schema."""

    def test_requires_services(self):
        with pytest.raises(ValidationError):
            AdvancedComparisonCreate(user_id="user_1", service_ids=[])

    def test_metrics_dump_as_objects(self):
        payload = AdvancedComparisonCreate(
            user_id="user_1",
            service_ids=["s1", "s2"],
            metrics=[{"name": "Fee", "value": 5, "unit": "USD", "trend": "down", "comparison": "better"}],
        )

        assert payload.model_dump()["metrics"] == [
            {"name": "Fee", "value": 5.0, "unit": "USD", "trend": "down", "comparison": "better"}
        ]


class TestUserSchemas:
    """Tests for user insert schema."""

    def test_requires_id(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Dana", email="dana@example.com")
