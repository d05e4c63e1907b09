"""Unit tests for bank catalog repositories."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from bankcompare.core.database.entities import (
    Bank,
    BankService,
    BankType,
    ServiceFeature,
    ServiceFeatureValue,
    ServicePricingHistory,
    ServiceReview,
)
from bankcompare.core.database.errors import DuplicateRecordError, ReferenceViolationError


class TestBankTypeRepository:
    """Tests for BankTypeRepository operations."""

    async def test_list_ordered(self, repos):
        await repos.bank_types.create(BankType(id="savings", name="Savings", sort_order=2))
        await repos.bank_types.create(BankType(id="credit", name="Credit Cards", sort_order=1))
        await repos.bank_types.create(BankType(id="checking", name="Checking", sort_order=1))

        ordered = await repos.bank_types.list_ordered()

        assert [t.id for t in ordered] == ["checking", "credit", "savings"]

    async def test_delete_referenced_type_fails(self, repos, service):
        type_id = service.type_id

        with pytest.raises(ReferenceViolationError):
            await repos.bank_types.delete(type_id)

    async def test_delete_unreferenced_type(self, repos):
        await repos.bank_types.create(BankType(id="loans", name="Loans"))

        assert await repos.bank_types.delete("loans") is True


class TestBankRepository:
    """Tests for BankRepository operations."""

    async def test_get_by_slug(self, repos, bank):
        assert (await repos.banks.get_by_slug("first-example-bank")).id == bank.id
        assert await repos.banks.get_by_slug("missing") is None

    async def test_list_active(self, repos):
        await repos.banks.create(Bank(name="Zeta Bank", slug="zeta"))
        await repos.banks.create(Bank(name="Alpha Bank", slug="alpha"))
        await repos.banks.create(Bank(name="Closed Bank", slug="closed", is_active=False))

        active = await repos.banks.list_active()

        assert [b.slug for b in active] == ["alpha", "zeta"]

    async def test_delete_bank_cascades(self, repos, session_factory, bank, service, feature, user):
        bank_id, service_id, feature_id = bank.id, service.id, feature.id
        value = await repos.feature_values.create(ServiceFeatureValue(service_id=service_id, feature_id=feature_id))
        review = await repos.reviews.create(ServiceReview(service_id=service_id, user_id=user.id, rating=4))
        price = await repos.pricing_history.create(ServicePricingHistory(service_id=service_id, monthly_fee_cents=500))

        assert await repos.banks.delete(bank_id) is True

        async with session_factory() as fresh:
            assert await fresh.get(Bank, bank_id) is None
            assert await fresh.get(BankService, service_id) is None
            assert await fresh.get(ServiceFeatureValue, value.id) is None
            assert await fresh.get(ServiceReview, review.id) is None
            assert await fresh.get(ServicePricingHistory, price.id) is None
            # Shared catalog rows stay
            assert await fresh.get(BankType, "checking") is not None
            assert await fresh.get(ServiceFeature, feature_id) is not None


class TestBankServiceRepository:
    """Tests for BankServiceRepository operations."""

    async def _service(self, repos, bank_id: str, slug: str, **kwargs) -> BankService:
        fields = {"name": slug.title(), "type_id": "checking"}
        fields.update(kwargs)
        return await repos.services.create(BankService(bank_id=bank_id, slug=slug, **fields))

    async def test_slug_unique_within_bank(self, repos, bank, service):
        bank_id = bank.id

        with pytest.raises(DuplicateRecordError):
            await self._service(repos, bank_id, "everyday-checking")

    async def test_slug_repeats_across_banks(self, repos, service):
        other = await repos.banks.create(Bank(name="Second Bank", slug="second-bank"))

        copy = await self._service(repos, other.id, "everyday-checking")

        assert copy.id != service.id
        assert (await repos.services.get_by_slug(other.id, "everyday-checking")).id == copy.id
        assert (await repos.services.get_by_slug(service.bank_id, "everyday-checking")).id == service.id

    async def test_get_with_details(self, repos, service, feature):
        await repos.feature_values.create(
            ServiceFeatureValue(service_id=service.id, feature_id=feature.id, value="true")
        )

        detailed = await repos.services.get_with_details(service.id)

        assert detailed.bank.slug == "first-example-bank"
        assert detailed.bank_type.name == "Checking"
        assert [v.feature.name for v in detailed.feature_values] == ["ATM fee refunds"]

    async def test_get_with_details_missing(self, repos, checking_type):
        assert await repos.services.get_with_details("missing") is None

    async def test_list_for_bank(self, repos, bank, checking_type):
        await self._service(repos, bank.id, "savings-plus")
        await self._service(repos, bank.id, "basic")
        await self._service(repos, bank.id, "legacy", is_active=False)

        active = await repos.services.list_for_bank(bank.id)
        everything = await repos.services.list_for_bank(bank.id, active_only=False)

        assert [s.slug for s in active] == ["basic", "savings-plus"]
        assert len(everything) == 3

    async def test_list_by_type_and_top_rated(self, repos, bank, checking_type):
        await repos.bank_types.create(BankType(id="savings", name="Savings"))
        await self._service(repos, bank.id, "good", rating=Decimal("4.5"), review_count=10)
        await self._service(repos, bank.id, "better", rating=Decimal("4.8"), review_count=3)
        await self._service(repos, bank.id, "popular", rating=Decimal("4.5"), review_count=50)
        await self._service(repos, bank.id, "saver", type_id="savings", rating=Decimal("5.0"))

        checking = await repos.services.list_by_type("checking")
        top = await repos.services.list_top_rated(limit=3)
        top_checking = await repos.services.list_top_rated(limit=1, type_id="checking")

        assert [s.slug for s in checking] == ["better", "good", "popular"]
        assert [s.slug for s in top] == ["saver", "better", "popular"]
        assert [s.slug for s in top_checking] == ["better"]

    async def test_list_by_max_monthly_fee(self, repos, bank, checking_type):
        await self._service(repos, bank.id, "free-account", monthly_fee_cents=0)
        await self._service(repos, bank.id, "standard", monthly_fee_cents=500)
        await self._service(repos, bank.id, "premium", monthly_fee_cents=1500)

        affordable = await repos.services.list_by_max_monthly_fee(500)

        assert [s.slug for s in affordable] == ["free-account", "standard"]

    async def test_update_refreshes_updated_at(self, repos, service):
        service.updated_at = datetime(2000, 1, 1)
        service.monthly_fee_cents = 700

        updated = await repos.services.update(service)

        assert updated.monthly_fee_cents == 700
        assert updated.updated_at > datetime(2000, 1, 1)
