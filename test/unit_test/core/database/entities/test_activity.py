"""Unit tests for user activity and pricing history entity models."""

from __future__ import annotations

from datetime import datetime

from bankcompare.core.database.entities import ServicePricingHistory, UserActivity


class TestUserActivity:
    """Tests for UserActivity entity model."""

    def test_metadata_column_name(self):
        table = UserActivity.__table__

        assert "metadata" in table.c
        assert "activity_metadata" not in table.c

    def test_defaults(self):
        activity = UserActivity(activity_type="view")

        assert activity.user_id is None
        assert activity.activity_metadata == {}


class TestServicePricingHistory:
    """Tests for ServicePricingHistory entity model."""

    def test_open_range_is_current(self):
        price = ServicePricingHistory(service_id="service_1", effective_from=datetime(2026, 1, 1))

        assert price.is_current(datetime(2026, 6, 1)) is True
        assert price.is_current(datetime(2025, 12, 31)) is False

    def test_closed_range(self):
        price = ServicePricingHistory(
            service_id="service_1",
            effective_from=datetime(2026, 1, 1),
            effective_to=datetime(2026, 2, 1),
        )

        assert price.is_current(datetime(2026, 1, 15)) is True
        assert price.is_current(datetime(2026, 2, 1)) is False
