"""Unit tests for the market insight repository."""

from __future__ import annotations

from datetime import datetime

import pytest

from bankcompare.core.database.entities import InsightCategory, MarketInsight
from bankcompare.core.database.errors import DuplicateRecordError


def _insight(slug: str, **kwargs) -> MarketInsight:
    fields = {
        "title": slug.replace("-", " ").title(),
        "content": "Body",
        "category": InsightCategory.MARKET_TRENDS,
        "is_published": True,
    }
    fields.update(kwargs)
    return MarketInsight(slug=slug, **fields)


class TestMarketInsightRepository:
    """Tests for MarketInsightRepository operations."""

    async def test_get_by_slug(self, repos):
        created = await repos.insights.create(_insight("rate-watch"))

        assert (await repos.insights.get_by_slug("rate-watch")).id == created.id
        assert await repos.insights.get_by_slug("missing") is None

    async def test_duplicate_slug_rejected(self, repos):
        await repos.insights.create(_insight("rate-watch"))

        with pytest.raises(DuplicateRecordError):
            await repos.insights.create(_insight("rate-watch"))

    async def test_list_published_newest_first(self, repos):
        await repos.insights.create(_insight("older", published_at=datetime(2026, 1, 1)))
        await repos.insights.create(_insight("newer", published_at=datetime(2026, 3, 1)))
        await repos.insights.create(_insight("draft", is_published=False, published_at=datetime(2026, 4, 1)))

        published = await repos.insights.list_published()

        assert [i.slug for i in published] == ["newer", "older"]

    async def test_list_published_hides_premium_by_default(self, repos):
        await repos.insights.create(_insight("free-read", published_at=datetime(2026, 1, 1)))
        await repos.insights.create(_insight("paid-read", is_premium=True, published_at=datetime(2026, 2, 1)))

        public = await repos.insights.list_published()
        everything = await repos.insights.list_published(include_premium=True)

        assert [i.slug for i in public] == ["free-read"]
        assert [i.slug for i in everything] == ["paid-read", "free-read"]

    async def test_list_published_by_category(self, repos):
        await repos.insights.create(_insight("trend", published_at=datetime(2026, 1, 1)))
        await repos.insights.create(
            _insight("new-rules", category=InsightCategory.REGULATORY, published_at=datetime(2026, 1, 2))
        )

        regulatory = await repos.insights.list_published(category="regulatory")

        assert [i.slug for i in regulatory] == ["new-rules"]
