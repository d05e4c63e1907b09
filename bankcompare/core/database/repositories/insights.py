"""
Market insight repository.

Data access for editorial articles.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.insights import InsightCategory, MarketInsight
from .base import AsyncBaseRepository


class MarketInsightRepository(AsyncBaseRepository[MarketInsight]):
    """Repository for market insights."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, MarketInsight)

    async def get_by_slug(self, slug: str) -> Optional[MarketInsight]:
        """Get an article by its unique slug, published or not."""
        return await self._one_or_none(select(MarketInsight).where(MarketInsight.slug == slug))

    async def list_published(
        self,
        category: Optional[InsightCategory] = None,
        include_premium: bool = False,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[MarketInsight]:
        """List published articles, newest first.

        Args:
            category: Restrict to one category
            include_premium: Also return premium articles
            limit: Maximum number of articles
            offset: Number of articles to skip

        Returns:
            MarketInsight instances ordered by ``published_at``
        """
        stmt = select(MarketInsight).where(MarketInsight.is_published == True)  # noqa: E712
        if category is not None:
            stmt = stmt.where(MarketInsight.category == InsightCategory(category))
        if not include_premium:
            stmt = stmt.where(MarketInsight.is_premium == False)  # noqa: E712
        stmt = stmt.order_by(col(MarketInsight.published_at).desc().nulls_last(), col(MarketInsight.created_at).desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return await self._all(stmt)
