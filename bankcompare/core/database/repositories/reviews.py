"""
Service review repository.

Data access for user reviews, including the moderation views.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.reviews import ServiceReview
from .base import AsyncBaseRepository


class ServiceReviewRepository(AsyncBaseRepository[ServiceReview]):
    """Repository for service reviews."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ServiceReview)

    async def list_approved_for_service(
        self, service_id: str, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> List[ServiceReview]:
        """List approved reviews of a service, newest first."""
        stmt = (
            select(ServiceReview)
            .where(ServiceReview.service_id == service_id)
            .where(ServiceReview.is_approved == True)  # noqa: E712
            .order_by(col(ServiceReview.created_at).desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return await self._all(stmt)

    async def list_for_user(self, user_id: str) -> List[ServiceReview]:
        """List reviews written by a user, newest first."""
        stmt = select(ServiceReview).where(ServiceReview.user_id == user_id).order_by(col(ServiceReview.created_at).desc())
        return await self._all(stmt)

    async def list_featured(self, limit: int = 10) -> List[ServiceReview]:
        """List approved featured reviews, most helpful first."""
        stmt = (
            select(ServiceReview)
            .where(ServiceReview.is_featured == True)  # noqa: E712
            .where(ServiceReview.is_approved == True)  # noqa: E712
            .order_by(col(ServiceReview.helpful_votes).desc(), col(ServiceReview.created_at).desc())
            .limit(limit)
        )
        return await self._all(stmt)
