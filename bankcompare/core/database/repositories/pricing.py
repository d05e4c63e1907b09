"""
Service pricing history repository.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import utc_now
from ..entities.pricing import ServicePricingHistory
from .base import AsyncBaseRepository


class ServicePricingHistoryRepository(AsyncBaseRepository[ServicePricingHistory]):
    """Repository for historical service fees."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ServicePricingHistory)

    def _default_order(self):
        return ServicePricingHistory.effective_from

    async def list_for_service(self, service_id: str) -> List[ServicePricingHistory]:
        """List the price history of a service, newest first."""
        stmt = (
            select(ServicePricingHistory)
            .where(ServicePricingHistory.service_id == service_id)
            .order_by(col(ServicePricingHistory.effective_from).desc())
        )
        return await self._all(stmt)

    async def get_current(self, service_id: str, at: Optional[datetime] = None) -> Optional[ServicePricingHistory]:
        """Get the price of a service in force at a moment.

        Args:
            service_id: Priced service
            at: Reference time, defaults to the current UTC time

        Returns:
            The latest row whose effective range contains ``at``, or None
        """
        moment = at or utc_now()
        stmt = (
            select(ServicePricingHistory)
            .where(ServicePricingHistory.service_id == service_id)
            .where(ServicePricingHistory.effective_from <= moment)
            .where(
                or_(
                    col(ServicePricingHistory.effective_to).is_(None),
                    col(ServicePricingHistory.effective_to) > moment,
                )
            )
            .order_by(col(ServicePricingHistory.effective_from).desc())
            .limit(1)
        )
        return await self._one_or_none(stmt)
