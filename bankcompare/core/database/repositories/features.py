"""
Feature comparison repositories.

Data access for the feature catalog and per-service feature values.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.features import ServiceFeature, ServiceFeatureValue
from .base import AsyncBaseRepository


class ServiceFeatureRepository(AsyncBaseRepository[ServiceFeature]):
    """Repository for comparable feature dimensions."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ServiceFeature)

    def _default_order(self):
        return ServiceFeature.sort_order

    async def get_by_name(self, name: str) -> Optional[ServiceFeature]:
        return await self._one_or_none(select(ServiceFeature).where(ServiceFeature.name == name))

    async def list_by_category(self, category: str) -> List[ServiceFeature]:
        """List features of a category in display order."""
        stmt = (
            select(ServiceFeature)
            .where(ServiceFeature.category == category)
            .order_by(col(ServiceFeature.sort_order).asc(), col(ServiceFeature.name).asc())
        )
        return await self._all(stmt)


class ServiceFeatureValueRepository(AsyncBaseRepository[ServiceFeatureValue]):
    """Repository for service feature values."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ServiceFeatureValue)

    def _default_order(self):
        return None

    async def get_for_service_feature(self, service_id: str, feature_id: str) -> Optional[ServiceFeatureValue]:
        """Get the value a service has for a feature."""
        stmt = select(ServiceFeatureValue).where(
            ServiceFeatureValue.service_id == service_id,
            ServiceFeatureValue.feature_id == feature_id,
        )
        return await self._one_or_none(stmt)

    async def list_for_service(self, service_id: str) -> List[ServiceFeatureValue]:
        """List all feature values of a service with their feature loaded."""
        stmt = (
            select(ServiceFeatureValue)
            .where(ServiceFeatureValue.service_id == service_id)
            .options(selectinload(ServiceFeatureValue.feature))
        )
        return await self._all(stmt)

    async def rank_services_by_feature(self, feature_id: str, descending: bool = True) -> List[ServiceFeatureValue]:
        """Order services on a numeric feature.

        Values without a ``numeric_value`` are left out.

        Args:
            feature_id: Feature to rank on
            descending: Highest value first when True

        Returns:
            Feature values with their service loaded, in rank order
        """
        numeric = col(ServiceFeatureValue.numeric_value)
        stmt = (
            select(ServiceFeatureValue)
            .where(ServiceFeatureValue.feature_id == feature_id)
            .where(numeric.is_not(None))
            .order_by(numeric.desc() if descending else numeric.asc())
            .options(selectinload(ServiceFeatureValue.service))
        )
        return await self._all(stmt)
