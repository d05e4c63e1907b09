"""
Bank catalog repositories.

Data access for bank types, banks and bank services. Lookups follow the
indexes declared on the tables: slugs, bank/type membership, rating and
monthly fee.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.banks import Bank, BankService, BankType
from ..entities.features import ServiceFeatureValue
from .base import AsyncBaseRepository


class BankTypeRepository(AsyncBaseRepository[BankType]):
    """Repository for bank service categories."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BankType)

    def _default_order(self):
        return BankType.sort_order

    async def list_ordered(self) -> List[BankType]:
        """List all bank types by sort order, then name."""
        stmt = select(BankType).order_by(col(BankType.sort_order).asc(), col(BankType.name).asc())
        return await self._all(stmt)


class BankRepository(AsyncBaseRepository[Bank]):
    """Repository for banks."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Bank)

    async def get_by_slug(self, slug: str) -> Optional[Bank]:
        """Get a bank by its unique slug."""
        return await self._one_or_none(select(Bank).where(Bank.slug == slug))

    async def list_active(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Bank]:
        """List active banks alphabetically."""
        stmt = select(Bank).where(Bank.is_active == True).order_by(col(Bank.name).asc())  # noqa: E712
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return await self._all(stmt)


class BankServiceRepository(AsyncBaseRepository[BankService]):
    """Repository for bank services."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BankService)

    async def get_by_slug(self, bank_id: str, slug: str) -> Optional[BankService]:
        """Get a service by its slug within a bank.

        Args:
            bank_id: Owning bank
            slug: Service slug, unique per bank

        Returns:
            BankService instance or None
        """
        stmt = select(BankService).where(BankService.bank_id == bank_id, BankService.slug == slug)
        return await self._one_or_none(stmt)

    async def get_with_details(self, service_id: str) -> Optional[BankService]:
        """Get a service with its bank, type and feature values loaded.

        Relationships are loaded eagerly because lazy loads are not
        available on async sessions.
        """
        stmt = (
            select(BankService)
            .where(BankService.id == service_id)
            .options(
                selectinload(BankService.bank),
                selectinload(BankService.bank_type),
                selectinload(BankService.feature_values).selectinload(ServiceFeatureValue.feature),
            )
        )
        return await self._one_or_none(stmt)

    async def list_for_bank(self, bank_id: str, active_only: bool = True) -> List[BankService]:
        """List the services of a bank by name."""
        stmt = select(BankService).where(BankService.bank_id == bank_id)
        if active_only:
            stmt = stmt.where(BankService.is_active == True)  # noqa: E712
        return await self._all(stmt.order_by(col(BankService.name).asc()))

    async def list_by_type(self, type_id: str, active_only: bool = True) -> List[BankService]:
        """List services of one type, best rated first."""
        stmt = select(BankService).where(BankService.type_id == type_id)
        if active_only:
            stmt = stmt.where(BankService.is_active == True)  # noqa: E712
        return await self._all(stmt.order_by(col(BankService.rating).desc(), col(BankService.name).asc()))

    async def list_top_rated(self, limit: int = 10, type_id: Optional[str] = None) -> List[BankService]:
        """List the best rated active services.

        Args:
            limit: Maximum number of services
            type_id: Restrict to one bank type

        Returns:
            Services ordered by rating, then review count
        """
        stmt = select(BankService).where(BankService.is_active == True)  # noqa: E712
        if type_id is not None:
            stmt = stmt.where(BankService.type_id == type_id)
        stmt = stmt.order_by(col(BankService.rating).desc(), col(BankService.review_count).desc()).limit(limit)
        return await self._all(stmt)

    async def list_by_max_monthly_fee(self, max_fee_cents: int, type_id: Optional[str] = None) -> List[BankService]:
        """List active services whose monthly fee is at most ``max_fee_cents``, cheapest first."""
        stmt = (
            select(BankService)
            .where(BankService.is_active == True)  # noqa: E712
            .where(BankService.monthly_fee_cents <= max_fee_cents)
        )
        if type_id is not None:
            stmt = stmt.where(BankService.type_id == type_id)
        return await self._all(stmt.order_by(col(BankService.monthly_fee_cents).asc(), col(BankService.name).asc()))
