"""
Comparison repositories.

Data access for comparison sessions and saved advanced comparisons.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from bankcompare.core.logging_config import get_logger

from ..base import utc_now
from ..entities.comparisons import AdvancedComparison, ComparisonSession
from .base import AsyncBaseRepository

logger = get_logger(__name__)


class ComparisonSessionRepository(AsyncBaseRepository[ComparisonSession]):
    """Repository for transient comparison sessions."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ComparisonSession)

    async def get_by_token(self, session_token: str, include_expired: bool = False) -> Optional[ComparisonSession]:
        """Get the latest comparison session of a browser session token.

        Args:
            session_token: Anonymous session token
            include_expired: Also return a session past its expiry

        Returns:
            ComparisonSession instance or None
        """
        stmt = select(ComparisonSession).where(ComparisonSession.session_token == session_token)
        if not include_expired:
            stmt = stmt.where(ComparisonSession.expires_at > utc_now())
        stmt = stmt.order_by(col(ComparisonSession.created_at).desc()).limit(1)
        return await self._one_or_none(stmt)

    async def list_for_user(self, user_id: str) -> List[ComparisonSession]:
        """List a user's comparison sessions, newest first."""
        stmt = (
            select(ComparisonSession)
            .where(ComparisonSession.user_id == user_id)
            .order_by(col(ComparisonSession.created_at).desc())
        )
        return await self._all(stmt)

    async def delete_expired(self, now: Optional[datetime] = None) -> int:
        """Delete sessions whose expiry has passed.

        Args:
            now: Reference time, defaults to the current UTC time

        Returns:
            Number of deleted sessions
        """
        cutoff = now or utc_now()
        async with self._write():
            conn = await self.session.connection()
            result = await conn.execute(delete(ComparisonSession).where(ComparisonSession.expires_at <= cutoff))
        logger.info(f"Deleted {result.rowcount} expired comparison sessions")
        return result.rowcount


class AdvancedComparisonRepository(AsyncBaseRepository[AdvancedComparison]):
    """Repository for saved advanced comparisons."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AdvancedComparison)

    async def list_for_user(self, user_id: str, saved_only: bool = False) -> List[AdvancedComparison]:
        """List a user's advanced comparisons, most recently updated first.

        Args:
            user_id: Owning user
            saved_only: Only comparisons the user chose to keep

        Returns:
            AdvancedComparison instances
        """
        stmt = select(AdvancedComparison).where(AdvancedComparison.user_id == user_id)
        if saved_only:
            stmt = stmt.where(AdvancedComparison.is_saved == True)  # noqa: E712
        stmt = stmt.order_by(col(AdvancedComparison.updated_at).desc())
        return await self._all(stmt)
