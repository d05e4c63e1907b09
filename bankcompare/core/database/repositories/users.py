"""
User and auth session repositories.

Data access for accounts and the login sessions the external auth library
writes. Built on SQLModel for type-safe ORM operations.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bankcompare.core.logging_config import get_logger

from ..base import utc_now
from ..entities.auth import AuthSession, User
from .base import AsyncBaseRepository

logger = get_logger(__name__)


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address.

        Args:
            email: Exact email as stored

        Returns:
            User instance or None
        """
        return await self._one_or_none(select(User).where(User.email == email))


class AuthSessionRepository(AsyncBaseRepository[AuthSession]):
    """Repository for login sessions."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AuthSession)

    async def get_by_token(self, token: str) -> Optional[AuthSession]:
        """Get a session by its token."""
        return await self._one_or_none(select(AuthSession).where(AuthSession.token == token))

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
            result = await conn.execute(delete(AuthSession).where(AuthSession.expires_at <= cutoff))
        logger.info(f"Deleted {result.rowcount} expired auth sessions")
        return result.rowcount
