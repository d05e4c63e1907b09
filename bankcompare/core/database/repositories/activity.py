"""
User activity repository.

Append-only event log; rows are recorded and queried, never updated.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.activity import UserActivity
from .base import AsyncBaseRepository


class UserActivityRepository(AsyncBaseRepository[UserActivity]):
    """Repository for user activity events."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UserActivity)

    async def record(
        self,
        activity_type: str,
        *,
        user_id: Optional[str] = None,
        session_token: Optional[str] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> UserActivity:
        """Record an activity event.

        Args:
            activity_type: Event kind, e.g. ``view`` or ``compare``
            user_id: Acting user, None for anonymous visitors
            session_token: Anonymous browser session token
            resource_type: Kind of the resource acted on
            resource_id: Id of the resource acted on
            metadata: Free-form event payload
            ip_address: Client address
            user_agent: Client user agent

        Returns:
            Persisted UserActivity
        """
        activity = UserActivity(
            activity_type=activity_type,
            user_id=user_id,
            session_token=session_token,
            resource_type=resource_type,
            resource_id=resource_id,
            activity_metadata=metadata or {},
            ip_address=ip_address,
            user_agent=user_agent,
        )
        return await self.create(activity)

    async def list_for_user(self, user_id: str, limit: Optional[int] = None) -> List[UserActivity]:
        """List a user's events, newest first."""
        stmt = select(UserActivity).where(UserActivity.user_id == user_id).order_by(col(UserActivity.created_at).desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._all(stmt)

    async def list_by_type(self, activity_type: str, limit: Optional[int] = None) -> List[UserActivity]:
        """List events of one kind, newest first."""
        stmt = (
            select(UserActivity)
            .where(UserActivity.activity_type == activity_type)
            .order_by(col(UserActivity.created_at).desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._all(stmt)

    async def list_for_resource(self, resource_type: str, resource_id: str) -> List[UserActivity]:
        stmt = (
            select(UserActivity)
            .where(UserActivity.resource_type == resource_type, UserActivity.resource_id == resource_id)
            .order_by(col(UserActivity.created_at).desc())
        )
        return await self._all(stmt)
