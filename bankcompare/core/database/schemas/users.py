"""
Schema models for users.

User rows are written by the external auth library, so the create schema
carries the id it generated.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    """Base fields for user schema."""

    name: str = Field(min_length=1, description="Display name")
    email: str = Field(min_length=3, description="Unique login email")
    email_verified: bool = Field(default=False)
    image: Optional[str] = Field(default=None, description="Avatar URL")


class UserRead(UserBase):
    """Schema for reading users."""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserCreate(UserBase):
    """Schema for creating users."""

    id: str = Field(min_length=1, description="Id assigned by the auth provider")
