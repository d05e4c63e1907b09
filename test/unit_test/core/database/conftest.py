"""Test configuration for database unit tests.

This module provides common fixtures for testing the centralized database
layer against in-memory SQLite with foreign key enforcement switched on.
"""

from __future__ import annotations

from datetime import datetime
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from bankcompare.core.database.entities import Bank, BankService, BankType, ServiceFeature, User
from bankcompare.core.database.repositories import SqlRepoBundle, build_sql_repos
from bankcompare.core.database.utils import create_all, create_engine, create_sessionmaker


@pytest.fixture(scope="function")
async def in_memory_engine(test_config) -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with every table created."""
    # One shared connection keeps the in-memory database alive across sessions
    engine = create_engine(
        test_config.database_url,
        echo=test_config.echo_sql,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(in_memory_engine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(in_memory_engine)


@pytest.fixture(scope="function")
async def in_memory_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def repos(in_memory_session) -> SqlRepoBundle:
    return build_sql_repos(session=in_memory_session)


@pytest.fixture(scope="function")
def sample_user_data() -> dict:
    """Sample user data for testing."""
    return {
        "id": "user_123",
        "name": "Dana Saver",
        "email": "dana@example.com",
        "email_verified": True,
    }


@pytest.fixture(scope="function")
def sample_bank_data() -> dict:
    """Sample bank data for testing."""
    return {
        "name": "First Example Bank",
        "slug": "first-example-bank",
        "website_url": "https://bank.example.com",
        "headquarters_country": "US",
        "founded_year": 1901,
    }


@pytest.fixture(scope="function")
def sample_service_data() -> dict:
    """Sample bank service data for testing, without its parent keys."""
    return {
        "name": "Everyday Checking",
        "slug": "everyday-checking",
        "monthly_fee_cents": 500,
        "setup_fee_cents": 0,
        "minimum_balance_cents": 10000,
        "pros": ["No overdraft fees"],
        "cons": ["Monthly fee"],
    }


@pytest.fixture(scope="function")
async def user(repos, sample_user_data) -> User:
    return await repos.users.create(User(**sample_user_data))


@pytest.fixture(scope="function")
async def checking_type(repos) -> BankType:
    return await repos.bank_types.create(BankType(id="checking", name="Checking", sort_order=1))


@pytest.fixture(scope="function")
async def bank(repos, sample_bank_data) -> Bank:
    return await repos.banks.create(Bank(**sample_bank_data))


@pytest.fixture(scope="function")
async def service(repos, bank, checking_type, sample_service_data) -> BankService:
    return await repos.services.create(BankService(bank_id=bank.id, type_id=checking_type.id, **sample_service_data))


@pytest.fixture(scope="function")
async def feature(repos) -> ServiceFeature:
    return await repos.features.create(ServiceFeature(name="ATM fee refunds", category="fees", sort_order=2))


@pytest.fixture(scope="function")
def fixed_now() -> datetime:
    return datetime(2026, 3, 1, 12, 0, 0)
