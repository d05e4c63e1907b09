"""Unit tests for the repository bundle."""

from __future__ import annotations

from dataclasses import fields

from bankcompare.core.database.repositories import (
    BankServiceRepository,
    SqlRepoBundle,
    UserRepository,
    build_sql_repos,
)


class TestSqlRepoBundle:
    """Tests for build_sql_repos."""

    def test_every_repository_shares_the_session(self, in_memory_session):
        bundle = build_sql_repos(session=in_memory_session)

        for field in fields(SqlRepoBundle):
            assert getattr(bundle, field.name).session is in_memory_session

    def test_repository_types(self, in_memory_session):
        bundle = build_sql_repos(session=in_memory_session)

        assert isinstance(bundle.users, UserRepository)
        assert isinstance(bundle.services, BankServiceRepository)
