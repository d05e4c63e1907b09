"""Unit tests for auth entity models."""

from __future__ import annotations

from bankcompare.core.database.entities import AuthSession, User, Verification


class TestUser:
    """Tests for User entity model."""

    def test_user_creation_defaults(self):
        user = User(id="user_1", name="Dana", email="dana@example.com")

        assert user.email_verified is False
        assert user.image is None
        assert user.created_at is not None
        assert user.updated_at is not None

    def test_user_table_constraints(self):
        constraint_names = {c.name for c in User.__table__.constraints}

        assert User.__tablename__ == "user"
        assert "user_email_unique" in constraint_names


class TestAuthSession:
    """Tests for AuthSession entity model."""

    def test_session_table_layout(self):
        table = AuthSession.__table__
        foreign_key = next(iter(table.c.user_id.foreign_keys))

        assert table.name == "session"
        assert "session_token_unique" in {c.name for c in table.constraints}
        assert foreign_key.column.table.name == "user"
        assert foreign_key.ondelete == "CASCADE"


class TestVerification:
    """Tests for Verification entity model."""

    def test_timestamps_are_optional_columns(self):
        table = Verification.__table__

        assert table.c.created_at.nullable is True
        assert table.c.updated_at.nullable is True
        assert table.c.expires_at.nullable is False
