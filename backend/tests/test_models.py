"""Tests for table definitions."""

from __future__ import annotations

import pytest
from sqlalchemy.dialects import mysql
from sqlalchemy.schema import CreateTable

from messagely.models.message import Message
from messagely.models.user import User


def _mysql_ddl(table) -> str:
    return str(CreateTable(table).compile(dialect=mysql.dialect()))


class TestMySQLTimestamps:
    @pytest.mark.parametrize("column", ["join_at", "last_login_at"])
    def test_user_timestamps_keep_microseconds(self, column):
        assert f"{column} DATETIME(6)" in _mysql_ddl(User.__table__)

    @pytest.mark.parametrize("column", ["sent_at", "read_at"])
    def test_message_timestamps_keep_microseconds(self, column):
        assert f"{column} DATETIME(6)" in _mysql_ddl(Message.__table__)

    def test_string_lengths(self):
        ddl = _mysql_ddl(User.__table__)
        assert "username VARCHAR(255)" in ddl
        assert "phone VARCHAR(50)" in ddl
