"""Tests for the PostgreSQL repositories against a mocked psycopg2 connection."""

from __future__ import annotations

from unittest.mock import MagicMock

import psycopg2
import pytest

from db import connection as db_connection
from models.registration import Registration
from repositories.active_chat_repo import ActiveChatRepository
from repositories.kv_repo import KeyValueRepository
from repositories.registration_repo import RegistrationRepository


@pytest.fixture
def conn(monkeypatch) -> MagicMock:
    conn = MagicMock()
    cursor = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    conn.cur = cursor
    conn.released = False

    def release(c) -> None:
        c.released = True

    monkeypatch.setattr(db_connection, "get_connection", lambda: conn)
    monkeypatch.setattr(db_connection, "release_connection", release)
    return conn


def test_kv_get_returns_value(conn) -> None:
    conn.cur.fetchone.return_value = ("[1, 2]",)

    assert KeyValueRepository().get("active_chat_ids") == "[1, 2]"
    conn.cur.execute.assert_called_once_with("SELECT value FROM kv_store WHERE key = %s;", ("active_chat_ids",))
    conn.commit.assert_called_once()
    assert conn.released


def test_kv_get_missing_key(conn) -> None:
    conn.cur.fetchone.return_value = None
    assert KeyValueRepository().get("nothing") is None


def test_kv_put_upserts(conn) -> None:
    KeyValueRepository().put("active_chat_ids", "[3]")

    sql, params = conn.cur.execute.call_args.args
    assert "ON CONFLICT (key) DO UPDATE" in sql
    assert params == ("active_chat_ids", "[3]")
    conn.commit.assert_called_once()


def test_active_chat_repo_round_trips_json(conn) -> None:
    conn.cur.fetchone.return_value = None
    repo = ActiveChatRepository()
    assert repo.read_all() == []

    repo.write_all([1001, 1002])
    assert conn.cur.execute.call_args.args[1] == ("active_chat_ids", "[1001, 1002]")


def test_read_by_key(conn) -> None:
    conn.cur.fetchall.return_value = [(1,), (2,)]

    assert RegistrationRepository().read_by_key("77") == [1, 2]
    sql, params = conn.cur.execute.call_args.args
    assert "WHERE item_key_index = %s" in sql
    assert params == ("77",)


def test_insert_and_delete(conn) -> None:
    repo = RegistrationRepository()
    repo.insert(Registration(chat_id=1001, item_key_index="77"))
    assert conn.cur.execute.call_args.args[1] == (1001, "77")

    conn.cur.rowcount = 1
    assert repo.delete(Registration(chat_id=1001, item_key_index="77")) == 1
    sql = conn.cur.execute.call_args.args[0]
    assert sql.startswith("DELETE FROM notifications_registered")
    assert conn.commit.call_count == 2


def test_failure_rolls_back_and_reraises(conn) -> None:
    conn.cur.execute.side_effect = psycopg2.OperationalError("connection lost")

    with pytest.raises(psycopg2.OperationalError):
        RegistrationRepository().insert(Registration(chat_id=1, item_key_index="A"))
    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    assert conn.released


def test_transaction_requires_pool(monkeypatch) -> None:
    monkeypatch.setattr(db_connection, "_pool", None)
    with pytest.raises(RuntimeError):
        with db_connection.transaction():
            pass
