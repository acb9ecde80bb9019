"""
Tests for the connection pool helpers and schema creation.
"""

from unittest.mock import MagicMock

import psycopg2
import pytest

from db import connection
from db.init_db import SCHEMA_SQL, create_tables


@pytest.fixture
def no_pool(monkeypatch):
    monkeypatch.setattr(connection, "_pool", None)


class TestConnectionPool:

    def test_get_connection_requires_pool(self, no_pool):
        with pytest.raises(RuntimeError, match="init_pool"):
            connection.get_connection()

    def test_init_pool_is_idempotent(self, no_pool, monkeypatch):
        factory = MagicMock()
        monkeypatch.setattr(connection.pool, "SimpleConnectionPool", factory)

        connection.init_pool(1, 3, "postgresql://test")
        connection.init_pool(1, 3, "postgresql://test")

        factory.assert_called_once_with(1, 3, "postgresql://test")
        connection.close_pool()
        factory.return_value.closeall.assert_called_once()
        assert connection._pool is None

    def test_init_pool_unreachable_database(self, no_pool, monkeypatch):
        factory = MagicMock(side_effect=psycopg2.OperationalError("could not connect"))
        monkeypatch.setattr(connection.pool, "SimpleConnectionPool", factory)

        with pytest.raises(psycopg2.OperationalError):
            connection.init_pool()
        assert connection._pool is None

    def test_release_returns_connection(self, monkeypatch):
        fake_pool = MagicMock()
        monkeypatch.setattr(connection, "_pool", fake_pool)
        conn = connection.get_connection()

        connection.release_connection(conn)

        fake_pool.putconn.assert_called_once_with(fake_pool.getconn.return_value)


class TestCreateTables:

    def test_creates_all_tables(self, db_conn, cursor):
        create_tables()

        cursor.execute.assert_called_once_with(SCHEMA_SQL)
        db_conn.commit.assert_called_once()
        assert db_conn.released
        for table in ("users", "properties", "reservations", "property_reviews"):
            assert f"CREATE TABLE IF NOT EXISTS {table}" in SCHEMA_SQL

    def test_failure_rolls_back(self, db_conn, cursor):
        cursor.execute.side_effect = psycopg2.ProgrammingError("syntax error")

        with pytest.raises(psycopg2.ProgrammingError):
            create_tables()
        db_conn.rollback.assert_called_once()
        assert db_conn.released
