from pathlib import Path

import pytest

from workforce_finance.database.bootstrap import schema_statements
from workforce_finance.database.connection import DBConfig
from workforce_finance.storage.mysql_store import MySQLKeyValueStore

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


class FakeCursor:
    def __init__(self, table):
        self._table = table
        self._row = None
        self.closed = False

    def execute(self, sql, params):
        key = params[0]
        if sql.startswith("SELECT"):
            self._row = (self._table[key],) if key in self._table else None
        else:
            self._table[key] = params[1]

    def fetchone(self):
        return self._row

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, table):
        self.cursor_obj = FakeCursor(table)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self):
        self.table = {}
        self.opened = []

    def connect(self):
        conn = FakeConnection(self.table)
        self.opened.append(conn)
        return conn


def test_set_then_get_round_trips_json_document():
    factory = FakeConnectionFactory()
    store = MySQLKeyValueStore(factory)

    assert store.get("workforce_employees") is None
    store.set("workforce_employees", [{"id": "emp_1"}])

    assert store.get("workforce_employees") == [{"id": "emp_1"}]
    assert all(c.closed and c.cursor_obj.closed for c in factory.opened)
    assert factory.opened[1].committed


def test_failed_statement_rolls_back():
    factory = FakeConnectionFactory()
    store = MySQLKeyValueStore(factory)

    with pytest.raises(TypeError):
        store.set("workforce_employees", [{"id": object()}])

    assert factory.table == {}
    assert factory.opened[0].rolled_back
    assert factory.opened[0].closed


def test_schema_statements_skip_database_level_lines():
    statements = schema_statements(SCHEMA.read_text(encoding="utf-8"))

    assert len(statements) == 1
    assert statements[0].startswith("CREATE TABLE IF NOT EXISTS kv_collections")


def test_db_config_defaults_and_connect_args():
    config = DBConfig.from_dict({"host": "db", "port": "3307"})

    assert config.port == 3307
    assert config.database == "workforce_db"
    assert "database" not in config.connect_args(with_database=False)
    assert config.connect_args()["database"] == "workforce_db"
