from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path

from ..storage.sample_data import build_sample_collections
from ..storage.store import EMPLOYEES_KEY, KeyValueStore
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_DB_LEVEL = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.IGNORECASE)


def schema_statements(sql: str) -> list[str]:
    """Split schema.sql into statements, without comments or database-level lines.

    The target database comes from DB_CONFIG, so CREATE DATABASE / USE lines in
    the file are dropped. Statements must not contain literal semicolons.
    """

    body = "\n".join(ln for ln in sql.splitlines() if not ln.lstrip().startswith("--"))
    statements = [s.strip() for s in body.split(";")]
    return [s for s in statements if s and not _DB_LEVEL.match(s)]


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)

    statements = schema_statements(Path(schema_path).read_text(encoding="utf-8"))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema %s to %s", schema_path, conn_factory.config.database)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def seed_store(store: KeyValueStore, *, today: date, force: bool = False) -> bool:
    """Load demo collections unless employees already exist.

    Returns True when data was written.
    """

    if not force and store.get(EMPLOYEES_KEY):
        logger.info("Store already has employees, skipping demo seed")
        return False

    for key, records in build_sample_collections(today).items():
        store.set(key, records)
    logger.info("Seeded demo workforce data (as of %s)", today.isoformat())
    return True
