from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from ..database.connection import DatabaseConnection
from .store import KeyValueStore, decode_json, encode_json

logger = logging.getLogger(__name__)

_SELECT = "SELECT payload FROM kv_collections WHERE collection_key=%s"
_UPSERT = """
    INSERT INTO kv_collections(collection_key, payload)
    VALUES(%s, %s)
    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
"""


class MySQLKeyValueStore(KeyValueStore):
    """Key-value collections stored as JSON documents in ``kv_collections``."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def _cursor(self) -> Iterator:
        """Cursor inside one transaction: committed on success, rolled back on error."""

        conn = self._conn_factory.connect()
        try:
            cur = conn.cursor()
            try:
                yield cur
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                cur.close()
        finally:
            conn.close()

    def get(self, key: str) -> Optional[list[dict]]:
        with self._cursor() as cur:
            cur.execute(_SELECT, (key,))
            row = cur.fetchone()
        if row is None:
            logger.debug("Collection %s not stored yet", key)
            return None
        return decode_json(row[0])

    def set(self, key: str, value: list[dict]) -> None:
        with self._cursor() as cur:
            cur.execute(_UPSERT, (key, encode_json(value)))
