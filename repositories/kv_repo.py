"""
repositories/kv_repo.py
-----------------------
A minimal get/put key-value store on top of the `kv_store` table.
"""

from typing import Optional

from db.connection import transaction
from utils.logger import get_logger

logger = get_logger(__name__)


class KeyValueRepository:
    """Repository for string values stored under string keys."""

    def get(self, key: str) -> Optional[str]:
        """
        Fetch the value stored under `key`.

        Returns:
            The stored string, or None when the key has never been written.
        """
        sql = "SELECT value FROM kv_store WHERE key = %s;"
        try:
            with transaction() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (key,))
                    row = cur.fetchone()
            return row[0] if row else None
        except Exception as e:
            logger.error(f"Failed to read key '{key}': {e}")
            raise

    def put(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""
        sql = """
            INSERT INTO kv_store (key, value)
            VALUES (%s, %s)
            ON CONFLICT (key) DO UPDATE SET value = EXCLUDED.value;
        """
        try:
            with transaction() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (key, value))
        except Exception as e:
            logger.error(f"Failed to write key '{key}': {e}")
            raise
