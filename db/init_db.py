"""
db/init_db.py
-------------
Creates the registration tables if they do not exist yet.
Run directly to prepare a fresh database:
    python -m db.init_db
"""

from db.connection import transaction
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Key/value store: holds the JSON list of chat ids under 'active_chat_ids'
CREATE TABLE IF NOT EXISTS kv_store (
    key             TEXT PRIMARY KEY,
    value           TEXT NOT NULL
);

-- One row per (chat, doctor) subscription. Intentionally no UNIQUE constraint:
-- duplicate registrations are prevented by the service's read-before-write.
CREATE TABLE IF NOT EXISTS notifications_registered (
    chat_id         BIGINT NOT NULL,
    item_key_index  TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_notifications_item_key
    ON notifications_registered(item_key_index);
"""


def create_tables() -> None:
    """
    Apply SCHEMA_SQL. Safe to call on every start (IF NOT EXISTS).
    """
    try:
        with transaction() as conn:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
        logger.info("Database schema is up to date.")
    except Exception as e:
        logger.error(f"Failed to create schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    create_tables()
    close_pool()
    print("Database schema created.")
