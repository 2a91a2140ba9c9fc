"""
repositories/registration_repo.py
---------------------------------
Data access layer for per-doctor subscriptions.
All SQL touching the `notifications_registered` table lives here.
"""

from db.connection import transaction
from models.registration import Registration
from utils.logger import get_logger

logger = get_logger(__name__)


class RegistrationRepository:
    """Select-by-key, insert and delete on notifications_registered."""

    # ── READ ──────────────────────────────────────────────

    def read_by_key(self, item_key_index: str) -> list[int]:
        """
        Get the chat ids subscribed to one doctor.

        Args:
            item_key_index: ItemKeyIndex of the doctor.

        Returns:
            Chat ids in insertion order. May contain duplicates if two
            registrations raced each other.
        """
        sql = "SELECT chat_id FROM notifications_registered WHERE item_key_index = %s;"
        try:
            with transaction() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (item_key_index,))
                    rows = cur.fetchall()
            return [row[0] for row in rows]
        except Exception as e:
            logger.error(f"Failed to load registrations for {item_key_index}: {e}")
            raise

    # ── WRITE ─────────────────────────────────────────────

    def insert(self, registration: Registration) -> None:
        """Add one (chat_id, item_key_index) row."""
        sql = "INSERT INTO notifications_registered (chat_id, item_key_index) VALUES (%s, %s);"
        try:
            with transaction() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (registration.chat_id, registration.item_key_index))
            logger.info(f"Registered chat {registration.chat_id} for {registration.item_key_index}")
        except Exception as e:
            logger.error(f"Failed to insert registration {registration}: {e}")
            raise

    def delete(self, registration: Registration) -> int:
        """
        Remove every row matching the pair.

        Returns:
            Number of rows deleted.
        """
        sql = "DELETE FROM notifications_registered WHERE chat_id = %s AND item_key_index = %s;"
        try:
            with transaction() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (registration.chat_id, registration.item_key_index))
                    deleted = cur.rowcount
            logger.info(f"Unregistered chat {registration.chat_id} from {registration.item_key_index}")
            return deleted
        except Exception as e:
            logger.error(f"Failed to delete registration {registration}: {e}")
            raise
