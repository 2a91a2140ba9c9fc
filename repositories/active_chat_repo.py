"""
repositories/active_chat_repo.py
--------------------------------
The unpartitioned subscriber list: every registered chat id, kept as one
JSON array under a single key. Reads and writes always move the whole list.
"""

import json

from config import ACTIVE_CHAT_IDS_KEY
from repositories.kv_repo import KeyValueRepository


class ActiveChatRepository:
    """Reads and rewrites the JSON list of active chat ids."""

    def __init__(self, kv: KeyValueRepository | None = None, key: str = ACTIVE_CHAT_IDS_KEY):
        self.kv = kv or KeyValueRepository()
        self.key = key

    def read_all(self) -> list[int]:
        """Return every stored chat id, or an empty list if nothing was saved yet."""
        data = self.kv.get(self.key)
        return json.loads(data) if data else []

    def write_all(self, chat_ids: list[int]) -> None:
        """Replace the stored list with `chat_ids`."""
        self.kv.put(self.key, json.dumps(list(chat_ids)))
