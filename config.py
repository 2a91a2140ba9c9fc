"""
config.py
---------
Central configuration module. Loads environment variables from the
.env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── Webhook (leave WEBHOOK_URL empty to use long polling) ─
WEBHOOK_URL: str = os.getenv("WEBHOOK_URL", "")
WEBHOOK_LISTEN: str = os.getenv("WEBHOOK_LISTEN", "0.0.0.0")
WEBHOOK_PORT: int = int(os.getenv("WEBHOOK_PORT", "8443"))
WEBHOOK_SECRET: str = os.getenv("WEBHOOK_SECRET", "")

# ── Registration ──────────────────────────────────────────
# "partitioned": one subscription per doctor link (ItemKeyIndex).
# "unpartitioned": a single list of chats under ACTIVE_CHAT_IDS_KEY.
REGISTRATION_MODE: str = os.getenv("REGISTRATION_MODE", "partitioned").strip().lower()
ACTIVE_CHAT_IDS_KEY: str = "active_chat_ids"
ITEM_KEY_PARAM: str = "ItemKeyIndex"
SERGUIDE_HOST: str = "serguide.maccabi4u.co.il"

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "appointment_bot")
DB_USER: str = os.getenv("DB_USER", "appointment_bot")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = os.getenv("DATABASE_URL") or (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
