"""
main.py
-------
Entry point for the Doctor Appointment Notification Bot.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Configure the Telegram bot with its command handlers.
    - Receive updates through a webhook (WEBHOOK_URL set) or long polling.
"""

from urllib.parse import urlsplit

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import (
    REGISTRATION_MODE,
    TELEGRAM_BOT_TOKEN,
    WEBHOOK_LISTEN,
    WEBHOOK_PORT,
    WEBHOOK_SECRET,
    WEBHOOK_URL,
)
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from handlers.error_handler import error_handler
from handlers.registration_handler import register_command, unregister_command
from handlers.start_handler import start_command, help_command
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Publish the command menu in Telegram on startup."""
    commands = [
        BotCommand("start", "Show the welcome message"),
        BotCommand("help", "List the available commands"),
        BotCommand("register", "Get notified about new appointments"),
        BotCommand("unregister", "Stop appointment notifications"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered.")


def build_application() -> Application:
    """Create the Telegram application with every handler attached."""
    app = Application.builder().token(TELEGRAM_BOT_TOKEN).post_init(set_bot_commands).build()

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("register", register_command))
    app.add_handler(CommandHandler("unregister", unregister_command))
    app.add_error_handler(error_handler)
    return app


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 2. Build the Telegram application ─────────────────
    logger.info(f"Starting Telegram bot (registration mode: {REGISTRATION_MODE})...")
    app = build_application()

    # ── 3. Receive updates ────────────────────────────────
    try:
        if WEBHOOK_URL:
            logger.info(f"Listening for webhook deliveries on {WEBHOOK_LISTEN}:{WEBHOOK_PORT}")
            app.run_webhook(
                listen=WEBHOOK_LISTEN,
                port=WEBHOOK_PORT,
                url_path=urlsplit(WEBHOOK_URL).path.lstrip("/"),
                webhook_url=WEBHOOK_URL,
                secret_token=WEBHOOK_SECRET or None,
                allowed_updates=["message"],
            )
        else:
            logger.info("No WEBHOOK_URL configured, falling back to long polling.")
            app.run_polling(drop_pending_updates=True, allowed_updates=["message"])
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        close_pool()
        logger.info("Bot stopped.")


if __name__ == "__main__":
    main()
