"""
handlers/registration_handler.py
--------------------------------
Handles /register and /unregister.

Usage (partitioned mode):
    /register https://serguide.maccabi4u.co.il/...?ItemKeyIndex=ABC123
    /unregister https://serguide.maccabi4u.co.il/...?ItemKeyIndex=ABC123
In unpartitioned mode the argument is ignored.
"""

from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from services.registration_service import build_registration_service
from utils.logger import get_logger

logger = get_logger(__name__)
registration_service = build_registration_service()


def _command_argument(context: ContextTypes.DEFAULT_TYPE) -> Optional[str]:
    """Text after the command, or None when nothing was passed."""
    if not context.args:
        return None
    return " ".join(context.args)


async def register_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /register [SERGUIDE_LINK]."""
    chat_id = update.effective_chat.id
    result = registration_service.register(chat_id, _command_argument(context))
    logger.info(f"/register from chat {chat_id}: {result.outcome.value} ({result.store_status.value})")
    await update.message.reply_text(result.message)


async def unregister_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /unregister [SERGUIDE_LINK]."""
    chat_id = update.effective_chat.id
    result = registration_service.unregister(chat_id, _command_argument(context))
    logger.info(f"/unregister from chat {chat_id}: {result.outcome.value} ({result.store_status.value})")
    await update.message.reply_text(result.message)
