"""
handlers/error_handler.py
-------------------------
Last-resort handler for exceptions raised while processing an update.

The raw exception text is sent back to the chat so the user sees what went
wrong. This exposes internal error messages to anyone using the bot.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)


def describe_error(error: BaseException) -> str:
    """Exception message, or "(TypeName - repr)" when the message is empty."""
    text = str(error)
    if text:
        return text
    return f"({type(error).__name__} - {error!r})"


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log the failure and reply with the error text, if there is a chat to reply to."""
    error = context.error
    logger.error("Unhandled error while processing update", exc_info=error)

    if not isinstance(update, Update) or update.effective_chat is None:
        return
    try:
        await context.bot.send_message(chat_id=update.effective_chat.id, text=describe_error(error))
    except Exception as e:
        logger.error(f"Could not report error to chat {update.effective_chat.id}: {e}")
