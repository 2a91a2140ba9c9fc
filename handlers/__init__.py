"""
handlers/ - Presentation Layer
================================
Telegram command handlers. Each handler pulls the chat id and command
argument out of the update, delegates to a service, and replies with the
text it gets back. No business logic lives here.
"""
