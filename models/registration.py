"""
models/registration.py
----------------------
Domain models for chat subscriptions and the outcome of a
register/unregister command.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Registration:
    """
    A chat's subscription to one monitored doctor.

    Attributes:
        chat_id: Telegram chat that receives the notifications.
        item_key_index: The ItemKeyIndex taken from the doctor's serguide link.
    """
    chat_id: int
    item_key_index: str


class RegistrationOutcome(Enum):
    REGISTERED = "registered"
    ALREADY_REGISTERED = "already_registered"
    UNREGISTERED = "unregistered"
    NOT_REGISTERED = "not_registered"
    MISSING_LINK = "missing_link"
    INVALID_LINK = "invalid_link"


class StoreStatus(Enum):
    """How the backing store behaved while a command was processed."""
    OK = "ok"
    READ_DEGRADED = "read_degraded"  # read failed, treated as empty
    WRITE_FAILED = "write_failed"  # write failed, user was still told it worked


@dataclass
class RegistrationResult:
    """
    What the service decided, plus the reply text for the chat.

    `store_status` lets callers see degraded reads and lost writes even though
    the reply text hides them from the user.
    """
    outcome: RegistrationOutcome
    message: str
    partition_key: Optional[str] = None
    store_status: StoreStatus = StoreStatus.OK

    @property
    def changed(self) -> bool:
        return self.outcome in (RegistrationOutcome.REGISTERED, RegistrationOutcome.UNREGISTERED)

    def __str__(self) -> str:
        return self.message
