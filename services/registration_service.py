"""
services/registration_service.py
--------------------------------
Business logic behind /register and /unregister.

Both commands are idempotent set operations over the stored subscribers:
read the current members, decide add / remove / nothing, write only when
something changed. Two storage layouts are supported:

    - ChatListRegistrationService: one list of chat ids for everything.
    - DoctorRegistrationService: one set of chat ids per doctor, keyed by the
      ItemKeyIndex of the link passed to the command.

Store failures never reach the handler. A failed read counts as "nobody is
registered" and a failed write is only logged, so the user may be told a
change happened when it did not. The result's `store_status` records it.

Reads and writes are not atomic: two commands racing on the same list can
both see "absent" and both write (duplicate row, or one chat lost from the
JSON list). Nothing here locks or retries.
"""

from typing import Callable, Optional

from config import REGISTRATION_MODE, SERGUIDE_HOST
from models.registration import RegistrationOutcome, RegistrationResult, Registration, StoreStatus
from repositories.active_chat_repo import ActiveChatRepository
from repositories.registration_repo import RegistrationRepository
from services.link_parser import extract_item_key
from utils.logger import get_logger

logger = get_logger(__name__)


class RegistrationService:
    """
    Shared register/unregister flow.

    Subclasses say how the partition key is derived from the command argument,
    how members are loaded, how a chat is added or removed, and what each
    outcome sounds like to the user.
    """

    MESSAGES: dict[RegistrationOutcome, str] = {}

    def register(self, chat_id: int, argument: Optional[str] = None) -> RegistrationResult:
        """Handle /register [argument] for `chat_id`."""
        key, failure = self.resolve_partition(argument, RegistrationOutcome.REGISTERED)
        if failure:
            return failure
        return self.register_key(chat_id, key)

    def unregister(self, chat_id: int, argument: Optional[str] = None) -> RegistrationResult:
        """Handle /unregister [argument] for `chat_id`."""
        key, failure = self.resolve_partition(argument, RegistrationOutcome.UNREGISTERED)
        if failure:
            return failure
        return self.unregister_key(chat_id, key)

    def register_key(self, chat_id: int, key: Optional[str] = None) -> RegistrationResult:
        """
        Add `chat_id` to the members of `key`, unless it is already there.

        Returns:
            REGISTERED after a write, ALREADY_REGISTERED without one.
        """
        members, status = self._load(key)
        if chat_id in members:
            return self._result(RegistrationOutcome.ALREADY_REGISTERED, key, status)

        status = self._write(lambda: self._add(chat_id, key, members), status)
        return self._result(RegistrationOutcome.REGISTERED, key, status)

    def unregister_key(self, chat_id: int, key: Optional[str] = None) -> RegistrationResult:
        """
        Remove `chat_id` from the members of `key`, if it is there.

        Returns:
            UNREGISTERED after a write, NOT_REGISTERED without one.
        """
        members, status = self._load(key)
        if chat_id not in members:
            return self._result(RegistrationOutcome.NOT_REGISTERED, key, status)

        status = self._write(lambda: self._remove(chat_id, key, members), status)
        return self._result(RegistrationOutcome.UNREGISTERED, key, status)

    # ── Hooks ─────────────────────────────────────────────

    def resolve_partition(
        self, argument: Optional[str], intent: RegistrationOutcome
    ) -> tuple[Optional[str], Optional[RegistrationResult]]:
        """Return (partition key, None), or (None, failure result) when no key is usable."""
        return None, None

    def _read(self, key: Optional[str]) -> list[int]:
        raise NotImplementedError

    def _add(self, chat_id: int, key: Optional[str], members: list[int]) -> None:
        raise NotImplementedError

    def _remove(self, chat_id: int, key: Optional[str], members: list[int]) -> None:
        raise NotImplementedError

    # ── Internals ─────────────────────────────────────────

    def _load(self, key: Optional[str]) -> tuple[list[int], StoreStatus]:
        try:
            return self._read(key), StoreStatus.OK
        except Exception as e:
            logger.error(f"Reading subscribers failed, treating as empty (key={key}): {e}")
            return [], StoreStatus.READ_DEGRADED

    def _write(self, operation: Callable[[], None], status: StoreStatus) -> StoreStatus:
        try:
            operation()
            return status
        except Exception as e:
            logger.error(f"Saving subscribers failed, change was not persisted: {e}")
            return StoreStatus.WRITE_FAILED

    def _result(
        self,
        outcome: RegistrationOutcome,
        key: Optional[str] = None,
        status: StoreStatus = StoreStatus.OK,
    ) -> RegistrationResult:
        return RegistrationResult(
            outcome=outcome,
            message=self.MESSAGES[outcome],
            partition_key=key,
            store_status=status,
        )


class ChatListRegistrationService(RegistrationService):
    """Every chat goes into the single `active_chat_ids` list; arguments are ignored."""

    MESSAGES = {
        RegistrationOutcome.REGISTERED: "You are now registered for updates.",
        RegistrationOutcome.ALREADY_REGISTERED: "You are already registered for updates!",
        RegistrationOutcome.UNREGISTERED: "You are now unregistered from updates.",
        RegistrationOutcome.NOT_REGISTERED: "You are not registered for updates.",
    }

    def __init__(self, repo: ActiveChatRepository | None = None):
        self.repo = repo or ActiveChatRepository()

    def _read(self, key: Optional[str]) -> list[int]:
        return self.repo.read_all()

    def _add(self, chat_id: int, key: Optional[str], members: list[int]) -> None:
        self.repo.write_all(members + [chat_id])

    def _remove(self, chat_id: int, key: Optional[str], members: list[int]) -> None:
        self.repo.write_all([member for member in members if member != chat_id])


class DoctorRegistrationService(RegistrationService):
    """Subscriptions per doctor, keyed by the ItemKeyIndex of a serguide link."""

    MESSAGES = {
        RegistrationOutcome.REGISTERED: "You are now registered for updates for the specified doctor",
        RegistrationOutcome.ALREADY_REGISTERED: "You are already registered for updates for the specified doctor!",
        RegistrationOutcome.UNREGISTERED: "You are now unregistered from updates for the specified doctor.",
        RegistrationOutcome.NOT_REGISTERED: "You are not registered for updates for the specified doctor.",
        RegistrationOutcome.INVALID_LINK: (
            "Unable to extract info from the supplied link. "
            f"Make sure to pass a link from {SERGUIDE_HOST}"
        ),
    }

    MISSING_LINK_MESSAGES = {
        RegistrationOutcome.REGISTERED: "Please pass a SERGUIDE_LINK to the command to register for that doctor.",
        RegistrationOutcome.UNREGISTERED: "Please pass a SERGUIDE_LINK to the command to unregister from that doctor.",
    }

    def __init__(self, repo: RegistrationRepository | None = None):
        self.repo = repo or RegistrationRepository()

    def resolve_partition(
        self, argument: Optional[str], intent: RegistrationOutcome
    ) -> tuple[Optional[str], Optional[RegistrationResult]]:
        if not argument or not argument.strip():
            return None, RegistrationResult(
                outcome=RegistrationOutcome.MISSING_LINK,
                message=self.MISSING_LINK_MESSAGES[intent],
            )

        key = extract_item_key(argument)
        if not key:
            logger.info(f"No ItemKeyIndex in supplied link: {argument!r}")
            return None, self._result(RegistrationOutcome.INVALID_LINK)
        return key, None

    def _read(self, key: Optional[str]) -> list[int]:
        return self.repo.read_by_key(key)

    def _add(self, chat_id: int, key: Optional[str], members: list[int]) -> None:
        self.repo.insert(Registration(chat_id=chat_id, item_key_index=key))

    def _remove(self, chat_id: int, key: Optional[str], members: list[int]) -> None:
        self.repo.delete(Registration(chat_id=chat_id, item_key_index=key))


def build_registration_service(mode: str = REGISTRATION_MODE) -> RegistrationService:
    """
    Pick the service matching the configured storage layout.

    Raises:
        ValueError: For an unknown mode.
    """
    if mode == "partitioned":
        return DoctorRegistrationService()
    if mode == "unpartitioned":
        return ChatListRegistrationService()
    raise ValueError(f"Unknown REGISTRATION_MODE: {mode!r} (expected 'partitioned' or 'unpartitioned')")
