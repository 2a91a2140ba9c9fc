"""Shared fixtures: in-memory stand-ins for the PostgreSQL repositories."""

from __future__ import annotations

import pytest

from models.registration import Registration
from repositories.active_chat_repo import ActiveChatRepository
from services.registration_service import ChatListRegistrationService, DoctorRegistrationService


class MemoryKeyValue:
    """Same interface as KeyValueRepository, backed by a dict."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.reads = 0
        self.writes = 0

    def get(self, key: str) -> str | None:
        self.reads += 1
        return self.data.get(key)

    def put(self, key: str, value: str) -> None:
        self.writes += 1
        self.data[key] = value


class MemoryRegistrations:
    """Same interface as RegistrationRepository, backed by a list of rows."""

    def __init__(self) -> None:
        self.rows: list[Registration] = []
        self.reads = 0
        self.writes = 0

    def read_by_key(self, item_key_index: str) -> list[int]:
        self.reads += 1
        return [row.chat_id for row in self.rows if row.item_key_index == item_key_index]

    def insert(self, registration: Registration) -> None:
        self.writes += 1
        self.rows.append(registration)

    def delete(self, registration: Registration) -> int:
        self.writes += 1
        before = len(self.rows)
        self.rows = [row for row in self.rows if row != registration]
        return before - len(self.rows)

    def members(self, item_key_index: str) -> set[int]:
        return {row.chat_id for row in self.rows if row.item_key_index == item_key_index}


@pytest.fixture
def kv() -> MemoryKeyValue:
    return MemoryKeyValue()


@pytest.fixture
def registrations() -> MemoryRegistrations:
    return MemoryRegistrations()


@pytest.fixture
def chat_list_service(kv: MemoryKeyValue) -> ChatListRegistrationService:
    return ChatListRegistrationService(ActiveChatRepository(kv=kv))


@pytest.fixture
def doctor_service(registrations: MemoryRegistrations) -> DoctorRegistrationService:
    return DoctorRegistrationService(registrations)

