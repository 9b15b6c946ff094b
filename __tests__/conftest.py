from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from tripjournal.core.client import JournalClient
from tripjournal.core.settings import JournalSettings
from tripjournal.storage.memory import MemoryKeyValueStore
from tripjournal.token.store import TokenStore

BASE_URL = "http://journal.test/"


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 10, 7, 12, 0, tzinfo=UTC))


@pytest.fixture
def backend() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def token_store(backend: MemoryKeyValueStore, clock: FakeClock) -> TokenStore:
    return TokenStore(backend, timedelta(hours=1), clock=clock)


@pytest.fixture
def settings() -> JournalSettings:
    return JournalSettings(base_url=BASE_URL)


@pytest.fixture
def client(settings: JournalSettings, token_store: TokenStore) -> JournalClient:
    return JournalClient(settings=settings, token_store=token_store)
