from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from tripjournal.core.exceptions import ConfigurationError
from tripjournal.storage.file import FileKeyValueStore
from tripjournal.storage.memory import MemoryKeyValueStore

if TYPE_CHECKING:
    from tripjournal.core.settings import JournalSettings, TokenSettings
    from tripjournal.storage.protocols import KeyValueStoreProtocol

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenStore:
    """Persists one bearer token together with the time it was retrieved.

    The API does not report token lifetimes, so a token is trusted for a
    fixed window after retrieval. Reading it afterwards clears both keys.
    """

    def __init__(
        self,
        backend: KeyValueStoreProtocol,
        ttl: timedelta = timedelta(hours=1),
        *,
        clock: Callable[[], datetime] = _utcnow,
        access_token_key: str = "accessToken",
        retrieval_time_key: str = "tokenRetrievalTime",
    ) -> None:
        if ttl <= timedelta(0):
            msg = "token ttl must be positive"
            raise ConfigurationError(msg)

        self.backend = backend
        self.ttl = ttl
        self.clock = clock
        self.access_token_key = access_token_key
        self.retrieval_time_key = retrieval_time_key

    @classmethod
    def from_settings(cls, settings: JournalSettings | TokenSettings) -> TokenStore:
        token_settings = getattr(settings, "token", settings)
        backend: KeyValueStoreProtocol = (
            FileKeyValueStore(token_settings.path) if token_settings.path is not None else MemoryKeyValueStore()
        )
        return cls(
            backend,
            timedelta(seconds=token_settings.ttl_seconds),
            access_token_key=token_settings.access_token_key,
            retrieval_time_key=token_settings.retrieval_time_key,
        )

    def save(self, token: str) -> None:
        self.backend.set(self.access_token_key, token)
        self.backend.set(self.retrieval_time_key, self.clock().isoformat())

    def read(self) -> str | None:
        token = self.backend.get(self.access_token_key)
        raw_retrieved_at = self.backend.get(self.retrieval_time_key)
        if token is None or raw_retrieved_at is None:
            if token is not None or raw_retrieved_at is not None:
                self.clear()
            return None

        try:
            retrieved_at = datetime.fromisoformat(raw_retrieved_at)
        except ValueError:
            logger.warning("Discarding token with unparsable retrieval time: %r", raw_retrieved_at)
            self.clear()
            return None

        if retrieved_at.tzinfo is None:
            retrieved_at = retrieved_at.replace(tzinfo=UTC)

        if self.clock() - retrieved_at > self.ttl:
            logger.debug("Stored access token expired; clearing it")
            self.clear()
            return None

        return token

    def clear(self) -> None:
        self.backend.remove(self.access_token_key)
        self.backend.remove(self.retrieval_time_key)
