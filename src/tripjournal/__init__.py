"""TripJournal - async client for the TripJournal REST API."""

from tripjournal.core import (
    BadResponseError,
    ConfigurationError,
    DecodeError,
    InvalidURLError,
    JournalClient,
    JournalServiceProtocol,
    JournalSettings,
    NetworkError,
    SessionState,
    TokenSettings,
    TripJournalError,
    UnauthorizedError,
)
from tripjournal.models import (
    Event,
    EventCreate,
    EventUpdate,
    Location,
    Media,
    MediaCreate,
    RegisterUser,
    Token,
    Trip,
    TripCreate,
    TripUpdate,
)
from tripjournal.service import MemoryJournalService
from tripjournal.storage import FileKeyValueStore, KeyValueStoreProtocol, MemoryKeyValueStore
from tripjournal.token import TokenStore

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022
    "__version__",
    # Client
    "JournalClient",
    "JournalServiceProtocol",
    "MemoryJournalService",
    "SessionState",
    # Settings
    "JournalSettings",
    "TokenSettings",
    # Token storage
    "TokenStore",
    "KeyValueStoreProtocol",
    "MemoryKeyValueStore",
    "FileKeyValueStore",
    # Models
    "Token",
    "RegisterUser",
    "Location",
    "Media",
    "MediaCreate",
    "Event",
    "EventCreate",
    "EventUpdate",
    "Trip",
    "TripCreate",
    "TripUpdate",
    # Exceptions
    "TripJournalError",
    "ConfigurationError",
    "NetworkError",
    "InvalidURLError",
    "BadResponseError",
    "UnauthorizedError",
    "DecodeError",
]
