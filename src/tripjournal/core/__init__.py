"""Client core: settings, errors, endpoints, session state and the HTTP client."""

from tripjournal.core.client import JournalClient
from tripjournal.core.endpoints import ENDPOINTS, HTTPMethod, MIMEType, build_url
from tripjournal.core.exceptions import (
    BadResponseError,
    ConfigurationError,
    DecodeError,
    InvalidURLError,
    NetworkError,
    TripJournalError,
    UnauthorizedError,
)
from tripjournal.core.protocols import JournalServiceProtocol
from tripjournal.core.session import SessionState
from tripjournal.core.settings import JournalSettings, TokenSettings

__all__ = [
    "ENDPOINTS",
    "BadResponseError",
    "ConfigurationError",
    "DecodeError",
    "HTTPMethod",
    "InvalidURLError",
    "JournalClient",
    "JournalServiceProtocol",
    "JournalSettings",
    "MIMEType",
    "NetworkError",
    "SessionState",
    "TokenSettings",
    "TripJournalError",
    "UnauthorizedError",
    "build_url",
]
