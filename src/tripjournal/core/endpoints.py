"""Endpoint paths for the TripJournal API."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Literal, TypeAlias
from urllib.parse import urlparse, urlunparse

from tripjournal.core.exceptions import InvalidURLError

Operation: TypeAlias = Literal[
    "register",
    "login",
    "trips",
    "trip",
    "events",
    "event",
    "medias",
    "media",
]

PathTemplate: TypeAlias = Callable[..., str]


class HTTPMethod(StrEnum):
    POST = "POST"
    GET = "GET"
    PUT = "PUT"
    DELETE = "DELETE"


class MIMEType(StrEnum):
    JSON = "application/json"
    FORM = "application/x-www-form-urlencoded"


ENDPOINTS: Mapping[Operation, PathTemplate] = MappingProxyType(
    {
        "register": lambda: "register",
        "login": lambda: "token",
        "trips": lambda: "trips",
        "trip": lambda trip_id: f"trips/{trip_id}",
        "events": lambda: "events",
        "event": lambda event_id: f"events/{event_id}",
        "medias": lambda: "media",
        "media": lambda media_id: f"media/{media_id}",
    },
)


def join_url(base_url: str, path: str) -> str:
    parsed = urlparse(base_url)
    base_path = parsed.path.rstrip("/")
    append_path = path.lstrip("/")
    joined_path = f"{base_path}/{append_path}" if append_path else base_path
    return urlunparse(parsed._replace(path=joined_path))


def build_url(base_url: str, operation: Operation, *args: int) -> str:
    """Build the absolute URL for an operation.

    Args:
        base_url: Server root, e.g. ``http://127.0.0.1:8000/``
        operation: Key into ``ENDPOINTS``
        *args: Resource ID for the parameterized operations

    Raises:
        InvalidURLError: If the base URL has no scheme or host, the operation
            is unknown, or the ID arguments do not fit the path template.
    """
    msg = f"invalid base url: {base_url!r}"
    try:
        parsed = urlparse(base_url)
        # .port raises ValueError for a non-numeric or out-of-range port
        _ = parsed.port
    except ValueError as e:
        raise InvalidURLError(msg) from e

    if parsed.scheme not in {"http", "https"} or not parsed.hostname:
        raise InvalidURLError(msg)

    try:
        template = ENDPOINTS[operation]
    except KeyError as e:
        msg = f"unknown endpoint: {operation}"
        raise InvalidURLError(msg) from e

    try:
        path = template(*args)
    except TypeError as e:
        msg = f"wrong arguments for endpoint {operation}: {args}"
        raise InvalidURLError(msg) from e

    return join_url(base_url, path)
