"""Async HTTP client for the TripJournal API."""

from __future__ import annotations

import logging
from functools import lru_cache
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Self, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from tripjournal.core.endpoints import HTTPMethod, MIMEType, Operation, build_url
from tripjournal.core.exceptions import BadResponseError, DecodeError, InvalidURLError, UnauthorizedError
from tripjournal.core.session import SessionState
from tripjournal.core.settings import JournalSettings
from tripjournal.models import (
    Event,
    EventCreate,
    EventUpdate,
    Media,
    MediaCreate,
    RegisterUser,
    Token,
    Trip,
    TripCreate,
    TripUpdate,
)
from tripjournal.token.store import TokenStore

if TYPE_CHECKING:
    from types import TracebackType

T = TypeVar("T")

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def _type_adapter(result_type: Any) -> TypeAdapter[Any]:  # noqa: ANN401
    return TypeAdapter(result_type)


class JournalClient:
    """Client for the TripJournal REST API.

    Holds the current access token in a ``SessionState`` and mirrors it into
    a ``TokenStore`` so it survives restarts. Every call performs exactly one
    request and maps the outcome onto the ``NetworkError`` family:

    - 2xx: the body is decoded into the declared result type
    - 401: ``UnauthorizedError``
    - any other status or a transport failure: ``BadResponseError``
    - a 2xx body that is not JSON or has the wrong shape: ``DecodeError``

    Attributes:
        settings: Client configuration
        token_store: Persistent token storage
        session: Observable authentication state

    Example:
        >>> async with JournalClient() as client:
        ...     await client.log_in("alice", "secret")
        ...     trips = await client.get_trips()
    """

    def __init__(
        self,
        settings: JournalSettings | None = None,
        token_store: TokenStore | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or JournalSettings()
        self.token_store = token_store or TokenStore.from_settings(self.settings)
        self.session = SessionState(self.token_store.read())
        self._http_client = http_client
        self._owns_http_client = False

    @classmethod
    def from_settings(cls, settings: JournalSettings) -> Self:
        return cls(settings=settings)

    async def __aenter__(self) -> Self:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(**self._client_options())
            self._owns_http_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    @property
    def access_token(self) -> str | None:
        return self.session.access_token

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def refresh_authentication(self) -> bool:
        """Drop the in-memory token once the stored copy has expired.

        Returns:
            Whether a usable token is still held.
        """
        if self.session.access_token is None:
            return False

        if (token := self.token_store.read()) is None:
            logger.info("Access token expired; signing out")
            self.session.clear()
            return False

        if token != self.session.access_token:
            self.session.set_token(token)
        return True

    # Authentication

    async def register(self, username: str, password: str) -> Token:
        user = RegisterUser(username=username, password=password)
        token = await self.perform_request_with_return(
            self.url("register"),
            HTTPMethod.POST,
            Token,
            json=user.model_dump(mode="json"),
            authenticated=False,
        )
        self._store_token(token)
        return token

    async def log_in(self, username: str, password: str) -> Token:
        token = await self.perform_request_with_return(
            self.url("login"),
            HTTPMethod.POST,
            Token,
            mime_type=MIMEType.FORM,
            data={"grant_type": "", "username": username, "password": password},
            authenticated=False,
        )
        self._store_token(token)
        return token

    def log_out(self) -> None:
        self.session.clear()
        self.token_store.clear()

    # Trips

    async def create_trip(self, request: TripCreate) -> Trip:
        return await self.perform_request_with_return(
            self.url("trips"),
            HTTPMethod.POST,
            Trip,
            json=request.model_dump(mode="json"),
        )

    async def get_trips(self) -> list[Trip]:
        return await self.perform_request_with_return(self.url("trips"), HTTPMethod.GET, list[Trip])

    async def get_trip(self, trip_id: int) -> Trip:
        return await self.perform_request_with_return(self.url("trip", trip_id), HTTPMethod.GET, Trip)

    async def update_trip(self, trip_id: int, request: TripUpdate) -> Trip:
        return await self.perform_request_with_return(
            self.url("trip", trip_id),
            HTTPMethod.PUT,
            Trip,
            json=request.model_dump(mode="json"),
        )

    async def delete_trip(self, trip_id: int) -> None:
        await self.perform_request(self.url("trip", trip_id), HTTPMethod.DELETE)

    # Events

    async def create_event(self, request: EventCreate) -> Event:
        return await self.perform_request_with_return(
            self.url("events"),
            HTTPMethod.POST,
            Event,
            json=request.model_dump(mode="json"),
        )

    async def update_event(self, event_id: int, request: EventUpdate) -> Event:
        return await self.perform_request_with_return(
            self.url("event", event_id),
            HTTPMethod.PUT,
            Event,
            json=request.model_dump(mode="json"),
        )

    async def delete_event(self, event_id: int) -> None:
        await self.perform_request(self.url("event", event_id), HTTPMethod.DELETE)

    # Media

    async def create_media(self, request: MediaCreate) -> Media:
        return await self.perform_request_with_return(
            self.url("medias"),
            HTTPMethod.POST,
            Media,
            json=request.model_dump(mode="json"),
        )

    async def delete_media(self, media_id: int) -> None:
        await self.perform_request(self.url("media", media_id), HTTPMethod.DELETE)

    # Request pipeline

    def url(self, operation: Operation, *args: int) -> str:
        return build_url(self.settings.base_url, operation, *args)

    async def perform_request(
        self,
        url: str,
        method: HTTPMethod,
        *,
        mime_type: MIMEType = MIMEType.JSON,
        json: Any = None,  # noqa: ANN401
        data: dict[str, str] | None = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Send one request and check its status.

        ``authenticated=False`` omits the bearer token, as for register and login.

        Raises:
            InvalidURLError: If httpx rejects the URL
            UnauthorizedError: On a 401 response
            BadResponseError: On any other non-2xx response or a transport failure
        """
        options: dict[str, Any] = {"json": json, "data": data, "authenticated": authenticated}
        try:
            if self._http_client is not None:
                response = await self._send(self._http_client, url, method, mime_type, **options)
            else:
                async with httpx.AsyncClient(**self._client_options()) as client:
                    response = await self._send(client, url, method, mime_type, **options)
        except httpx.InvalidURL as e:
            msg = f"invalid url: {url!r}"
            raise InvalidURLError(msg) from e
        except httpx.RequestError as e:
            logger.warning("Request %s %s failed: %s", method, url, e)
            msg = f"request failed: {method} {url}"
            raise BadResponseError(msg) from e

        if response.status_code == HTTPStatus.UNAUTHORIZED:
            logger.warning("Request %s %s was rejected as unauthorized", method, url)
            msg = f"unauthorized: {method} {url}"
            raise UnauthorizedError(msg)

        if not response.is_success:
            logger.warning("Request %s %s returned status %s", method, url, response.status_code)
            msg = f"bad response: {response.status_code}"
            raise BadResponseError(msg, status_code=response.status_code)

        return response

    async def perform_request_with_return(
        self,
        url: str,
        method: HTTPMethod,
        result_type: type[T],
        *,
        mime_type: MIMEType = MIMEType.JSON,
        json: Any = None,  # noqa: ANN401
        data: dict[str, str] | None = None,
        authenticated: bool = True,
    ) -> T:
        """Send one request and decode its JSON body into ``result_type``.

        Raises:
            UnauthorizedError: On a 401 response
            BadResponseError: On any other non-2xx response or a transport failure
            DecodeError: If the body is not JSON or does not match ``result_type``
        """
        response = await self.perform_request(
            url,
            method,
            mime_type=mime_type,
            json=json,
            data=data,
            authenticated=authenticated,
        )

        try:
            return _type_adapter(result_type).validate_json(response.content)
        except ValidationError as e:
            logger.warning("Unable to decode response from %s %s: %s", method, url, e)
            msg = f"failed to decode response from {method} {url}"
            raise DecodeError(msg) from e

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: str,
        method: HTTPMethod,
        mime_type: MIMEType,
        *,
        json: Any = None,  # noqa: ANN401
        data: dict[str, str] | None = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        request = client.build_request(
            method,
            url,
            headers=self._headers(mime_type, authenticated=authenticated),
            json=json,
            data=data,
        )
        logger.debug("Sending %s %s", method, url)
        return await client.send(request)

    def _headers(self, mime_type: MIMEType, *, authenticated: bool = True) -> dict[str, str]:
        headers = {"Content-Type": mime_type.value}
        if authenticated and self.refresh_authentication() and (token := self.session.access_token) is not None:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _client_options(self) -> dict[str, Any]:
        if self.settings.timeout_seconds is None:
            return {}
        return {"timeout": self.settings.timeout_seconds}

    def _store_token(self, token: Token) -> None:
        self.token_store.save(token.access_token)
        self.session.set_token(token.access_token)
