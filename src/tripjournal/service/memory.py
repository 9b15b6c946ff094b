from __future__ import annotations

import secrets
from http import HTTPStatus
from itertools import count

from tripjournal.core.exceptions import BadResponseError, UnauthorizedError
from tripjournal.core.session import SessionState
from tripjournal.models import (
    Event,
    EventCreate,
    EventUpdate,
    Media,
    MediaCreate,
    Token,
    Trip,
    TripCreate,
    TripUpdate,
)


def _not_found(kind: str, resource_id: int) -> BadResponseError:
    msg = f"{kind} {resource_id} not found"
    return BadResponseError(msg, status_code=HTTPStatus.NOT_FOUND)


class MemoryJournalService:
    """Offline journal backend that keeps everything in process memory.

    Mirrors the status handling of ``JournalClient``: data operations
    without a token raise ``UnauthorizedError`` and unknown IDs raise
    ``BadResponseError`` with a 404 status. Returned models are copies.
    """

    def __init__(self) -> None:
        self.session = SessionState()
        self._users: dict[str, str] = {}
        self._trips: dict[int, Trip] = {}
        self._event_trips: dict[int, int] = {}
        self._media_events: dict[int, int] = {}
        self._trip_ids = count(1)
        self._event_ids = count(1)
        self._media_ids = count(1)

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    async def register(self, username: str, password: str) -> Token:
        if username in self._users:
            msg = f"username already registered: {username}"
            raise BadResponseError(msg, status_code=HTTPStatus.BAD_REQUEST)
        self._users[username] = password
        return self._issue_token()

    async def log_in(self, username: str, password: str) -> Token:
        stored = self._users.get(username)
        if stored is None or not secrets.compare_digest(stored, password):
            msg = "incorrect username or password"
            raise UnauthorizedError(msg)
        return self._issue_token()

    def log_out(self) -> None:
        self.session.clear()

    async def create_trip(self, request: TripCreate) -> Trip:
        self._require_auth()
        trip = Trip(id=next(self._trip_ids), **request.model_dump())
        self._trips[trip.id] = trip
        return trip.model_copy(deep=True)

    async def get_trips(self) -> list[Trip]:
        self._require_auth()
        return [trip.model_copy(deep=True) for trip in self._trips.values()]

    async def get_trip(self, trip_id: int) -> Trip:
        self._require_auth()
        return self._trip(trip_id).model_copy(deep=True)

    async def update_trip(self, trip_id: int, request: TripUpdate) -> Trip:
        self._require_auth()
        trip = Trip.model_validate({**self._trip(trip_id).model_dump(), **request.model_dump()})
        self._trips[trip_id] = trip
        return trip.model_copy(deep=True)

    async def delete_trip(self, trip_id: int) -> None:
        self._require_auth()
        trip = self._trip(trip_id)
        for event in trip.events:
            self._event_trips.pop(event.id, None)
            for media in event.medias:
                self._media_events.pop(media.id, None)
        del self._trips[trip_id]

    async def create_event(self, request: EventCreate) -> Event:
        self._require_auth()
        trip = self._trip(request.trip_id)
        event = Event(id=next(self._event_ids), **request.model_dump(exclude={"trip_id"}))
        trip.events.append(event)
        self._event_trips[event.id] = trip.id
        return event.model_copy(deep=True)

    async def update_event(self, event_id: int, request: EventUpdate) -> Event:
        self._require_auth()
        trip, index = self._event_slot(event_id)
        event = Event.model_validate({**trip.events[index].model_dump(), **request.model_dump()})
        trip.events[index] = event
        return event.model_copy(deep=True)

    async def delete_event(self, event_id: int) -> None:
        self._require_auth()
        trip, index = self._event_slot(event_id)
        event = trip.events.pop(index)
        del self._event_trips[event_id]
        for media in event.medias:
            self._media_events.pop(media.id, None)

    async def create_media(self, request: MediaCreate) -> Media:
        self._require_auth()
        trip, index = self._event_slot(request.event_id)
        media_id = next(self._media_ids)
        media = Media(id=media_id, url=f"memory://media/{media_id}")
        trip.events[index].medias.append(media)
        self._media_events[media.id] = request.event_id
        return media.model_copy(deep=True)

    async def delete_media(self, media_id: int) -> None:
        self._require_auth()
        if (event_id := self._media_events.pop(media_id, None)) is None:
            raise _not_found("media", media_id)
        trip, index = self._event_slot(event_id)
        event = trip.events[index]
        event.medias = [media for media in event.medias if media.id != media_id]

    def _issue_token(self) -> Token:
        token = Token(access_token=secrets.token_urlsafe(32))
        self.session.set_token(token.access_token)
        return token

    def _require_auth(self) -> None:
        if not self.session.is_authenticated:
            msg = "not authenticated"
            raise UnauthorizedError(msg)

    def _trip(self, trip_id: int) -> Trip:
        if (trip := self._trips.get(trip_id)) is None:
            raise _not_found("trip", trip_id)
        return trip

    def _event_slot(self, event_id: int) -> tuple[Trip, int]:
        if (trip_id := self._event_trips.get(event_id)) is None:
            raise _not_found("event", event_id)
        trip = self._trips[trip_id]
        index = next(i for i, event in enumerate(trip.events) if event.id == event_id)
        return trip, index
