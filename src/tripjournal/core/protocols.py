from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
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


@runtime_checkable
class JournalServiceProtocol(Protocol):
    """Operations a TripJournal backend offers to the app."""

    @property
    def session(self) -> SessionState: ...

    @property
    def is_authenticated(self) -> bool: ...

    async def register(self, username: str, password: str) -> Token: ...

    async def log_in(self, username: str, password: str) -> Token: ...

    def log_out(self) -> None: ...

    async def create_trip(self, request: TripCreate) -> Trip: ...

    async def get_trips(self) -> list[Trip]: ...

    async def get_trip(self, trip_id: int) -> Trip: ...

    async def update_trip(self, trip_id: int, request: TripUpdate) -> Trip: ...

    async def delete_trip(self, trip_id: int) -> None: ...

    async def create_event(self, request: EventCreate) -> Event: ...

    async def update_event(self, event_id: int, request: EventUpdate) -> Event: ...

    async def delete_event(self, event_id: int) -> None: ...

    async def create_media(self, request: MediaCreate) -> Media: ...

    async def delete_media(self, media_id: int) -> None: ...
