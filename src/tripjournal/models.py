"""Wire models for the TripJournal API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Token(WireModel):
    access_token: str
    token_type: str = "bearer"


class RegisterUser(WireModel):
    username: str
    password: str


class Location(WireModel):
    latitude: float
    longitude: float
    address: str | None = None


class Media(WireModel):
    id: int
    url: str


class Event(WireModel):
    id: int
    name: str
    note: str | None = None
    date: datetime
    location: Location | None = None
    medias: list[Media] = Field(default_factory=list)
    transition_from_previous: str | None = None


class Trip(WireModel):
    id: int
    name: str
    start_date: datetime
    end_date: datetime
    events: list[Event] = Field(default_factory=list)


class TripCreate(WireModel):
    name: str
    start_date: datetime
    end_date: datetime


class TripUpdate(WireModel):
    name: str
    start_date: datetime
    end_date: datetime


class EventCreate(WireModel):
    trip_id: int
    name: str
    note: str | None = None
    date: datetime
    location: Location | None = None
    transition_from_previous: str | None = None


class EventUpdate(WireModel):
    name: str
    note: str | None = None
    date: datetime
    location: Location | None = None
    transition_from_previous: str | None = None


class MediaCreate(WireModel):
    event_id: int
    base64_data: str
