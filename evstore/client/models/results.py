"""Read results returned to callers."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.enums import EventReadStatus, StreamReadStatus
from .event_info import EventInfo, Link


class EventReadResult(BaseModel):
    """Outcome of a typed single-event read."""

    status: EventReadStatus
    event: EventInfo | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_event(self) -> EventReadResult:
        if self.status == EventReadStatus.SUCCESS and self.event is None:
            raise ValueError("successful read must carry an event")
        return self

    @classmethod
    def not_found(cls) -> EventReadResult:
        return cls(status=EventReadStatus.NOT_FOUND)

    @classmethod
    def stream_deleted(cls) -> EventReadResult:
        return cls(status=EventReadStatus.STREAM_DELETED)


class StreamEventsSlice(BaseModel):
    """A page of stream events, always ordered oldest first.

    Besides ``status`` and ``entries`` the slice carries the feed attributes
    reported by the store.
    """

    status: StreamReadStatus = StreamReadStatus.SUCCESS
    entries: list[EventInfo] = Field(default_factory=list)
    title: str | None = None
    id: str | None = None
    updated: datetime | None = None
    stream_id: str | None = Field(None, alias="streamId")
    head_of_stream: bool = Field(False, alias="headOfStream")
    self_url: str | None = Field(None, alias="selfUrl")
    etag: str | None = Field(None, alias="eTag")
    links: list[Link] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def stream_not_found(cls) -> StreamEventsSlice:
        return cls(status=StreamReadStatus.STREAM_NOT_FOUND)

    @classmethod
    def stream_deleted(cls) -> StreamEventsSlice:
        return cls(status=StreamReadStatus.STREAM_DELETED)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def last_event_number(self) -> int | None:
        """Event number of the newest entry in the slice."""
        return self.entries[-1].event_number if self.entries else None
