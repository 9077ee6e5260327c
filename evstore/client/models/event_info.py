"""Stored event model.

The store returns events in two shapes:

- a single-event Atom document, where the event fields sit under ``content``
  next to the Atom attributes (``title``, ``id``, ``updated``, ``links``)
- a flat ``embed=rich`` feed entry, where every field is top-level

``EventInfo`` accepts both.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, model_validator

T = TypeVar("T")


class Link(BaseModel):
    """Atom link."""

    uri: str
    relation: str

    model_config = ConfigDict(frozen=True)


class EventInfo(BaseModel):
    """A single event as stored by the store."""

    event_number: int = Field(..., ge=0, alias="eventNumber")
    event_type: str | None = Field(None, alias="eventType")
    event_id: str | None = Field(None, alias="eventId")
    stream_id: str | None = Field(
        None, validation_alias=AliasChoices("stream_id", "streamId", "eventStreamId")
    )
    data: Any = None
    metadata: Any = Field(None, validation_alias=AliasChoices("metadata", "metaData"))
    is_json: bool | None = Field(None, alias="isJson")
    position_event_number: int | None = Field(None, alias="positionEventNumber")
    title: str | None = None
    id: str | None = None
    summary: str | None = None
    updated: datetime | None = None
    links: list[Link] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def flatten_content(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        content = values.get("content")
        if not isinstance(content, dict):
            return values
        merged = {key: value for key, value in values.items() if key != "content"}
        for key, value in content.items():
            merged.setdefault(key, value)
        return merged

    def data_as(self, target: type[T]) -> T:
        """Convert the event body into ``target``.

        Bodies delivered as JSON text are parsed first.
        """
        adapter = TypeAdapter(target)
        if isinstance(self.data, (str, bytes)):
            return adapter.validate_json(self.data)
        return adapter.validate_python(self.data)
