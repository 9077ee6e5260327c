"""Event data submitted on append."""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class NewEventData(BaseModel):
    """A single event to append to a stream.

    ``event_id`` lets the store detect duplicate appends; one is generated
    when not supplied.
    """

    event_type: str = Field(..., min_length=1, alias="eventType")
    event_id: UUID = Field(default_factory=uuid4, alias="eventId")
    data: Any = None
    metadata: Any = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    @classmethod
    def create(
        cls,
        event: Any,
        metadata: Any = None,
        *,
        event_type: str | None = None,
        event_id: UUID | None = None,
    ) -> NewEventData:
        """Wrap an application object as event data.

        The event type defaults to the object's class name. Pydantic models,
        dataclasses and plain containers are converted to JSON-ready data.
        """
        values: dict[str, Any] = {
            "event_type": event_type or type(event).__name__,
            "data": _to_jsonable(event),
            "metadata": _to_jsonable(metadata),
        }
        if event_id is not None:
            values["event_id"] = event_id
        return cls(**values)

    def to_wire(self) -> dict[str, Any]:
        """Representation used in the append request body."""
        return self.model_dump(mode="json", by_alias=True)


_payload_adapter: TypeAdapter[Any] = TypeAdapter(Any)


def _to_jsonable(value: Any) -> Any:
    if value is None:
        return None
    return _payload_adapter.dump_python(value, mode="json", by_alias=True)
