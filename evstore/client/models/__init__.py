"""Data models for stream operations.

Architecture:
    Pydantic v2 models shared by the connection and its callers. All models
    are immutable (frozen=True); results are rebuilt fresh on every read.

Model Categories:
    - Writes: NewEventData
    - Reads: EventInfo, Link, EventReadResult, StreamEventsSlice
"""

from .event_data import NewEventData
from .event_info import EventInfo, Link
from .results import EventReadResult, StreamEventsSlice

__all__ = [
    "NewEventData",
    "EventInfo",
    "Link",
    "EventReadResult",
    "StreamEventsSlice",
]
