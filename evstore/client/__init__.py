"""evstore client - async client for an event store's HTTP/Atom API."""

from .api import StreamRequestBuilder
from .clients import EventStoreHttpConnection
from .core import (
    ConnectionClosedError,
    ConnectionSettings,
    DecodeError,
    EventNotFoundError,
    EventReadStatus,
    EventStoreError,
    ExpectedVersion,
    ReadDirection,
    StoreError,
    StreamPosition,
    StreamReadStatus,
    TransportError,
    UserCredentials,
)
from .models import EventInfo, EventReadResult, Link, NewEventData, StreamEventsSlice
from .runtime import HTTPClient, HttpRequest, HttpResponse, Transport

__version__ = "0.1.0"

__all__ = [
    # Connection
    "EventStoreHttpConnection",
    "ConnectionSettings",
    "UserCredentials",
    "StreamRequestBuilder",
    # Transport
    "Transport",
    "HTTPClient",
    "HttpRequest",
    "HttpResponse",
    # Values
    "ExpectedVersion",
    "StreamPosition",
    "ReadDirection",
    "EventReadStatus",
    "StreamReadStatus",
    # Models
    "NewEventData",
    "EventInfo",
    "Link",
    "EventReadResult",
    "StreamEventsSlice",
    # Exceptions
    "EventStoreError",
    "TransportError",
    "ConnectionClosedError",
    "StoreError",
    "EventNotFoundError",
    "DecodeError",
]
