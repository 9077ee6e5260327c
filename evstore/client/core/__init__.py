"""Core components."""

from .enums import (
    EventReadStatus,
    ExpectedVersion,
    ReadDirection,
    StreamPosition,
    StreamReadStatus,
)
from .exceptions import (
    ConnectionClosedError,
    DecodeError,
    EventNotFoundError,
    EventStoreError,
    StoreError,
    TransportError,
)
from .settings import ConnectionSettings, ErrorHandler, UserCredentials

__all__ = [
    "ExpectedVersion",
    "StreamPosition",
    "ReadDirection",
    "EventReadStatus",
    "StreamReadStatus",
    "EventStoreError",
    "TransportError",
    "ConnectionClosedError",
    "StoreError",
    "EventNotFoundError",
    "DecodeError",
    "ConnectionSettings",
    "UserCredentials",
    "ErrorHandler",
]
