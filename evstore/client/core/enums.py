"""Core enumerations and tagged values for stream operations.

Architecture:
    The store's HTTP API encodes optimistic concurrency and read positions as
    magic integers (-1, -2, -4 for expected versions, -1 for "head"). This
    module models them as small immutable tagged values instead, and only
    renders the wire representation when a request is built.

Key Types:
    - ExpectedVersion: ANY, NO_STREAM, STREAM_EXISTS or an exact event number
    - StreamPosition: an exact event number or END (the most recent event)
    - ReadDirection: forward/backward slice reads
    - EventReadStatus / StreamReadStatus: read outcome classification

See Also:
    - StreamRequestBuilder: converts these values into headers and URLs
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

_ANY = -2
_NO_STREAM = -1
_STREAM_EXISTS = -4
_END = -1


@dataclass(frozen=True)
class ExpectedVersion:
    """Optimistic-concurrency token sent on append and delete.

    Use the class constants for the sentinel cases and ``exact(n)`` for a
    specific event number.

    Example:
        >>> ExpectedVersion.exact(3).header_value
        '3'
        >>> ExpectedVersion.ANY.header_value
        '-2'
    """

    value: int

    ANY: ClassVar[ExpectedVersion]
    NO_STREAM: ClassVar[ExpectedVersion]
    STREAM_EXISTS: ClassVar[ExpectedVersion]

    def __post_init__(self) -> None:
        if self.value < 0 and self.value not in (_ANY, _NO_STREAM, _STREAM_EXISTS):
            raise ValueError(f"Invalid expected version: {self.value}")

    @classmethod
    def exact(cls, event_number: int) -> ExpectedVersion:
        """Expect the stream to be at exactly ``event_number``."""
        if event_number < 0:
            raise ValueError("Exact expected version must be >= 0")
        return cls(event_number)

    @classmethod
    def coerce(cls, value: ExpectedVersion | int) -> ExpectedVersion:
        """Accept either a tagged value or the store's raw integer."""
        if isinstance(value, ExpectedVersion):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected version must be an int, got {type(value).__name__}")
        return cls(value)

    @property
    def is_exact(self) -> bool:
        return self.value >= 0

    @property
    def header_value(self) -> str:
        """Value of the ``ES-ExpectedVersion`` header."""
        return str(self.value)

    def __str__(self) -> str:
        names = {_ANY: "ANY", _NO_STREAM: "NO_STREAM", _STREAM_EXISTS: "STREAM_EXISTS"}
        return names.get(self.value, str(self.value))


ExpectedVersion.ANY = ExpectedVersion(_ANY)
ExpectedVersion.NO_STREAM = ExpectedVersion(_NO_STREAM)
ExpectedVersion.STREAM_EXISTS = ExpectedVersion(_STREAM_EXISTS)


@dataclass(frozen=True)
class StreamPosition:
    """Position of an event within a stream.

    ``END`` means "the most recent event" and is rendered as ``head`` in
    URLs, never as a number.
    """

    value: int

    START: ClassVar[StreamPosition]
    END: ClassVar[StreamPosition]

    def __post_init__(self) -> None:
        if self.value < 0 and self.value != _END:
            raise ValueError(f"Invalid stream position: {self.value}")

    @classmethod
    def at(cls, event_number: int) -> StreamPosition:
        if event_number < 0:
            raise ValueError("Stream position must be >= 0")
        return cls(event_number)

    @classmethod
    def coerce(cls, value: StreamPosition | int) -> StreamPosition:
        """Accept either a tagged value or a raw integer (-1 means END)."""
        if isinstance(value, StreamPosition):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Stream position must be an int, got {type(value).__name__}")
        return cls(value)

    @property
    def is_end(self) -> bool:
        return self.value == _END

    @property
    def url_token(self) -> str:
        """Path segment used in stream URLs."""
        return "head" if self.is_end else str(self.value)

    def __str__(self) -> str:
        return self.url_token


StreamPosition.START = StreamPosition(0)
StreamPosition.END = StreamPosition(_END)


class ReadDirection(str, Enum):
    """Direction of a stream slice read, as it appears in the slice URL."""

    FORWARD = "forward"
    BACKWARD = "backward"


class EventReadStatus(str, Enum):
    """Outcome of a typed single-event read."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    STREAM_DELETED = "stream_deleted"


class StreamReadStatus(str, Enum):
    """Outcome of a stream slice read."""

    SUCCESS = "success"
    STREAM_NOT_FOUND = "stream_not_found"
    STREAM_DELETED = "stream_deleted"
