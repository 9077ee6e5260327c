"""Request construction for stream operations.

Architecture:
    Every stream operation maps to exactly one HTTP request. This module owns
    that mapping: canonical URL shapes, protocol headers and the append body.
    It performs no I/O, so URL shape depends only on the builder's endpoint
    and the call arguments.

URL Shapes:
    - Event:  {endpoint}/streams/{stream}/{position|head}
    - Slice:  {endpoint}/streams/{stream}/{start}/{direction}/{count}?embed=rich
    - Stream: {endpoint}/streams/{stream}  (append and delete)

Note:
    Stream names are inserted as-is. Callers must supply URL-safe names.

See Also:
    - EventStoreHttpConnection: sends these requests and interprets responses
"""

from __future__ import annotations

import json
import math
from collections.abc import Sequence
from datetime import timedelta

from ..core.enums import ExpectedVersion, ReadDirection, StreamPosition
from ..models import NewEventData
from ..runtime.rest.transport import HttpRequest

__all__ = [
    "StreamRequestBuilder",
    "validate_stream_name",
    "long_poll_seconds",
    "EXPECTED_VERSION_HEADER",
    "HARD_DELETE_HEADER",
    "LONG_POLL_HEADER",
    "EVENTS_MEDIA_TYPE",
    "ATOM_JSON_MEDIA_TYPE",
    "JSON_MEDIA_TYPE",
]

EXPECTED_VERSION_HEADER = "ES-ExpectedVersion"
HARD_DELETE_HEADER = "ES-HardDelete"
LONG_POLL_HEADER = "ES-LongPoll"

EVENTS_MEDIA_TYPE = "application/vnd.eventstore.events+json"
ATOM_JSON_MEDIA_TYPE = "application/vnd.eventstore.atom+json"
JSON_MEDIA_TYPE = "application/json"


def validate_stream_name(stream: str) -> None:
    if not stream or not isinstance(stream, str):
        raise ValueError("Stream name must be a non-empty string")


def long_poll_seconds(long_poll: timedelta | float | None) -> int | None:
    """Whole seconds to request via ``ES-LongPoll``, or None below one second."""
    if long_poll is None:
        return None
    seconds = long_poll.total_seconds() if isinstance(long_poll, timedelta) else float(long_poll)
    if not math.isfinite(seconds):
        raise ValueError(f"long_poll must be finite, got {long_poll!r}")
    if seconds < 1:
        return None
    return int(seconds)


class StreamRequestBuilder:
    """Builds the HTTP request for each stream operation against one endpoint."""

    def __init__(self, endpoint: str) -> None:
        if not endpoint:
            raise ValueError("endpoint must be a non-empty string")
        self.endpoint = endpoint.rstrip("/")

    # ----------------------
    # URLs
    # ----------------------
    def stream_url(self, stream: str) -> str:
        validate_stream_name(stream)
        return f"{self.endpoint}/streams/{stream}"

    def event_url(self, stream: str, position: StreamPosition | int) -> str:
        position = StreamPosition.coerce(position)
        return f"{self.stream_url(stream)}/{position.url_token}"

    def slice_url(
        self,
        stream: str,
        start: StreamPosition | int,
        direction: ReadDirection,
        count: int,
    ) -> str:
        start = StreamPosition.coerce(start)
        if count < 1:
            raise ValueError("count must be >= 1")
        direction = ReadDirection(direction)
        return (
            f"{self.stream_url(stream)}/{start.url_token}/{direction.value}/{count}?embed=rich"
        )

    # ----------------------
    # Requests
    # ----------------------
    def append(
        self,
        stream: str,
        expected_version: ExpectedVersion | int,
        events: Sequence[NewEventData],
    ) -> HttpRequest:
        expected_version = ExpectedVersion.coerce(expected_version)
        body = json.dumps([event.to_wire() for event in events]).encode("utf-8")
        return HttpRequest(
            method="POST",
            url=self.stream_url(stream),
            headers={
                "Content-Type": EVENTS_MEDIA_TYPE,
                EXPECTED_VERSION_HEADER: expected_version.header_value,
            },
            body=body,
        )

    def delete(
        self,
        stream: str,
        expected_version: ExpectedVersion | int,
        hard_delete: bool = False,
    ) -> HttpRequest:
        expected_version = ExpectedVersion.coerce(expected_version)
        headers = {EXPECTED_VERSION_HEADER: expected_version.header_value}
        if hard_delete:
            headers[HARD_DELETE_HEADER] = "true"
        return HttpRequest(method="DELETE", url=self.stream_url(stream), headers=headers)

    def read_event(self, url: str) -> HttpRequest:
        """Rich Atom representation of a single event."""
        return HttpRequest(method="GET", url=url, headers={"Accept": ATOM_JSON_MEDIA_TYPE})

    def read_event_body(self, url: str) -> HttpRequest:
        """Plain JSON body of a single event."""
        return HttpRequest(method="GET", url=url, headers={"Accept": JSON_MEDIA_TYPE})

    def read_slice(
        self,
        stream: str,
        start: StreamPosition | int,
        direction: ReadDirection,
        count: int,
        long_poll: timedelta | float | None = None,
    ) -> HttpRequest:
        headers = {"Accept": ATOM_JSON_MEDIA_TYPE}
        seconds = long_poll_seconds(long_poll)
        if seconds is not None:
            headers[LONG_POLL_HEADER] = str(seconds)
        return HttpRequest(
            method="GET",
            url=self.slice_url(stream, start, direction, count),
            headers=headers,
        )
