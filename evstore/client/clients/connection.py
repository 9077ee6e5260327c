"""HTTP connection to a single event store node.

The connection builds one request per operation, sends it through its
transport and interprets the response:

- 404 and 410 on reads become result statuses (``NOT_FOUND``,
  ``STREAM_DELETED``), except for the object-graph body read, which raises
  ``EventNotFoundError`` on 404 and returns ``None`` on 410
- any other non-2xx response raises ``StoreError``
- 2xx bodies are decoded; decode failures go to the error handler and are
  raised as ``DecodeError``

Nothing is retried. Slice entries are reversed because the Atom feed lists
them newest first.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar

from pydantic import TypeAdapter

from ..api.request_builder import StreamRequestBuilder
from ..core.enums import (
    EventReadStatus,
    ExpectedVersion,
    ReadDirection,
    StreamPosition,
    StreamReadStatus,
)
from ..core.exceptions import (
    ConnectionClosedError,
    DecodeError,
    EventNotFoundError,
    StoreError,
)
from ..core.settings import ConnectionSettings
from ..models import EventInfo, EventReadResult, NewEventData, StreamEventsSlice
from ..runtime.rest import HTTPClient, HttpRequest, HttpResponse, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EventStoreHttpConnection:
    """Event store connection over the HTTP/Atom API.

    Close the connection (or use it as an async context manager) to release
    the transport it created. A transport passed in through
    ``ConnectionSettings.transport`` is left open. Operations issued after
    ``close()`` raise ``ConnectionClosedError``.
    """

    def __init__(self, settings: ConnectionSettings, endpoint: str) -> None:
        if settings is None:
            raise ValueError("settings must not be None")
        if not endpoint:
            raise ValueError("endpoint must be a non-empty string")

        self._settings = settings
        self._requests = StreamRequestBuilder(endpoint)
        self._endpoint = self._requests.endpoint
        self._log = settings.logger or logger
        self._error_handler = settings.error_handler
        # An injected transport stays open for its owner to close.
        self._owns_transport = settings.transport is None
        self._transport: Transport = settings.transport or HTTPClient(
            credentials=settings.default_user_credentials,
            timeout=settings.connection_timeout,
        )
        self._closed = False

    @classmethod
    def create(
        cls, endpoint: str, settings: ConnectionSettings | None = None
    ) -> EventStoreHttpConnection:
        """Create a connection to a single node, with default settings if none given."""
        return cls(settings or ConnectionSettings.default(), endpoint)

    @property
    def connection_name(self) -> str:
        return self._settings.connection_name

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def closed(self) -> bool:
        return self._closed

    # ----------------------
    # Writes
    # ----------------------
    async def delete_stream(
        self,
        stream: str,
        expected_version: ExpectedVersion | int,
        hard_delete: bool = False,
    ) -> None:
        """Delete ``stream``.

        A soft delete lets the stream be recreated (numbering continues); a hard
        delete tombstones it permanently.

        Raises:
            StoreError: If the store rejects the delete
        """
        request = self._requests.delete(stream, expected_version, hard_delete)
        self._log.info("Deleting stream %s (hard=%s)", stream, hard_delete)

        response = await self._send(request)
        if not response.ok:
            self._log.error(
                "Error deleting stream %s (hard=%s, expectedVersion=%s)",
                stream,
                hard_delete,
                ExpectedVersion.coerce(expected_version),
                extra={"stream": stream, "status": response.status},
            )
            raise _store_error(response)

    async def append_to_stream(
        self,
        stream: str,
        expected_version: ExpectedVersion | int,
        *events: NewEventData,
    ) -> None:
        """Append ``events`` to ``stream``.

        An empty event list still sends the request. The store does not report
        the assigned event numbers.

        Raises:
            StoreError: If the store rejects the append
        """
        request = self._requests.append(stream, expected_version, events)
        self._log.info("Appending %d events to %s", len(events), stream)

        response = await self._send(request)
        if not response.ok:
            self._log.error(
                "Error appending %d events to %s",
                len(events),
                request.url,
                extra={"stream": stream, "status": response.status},
            )
            raise _store_error(response)

    async def append_events(self, stream: str, *events: NewEventData) -> None:
        """Append ``events`` without a concurrency check."""
        await self.append_to_stream(stream, ExpectedVersion.ANY, *events)

    async def append_objects(self, stream: str, *objects: Any, metadata: Any = None) -> None:
        """Append application objects, typed by class name, without a concurrency check."""
        events = [NewEventData.create(obj, metadata) for obj in objects]
        await self.append_to_stream(stream, ExpectedVersion.ANY, *events)

    # ----------------------
    # Single event reads
    # ----------------------
    async def read_event(self, stream: str, position: StreamPosition | int) -> EventReadResult:
        return await self.read_event_from_url(self.get_canonical_uri_for(stream, position))

    async def read_event_from_url(self, url: str) -> EventReadResult:
        """Read the event at ``url`` as an ``EventInfo``.

        Missing events and deleted streams are reported through the result
        status rather than raised.
        """
        self._log.info("Reading event from %s", url)
        response = await self._send(self._requests.read_event(url))

        if response.status == 404:
            self._log.warning("Read event: not found %s", url, extra={"url": url})
            return EventReadResult.not_found()

        if response.status == 410:
            self._log.warning("Read event: gone %s", url, extra={"url": url})
            return EventReadResult.stream_deleted()

        if not response.ok:
            self._log.error("Read event: other error (%d): %s", response.status, url)
            raise _store_error(response)

        event = self._decode(url, lambda: EventInfo.model_validate_json(response.body))
        return EventReadResult(status=EventReadStatus.SUCCESS, event=event)

    async def read_event_body(
        self, stream: str, position: StreamPosition | int
    ) -> dict[str, Any] | None:
        return await self.read_event_body_from_url(self.get_canonical_uri_for(stream, position))

    async def read_event_body_from_url(self, url: str) -> dict[str, Any] | None:
        """Read the raw JSON body of the event at ``url``.

        Unlike ``read_event_from_url``, a missing event raises
        ``EventNotFoundError``. A deleted stream or an empty body yields None.
        """
        self._log.info("Reading event body from %s", url)
        response = await self._send(self._requests.read_event_body(url))

        if response.status == 404:
            self._log.warning("Read event: not found %s", url, extra={"url": url})
            raise EventNotFoundError(url, response.status, response.text())

        if response.status == 410:
            self._log.warning("Read event: gone %s", url, extra={"url": url})
            return None

        if not response.ok:
            self._log.error("Read event: other error (%d): %s", response.status, url)
            raise _store_error(response)

        if not response.body.strip():
            return None
        return self._decode(url, lambda: _json_object(response.body))

    async def read_event_body_as(
        self, target: type[T], stream: str, position: StreamPosition | int
    ) -> T | None:
        return await self.read_event_body_as_from_url(
            target, self.get_canonical_uri_for(stream, position)
        )

    async def read_event_body_as_from_url(self, target: type[T], url: str) -> T | None:
        """Read the event body at ``url`` and convert it into ``target``.

        Follows the 404/410 rules of ``read_event_body_from_url``.
        """
        adapter = TypeAdapter(target)
        body = await self.read_event_body_from_url(url)
        if body is None:
            return None
        return self._decode(url, lambda: adapter.validate_python(body))

    # ----------------------
    # Slice reads
    # ----------------------
    async def read_stream_events_forward(
        self,
        stream: str,
        start: StreamPosition | int,
        count: int,
        long_poll: timedelta | float | None = None,
    ) -> StreamEventsSlice:
        return await self._read_stream_events(
            stream, start, count, long_poll, ReadDirection.FORWARD
        )

    async def read_stream_events_backward(
        self,
        stream: str,
        start: StreamPosition | int,
        count: int,
        long_poll: timedelta | float | None = None,
    ) -> StreamEventsSlice:
        return await self._read_stream_events(
            stream, start, count, long_poll, ReadDirection.BACKWARD
        )

    async def _read_stream_events(
        self,
        stream: str,
        start: StreamPosition | int,
        count: int,
        long_poll: timedelta | float | None,
        direction: ReadDirection,
    ) -> StreamEventsSlice:
        request = self._requests.read_slice(stream, start, direction, count, long_poll)
        url = request.url
        self._log.debug("Reading %ss from %s", direction.value, url)

        response = await self._send(request)

        if response.status == 404:
            self._log.warning("Event slice not found: %s", url, extra={"url": url})
            return StreamEventsSlice.stream_not_found()

        if response.status == 410:
            self._log.warning("Event slice gone: %s", url, extra={"url": url})
            return StreamEventsSlice.stream_deleted()

        if not response.ok:
            self._log.warning("Event slice: other error (%d): %s", response.status, url)
            raise _store_error(response)

        feed = self._decode(url, lambda: StreamEventsSlice.model_validate_json(response.body))
        # atom lists entries newest first
        return feed.model_copy(
            update={
                "status": StreamReadStatus.SUCCESS,
                "entries": list(reversed(feed.entries)),
            }
        )

    # ----------------------
    # Helpers
    # ----------------------
    def get_canonical_uri_for(self, stream: str, position: StreamPosition | int) -> str:
        """URL of the event at ``position``; END renders as ``head``."""
        return self._requests.event_url(stream, position)

    def handle_error(self, exc: BaseException) -> None:
        """Report ``exc`` to the configured error handler.

        The handler only observes: its own failures are logged and dropped so
        the caller still sees ``exc``.
        """
        if self._error_handler is None:
            return
        try:
            self._error_handler(self, exc)
        except Exception:
            self._log.exception("Error handler raised while reporting %r", exc)

    async def _send(self, request: HttpRequest) -> HttpResponse:
        if self._closed:
            raise ConnectionClosedError(f"Connection {self.connection_name} is closed")
        return await self._transport.send(request)

    def _decode(self, url: str, decode: Callable[[], T]) -> T:
        try:
            return decode()
        except Exception as exc:
            error = DecodeError(f"Error deserialising content from {url}: {exc}", url=url)
            self.handle_error(error)
            self._log.error("Error deserialising content from %s", url, exc_info=exc)
            raise error from exc

    async def close(self) -> None:
        """Release the transport this connection created. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> EventStoreHttpConnection:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"EventStoreHttpConnection(name={self.connection_name!r}, endpoint={self._endpoint!r})"


def _store_error(response: HttpResponse) -> StoreError:
    return StoreError(response.text(), response.reason, response.status)


def _json_object(body: bytes) -> dict[str, Any]:
    value = json.loads(body)
    if not isinstance(value, dict):
        raise ValueError(f"Expected a JSON object, got {type(value).__name__}")
    return value
