"""Integration tests against a running store's HTTP API."""

import os

import pytest

from evstore.client import (
    EventNotFoundError,
    EventReadStatus,
    ExpectedVersion,
    NewEventData,
    StoreError,
    StreamPosition,
    StreamReadStatus,
)

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_EVSTORE_NETWORK_TESTS") != "1",
    reason="Requires a running store to test the HTTP API",
)


class TestConnectionIntegration:
    """Round trips through a live store."""

    @pytest.mark.asyncio
    async def test_append_then_read_slices(self, connection, stream_name):
        events = [NewEventData(event_type="Counted", data={"n": n}) for n in range(3)]
        await connection.append_to_stream(stream_name, ExpectedVersion.NO_STREAM, *events)

        forward = await connection.read_stream_events_forward(stream_name, 0, 10)
        backward = await connection.read_stream_events_backward(
            stream_name, StreamPosition.END, 10
        )

        assert forward.status == StreamReadStatus.SUCCESS
        assert [e.event_number for e in forward.entries] == [0, 1, 2]
        assert [e.event_number for e in backward.entries] == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_read_single_event(self, connection, stream_name):
        await connection.append_events(stream_name, NewEventData(event_type="A", data={"x": 1}))

        result = await connection.read_event(stream_name, StreamPosition.END)
        body = await connection.read_event_body(stream_name, 0)

        assert result.status == EventReadStatus.SUCCESS
        assert result.event.event_type == "A"
        assert body == {"x": 1}

    @pytest.mark.asyncio
    async def test_missing_stream(self, connection, stream_name):
        result = await connection.read_event(stream_name, 0)
        slice_ = await connection.read_stream_events_forward(stream_name, 0, 5)

        assert result.status == EventReadStatus.NOT_FOUND
        assert slice_.status == StreamReadStatus.STREAM_NOT_FOUND
        with pytest.raises(EventNotFoundError):
            await connection.read_event_body(stream_name, 0)

    @pytest.mark.asyncio
    async def test_wrong_expected_version(self, connection, stream_name):
        await connection.append_events(stream_name, NewEventData(event_type="A"))

        with pytest.raises(StoreError):
            await connection.append_to_stream(
                stream_name, ExpectedVersion.exact(5), NewEventData(event_type="A")
            )

    @pytest.mark.asyncio
    async def test_hard_delete(self, connection, stream_name):
        await connection.append_events(stream_name, NewEventData(event_type="A"))
        await connection.delete_stream(stream_name, ExpectedVersion.ANY, hard_delete=True)

        result = await connection.read_stream_events_forward(stream_name, 0, 5)

        assert result.status == StreamReadStatus.STREAM_DELETED
