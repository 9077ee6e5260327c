"""Unit tests for read result models."""

import pytest
from pydantic import ValidationError

from evstore.client.core import EventReadStatus, StreamReadStatus
from evstore.client.models import EventInfo, EventReadResult, StreamEventsSlice


def test_success_requires_event():
    with pytest.raises(ValidationError):
        EventReadResult(status=EventReadStatus.SUCCESS)


def test_not_found_and_deleted_have_no_event():
    assert EventReadResult.not_found().status == EventReadStatus.NOT_FOUND
    assert EventReadResult.not_found().event is None
    assert EventReadResult.stream_deleted().status == EventReadStatus.STREAM_DELETED


def test_slice_factories_are_empty():
    not_found = StreamEventsSlice.stream_not_found()
    deleted = StreamEventsSlice.stream_deleted()

    assert not_found.status == StreamReadStatus.STREAM_NOT_FOUND
    assert deleted.status == StreamReadStatus.STREAM_DELETED
    assert not_found.is_empty and deleted.is_empty
    assert deleted.last_event_number is None


def test_slice_feed_attributes():
    feed = StreamEventsSlice.model_validate(
        {
            "title": "Event stream 'orders-1'",
            "id": "http://127.0.0.1:2113/streams/orders-1",
            "streamId": "orders-1",
            "headOfStream": True,
            "selfUrl": "http://127.0.0.1:2113/streams/orders-1",
            "eTag": "4;-1296467268",
            "links": [{"uri": "http://127.0.0.1:2113/streams/orders-1", "relation": "self"}],
            "entries": [{"eventNumber": 1}, {"eventNumber": 0}],
        }
    )

    assert feed.stream_id == "orders-1"
    assert feed.head_of_stream is True
    assert feed.etag == "4;-1296467268"
    assert [entry.event_number for entry in feed.entries] == [1, 0]


def test_last_event_number():
    feed = StreamEventsSlice(
        entries=[EventInfo(event_number=0), EventInfo(event_number=1)],
    )
    assert feed.last_event_number == 1
