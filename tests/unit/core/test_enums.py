"""Unit tests for core enums and tagged values."""

import pytest

from evstore.client.core import (
    EventReadStatus,
    ExpectedVersion,
    ReadDirection,
    StreamPosition,
    StreamReadStatus,
)


def test_expected_version_sentinel_header_values():
    """Sentinels render as the store's magic integers."""
    assert ExpectedVersion.ANY.header_value == "-2"
    assert ExpectedVersion.NO_STREAM.header_value == "-1"
    assert ExpectedVersion.STREAM_EXISTS.header_value == "-4"


def test_expected_version_exact():
    """Exact versions render as the event number."""
    version = ExpectedVersion.exact(7)
    assert version.header_value == "7"
    assert version.is_exact
    assert not ExpectedVersion.ANY.is_exact


def test_expected_version_exact_rejects_negative():
    with pytest.raises(ValueError):
        ExpectedVersion.exact(-1)


def test_expected_version_coerce_int_maps_to_sentinel():
    """Raw integers coerce to the equal tagged value."""
    assert ExpectedVersion.coerce(-2) == ExpectedVersion.ANY
    assert ExpectedVersion.coerce(-1) == ExpectedVersion.NO_STREAM
    assert ExpectedVersion.coerce(-4) == ExpectedVersion.STREAM_EXISTS
    assert ExpectedVersion.coerce(3) == ExpectedVersion.exact(3)
    assert ExpectedVersion.coerce(ExpectedVersion.ANY) is ExpectedVersion.ANY


def test_expected_version_coerce_rejects_unknown_negative():
    with pytest.raises(ValueError):
        ExpectedVersion.coerce(-3)


def test_expected_version_coerce_rejects_non_int():
    with pytest.raises(TypeError):
        ExpectedVersion.coerce("1")
    with pytest.raises(TypeError):
        ExpectedVersion.coerce(True)


def test_expected_version_str():
    assert str(ExpectedVersion.ANY) == "ANY"
    assert str(ExpectedVersion.exact(4)) == "4"


def test_stream_position_end_renders_head():
    """END is the literal head token, never a number."""
    assert StreamPosition.END.url_token == "head"
    assert StreamPosition.END.is_end
    assert StreamPosition.coerce(-1) == StreamPosition.END


def test_stream_position_exact():
    assert StreamPosition.at(12).url_token == "12"
    assert StreamPosition.START.url_token == "0"
    assert StreamPosition.coerce(5) == StreamPosition.at(5)


def test_stream_position_rejects_invalid():
    with pytest.raises(ValueError):
        StreamPosition.at(-1)
    with pytest.raises(ValueError):
        StreamPosition.coerce(-2)
    with pytest.raises(TypeError):
        StreamPosition.coerce(1.5)


def test_read_direction_values():
    assert ReadDirection.FORWARD.value == "forward"
    assert ReadDirection.BACKWARD.value == "backward"
    assert ReadDirection("backward") is ReadDirection.BACKWARD


def test_read_status_values():
    assert EventReadStatus.NOT_FOUND.value == "not_found"
    assert StreamReadStatus.STREAM_DELETED.value == "stream_deleted"
